"""
Host wiring shared by the CLI and HTTP entry points.

Builds a StudentRegistry over the durable file store, with the event log
attached when auditing is enabled.
"""

import logging

from student_registry.audit.logger import EventLog
from student_registry.config import RegistryConfig
from student_registry.registry.service import StudentRegistry
from student_registry.store.file import JsonFileStore


def configure_logging(config: RegistryConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def open_registry(config: RegistryConfig | None = None) -> StudentRegistry:
    """Open the registry stored under ``config.state_dir``."""
    config = config or RegistryConfig.from_env()
    store = JsonFileStore(config.state_dir)
    event_sink = EventLog(config.audit_dir).log if config.audit_enabled else None
    return StudentRegistry(store, event_sink=event_sink)
