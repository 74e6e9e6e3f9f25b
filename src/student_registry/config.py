"""
Configuration for Student Registry hosts.

Environment variables:
- SR_STATE_DIR: Directory holding registry.json (default: var/registry)
- SR_AUDIT_DIR: Directory holding event logs (default: var/audit)
- SR_AUDIT_ENABLED: Write emitted events to the event log (default: true)
- SR_CALLER: Default caller identity for the CLI
- SR_CALLER_HEADER: HTTP header carrying the caller identity (default: x-caller-id)
- SR_LOG_LEVEL: Logging level (default: INFO)
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

from student_registry.core.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value: {raw!r}", env_var=name)


class RegistryConfig(BaseModel):
    """Settings shared by the CLI and HTTP hosts."""

    state_dir: Path = Path("var/registry")
    audit_dir: Path = Path("var/audit")
    audit_enabled: bool = True
    caller: str | None = None
    caller_header: str = "x-caller-id"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Load configuration from environment."""
        log_level = os.getenv("SR_LOG_LEVEL", "INFO")
        try:
            return cls(
                state_dir=Path(os.getenv("SR_STATE_DIR", "var/registry")),
                audit_dir=Path(os.getenv("SR_AUDIT_DIR", "var/audit")),
                audit_enabled=_env_bool("SR_AUDIT_ENABLED", True),
                caller=os.getenv("SR_CALLER") or None,
                caller_header=os.getenv("SR_CALLER_HEADER", "x-caller-id").lower(),
                log_level=log_level,
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid registry configuration: {e}",
                env_var="SR_LOG_LEVEL",
            ) from e
