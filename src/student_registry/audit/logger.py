"""
Event log writer for the Student Registry.

Appends emitted registry events to date-stamped JSONL files so every
mutation leaves a replayable trail.
"""

import fcntl
import json
import logging
import os
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from student_registry.core.models import RegistryEvent

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """Result of a log write operation."""

    success: bool
    event_id: str
    log_file: str
    error: str | None = None
    bytes_written: int = 0


class EventLog:
    """
    Thread-safe append-only event log.

    Writes one JSON line per event to var/audit/events_YYYYMMDD.jsonl.
    """

    DEFAULT_AUDIT_DIR = Path("var/audit")
    LOG_PREFIX = "events_"
    LOG_SUFFIX = ".jsonl"

    def __init__(self, audit_dir: Path | None = None):
        """
        Initialize the event log.

        Args:
            audit_dir: Directory for event log files (default: var/audit/)
        """
        self._audit_dir = Path(audit_dir) if audit_dir else self.DEFAULT_AUDIT_DIR
        self._audit_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def audit_dir(self) -> Path:
        return self._audit_dir

    def _get_log_file(self, date: datetime | None = None) -> Path:
        """Get the log file path for a specific date."""
        if date is None:
            date = datetime.now(timezone.utc)
        filename = f"{self.LOG_PREFIX}{date.strftime('%Y%m%d')}{self.LOG_SUFFIX}"
        return self._audit_dir / filename

    def log(self, event: RegistryEvent) -> WriteResult:
        """
        Append an event to today's log file.

        Args:
            event: The registry event to record

        Returns:
            WriteResult with success status and details
        """
        event_id = str(uuid.uuid4())[:8]
        log_file = self._get_log_file()
        entry = {
            "event_id": event_id,
            "logged_at": datetime.now(timezone.utc).isoformat(),
            **event.to_dict(),
        }
        log_line = json.dumps(entry) + "\n"

        try:
            with self._lock:
                with open(log_file, "a", encoding="utf-8") as f:
                    # Advisory lock for other processes sharing the log
                    try:
                        fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                    except OSError:
                        pass

                    try:
                        f.write(log_line)
                        f.flush()
                        os.fsync(f.fileno())
                    finally:
                        try:
                            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
                        except OSError:
                            pass
        except OSError as e:
            logger.warning(f"Failed to write event {event_id} to {log_file}: {e}")
            return WriteResult(
                success=False,
                event_id=event_id,
                log_file=str(log_file),
                error=str(e),
            )

        return WriteResult(
            success=True,
            event_id=event_id,
            log_file=str(log_file),
            bytes_written=len(log_line.encode("utf-8")),
        )

    def read_events(self, limit: int | None = None) -> list[dict[str, Any]]:
        """
        Read logged events in chronological order.

        Args:
            limit: Return only the most recent ``limit`` events

        Returns:
            List of event dicts, oldest first
        """
        events: list[dict[str, Any]] = []
        for log_file in sorted(self._audit_dir.glob(f"{self.LOG_PREFIX}*{self.LOG_SUFFIX}")):
            with open(log_file, encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        events.append(json.loads(line))
                    except json.JSONDecodeError:
                        logger.warning(f"Skipping malformed line in {log_file.name}")

        if limit is not None:
            return events[-limit:] if limit > 0 else []
        return events
