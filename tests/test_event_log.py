"""Tests for the JSONL event log."""

import json
from pathlib import Path

import pytest

from student_registry.audit.logger import EventLog
from student_registry.core.exceptions import StudentExistsError
from student_registry.core.models import OwnerChanged, StudentRegistered, StudentUpdated
from student_registry.registry.service import StudentRegistry
from student_registry.store.memory import InMemoryStore


class TestEventLog:
    """Tests for EventLog."""

    def test_creates_audit_dir(self, temp_dir: Path) -> None:
        audit_dir = temp_dir / "audit"
        EventLog(audit_dir)
        assert audit_dir.exists()

    def test_log_writes_jsonl(self, temp_dir: Path) -> None:
        """Each event becomes one JSON line."""
        log = EventLog(temp_dir)
        result = log.log(StudentRegistered(id=1, name="Ada"))

        assert result.success
        assert result.bytes_written > 0
        lines = Path(result.log_file).read_text().splitlines()
        assert len(lines) == 1

        entry = json.loads(lines[0])
        assert entry["event"] == "student-registered"
        assert entry["id"] == 1
        assert entry["name"] == "Ada"
        assert entry["event_id"] == result.event_id
        assert "logged_at" in entry

    def test_file_name_is_date_stamped(self, temp_dir: Path) -> None:
        result = EventLog(temp_dir).log(StudentRegistered(id=1, name="Ada"))
        name = Path(result.log_file).name
        assert name.startswith("events_")
        assert name.endswith(".jsonl")

    def test_read_events_in_order(self, temp_dir: Path) -> None:
        log = EventLog(temp_dir)
        log.log(StudentRegistered(id=1, name="Ada"))
        log.log(StudentUpdated(id=1, new_name="Ada L."))
        log.log(OwnerChanged(previous_owner="a", new_owner="b"))

        events = log.read_events()
        assert [e["event"] for e in events] == [
            "student-registered",
            "student-updated",
            "owner-changed",
        ]

    def test_read_events_limit(self, temp_dir: Path) -> None:
        log = EventLog(temp_dir)
        for i in range(1, 6):
            log.log(StudentRegistered(id=i, name=f"S{i}"))

        recent = log.read_events(limit=2)
        assert [e["id"] for e in recent] == [4, 5]
        assert log.read_events(limit=0) == []

    def test_read_skips_malformed_lines(self, temp_dir: Path) -> None:
        log = EventLog(temp_dir)
        result = log.log(StudentRegistered(id=1, name="Ada"))
        with open(result.log_file, "a") as f:
            f.write("garbage\n")

        assert len(log.read_events()) == 1

    def test_registry_publishes_to_log(self, temp_dir: Path) -> None:
        """Only successful mutations reach the log."""
        log = EventLog(temp_dir)
        registry = StudentRegistry(InMemoryStore(), event_sink=log.log)
        registry.initialize("alice")
        registry.register_student("alice", 1, "Ada")
        with pytest.raises(StudentExistsError):
            registry.register_student("alice", 1, "Eve")

        events = log.read_events()
        assert len(events) == 1
        assert events[0]["name"] == "Ada"
