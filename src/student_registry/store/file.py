"""
JSON file store - durable registry state on local disk.

Manages {state_dir}/registry.json holding the owner slot, every student
record and a SHA256 checksum of both.
"""

import hashlib
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from student_registry.core.exceptions import ChecksumMismatchError, StoreError
from student_registry.core.models import Identity
from student_registry.store.base import PersistentStore

logger = logging.getLogger(__name__)


class RegistrySnapshot(BaseModel):
    """On-disk representation of the registry state."""

    version: str = "1.0"
    owner: Identity | None = None
    students: dict[str, str] = Field(
        default_factory=dict, description="str(student_id) -> student_name"
    )
    checksum: str = ""
    last_updated: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def compute_checksum(self) -> str:
        """Compute SHA256 checksum of owner and students."""
        data_str = json.dumps({"owner": self.owner, "students": self.students}, sort_keys=True)
        return hashlib.sha256(data_str.encode()).hexdigest()

    def touch(self) -> None:
        """Refresh checksum and timestamp after a mutation."""
        self.checksum = self.compute_checksum()
        self.last_updated = datetime.now(timezone.utc).isoformat()


class JsonFileStore(PersistentStore):
    """
    File-backed store.

    Every write persists the whole snapshot atomically using the
    write-temp-then-replace pattern, so a crash never leaves a partial file.
    """

    STATE_FILE = "registry.json"

    def __init__(self, state_dir: Path | None = None):
        """Initialize store with its state directory."""
        self._state_dir = Path(state_dir) if state_dir else Path("var/registry")
        self._state_dir.mkdir(parents=True, exist_ok=True)
        self._snapshot: RegistrySnapshot | None = None

    @property
    def path(self) -> Path:
        """Path of the snapshot file."""
        return self._state_dir / self.STATE_FILE

    @property
    def snapshot(self) -> RegistrySnapshot:
        """Get or load the registry snapshot."""
        if self._snapshot is None:
            self._snapshot = self._load_snapshot()
        return self._snapshot

    def _load_snapshot(self) -> RegistrySnapshot:
        """Load snapshot from disk, or start empty if none exists."""
        if not self.path.exists():
            return RegistrySnapshot()

        try:
            data = json.loads(self.path.read_text())
            snapshot = RegistrySnapshot(**data)
        except (json.JSONDecodeError, ValueError) as e:
            raise StoreError(
                f"Registry state file is unreadable: {e}",
                path=str(self.path),
            ) from e

        computed = snapshot.compute_checksum()
        if snapshot.checksum != computed:
            raise ChecksumMismatchError(
                "Registry state file failed integrity check",
                path=str(self.path),
                expected=snapshot.checksum,
                actual=computed,
            )

        logger.debug(f"Loaded registry snapshot with {len(snapshot.students)} students")
        return snapshot

    def _commit(self, updated: RegistrySnapshot) -> None:
        """
        Persist ``updated`` atomically, then make it the cached snapshot.

        The cache only changes once the file has been replaced, so a failed
        write leaves both disk and memory at the previous state.
        """
        temp_path = self._state_dir / f"{self.STATE_FILE}.tmp"
        updated.touch()

        try:
            temp_path.write_text(updated.model_dump_json(indent=2))
            os.replace(temp_path, self.path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        self._snapshot = updated

    def get_owner(self) -> Identity | None:
        return self.snapshot.owner

    def set_owner(self, owner: Identity) -> None:
        updated = self.snapshot.model_copy(deep=True)
        updated.owner = owner
        self._commit(updated)

    def get_student(self, student_id: int) -> str | None:
        return self.snapshot.students.get(str(student_id))

    def set_student(self, student_id: int, name: str) -> None:
        updated = self.snapshot.model_copy(deep=True)
        updated.students[str(student_id)] = name
        self._commit(updated)

    def has_student(self, student_id: int) -> bool:
        return str(student_id) in self.snapshot.students

    def student_count(self) -> int:
        return len(self.snapshot.students)

    def verify_integrity(self) -> bool:
        """
        Re-read the file from disk and verify its checksum.

        Raises:
            StoreError: If the file cannot be parsed
            ChecksumMismatchError: If the checksum does not match
        """
        self._load_snapshot()
        return True
