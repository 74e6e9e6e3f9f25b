"""In-memory store for tests and embedding hosts."""

from student_registry.core.models import Identity
from student_registry.store.base import PersistentStore


class InMemoryStore(PersistentStore):
    """Dict-backed store; state lives as long as the instance."""

    def __init__(self, owner: Identity | None = None, students: dict[int, str] | None = None):
        self._owner = owner
        self._students: dict[int, str] = dict(students or {})

    def get_owner(self) -> Identity | None:
        return self._owner

    def set_owner(self, owner: Identity) -> None:
        self._owner = owner

    def get_student(self, student_id: int) -> str | None:
        return self._students.get(student_id)

    def set_student(self, student_id: int, name: str) -> None:
        self._students[student_id] = name

    def has_student(self, student_id: int) -> bool:
        return student_id in self._students

    def student_count(self) -> int:
        return len(self._students)

    def snapshot(self) -> dict[int, str]:
        """Return a copy of the stored students."""
        return dict(self._students)
