"""
Persistent store contract.

The registry never persists anything itself; the host hands it a store
implementing this interface.
"""

from abc import ABC, abstractmethod

from student_registry.core.models import Identity


class PersistentStore(ABC):
    """
    Durable mapping of student id to name plus a single owner slot.

    Implementations only need to be correct for sequential use: the host
    serializes calls, one operation at a time.
    """

    @abstractmethod
    def get_owner(self) -> Identity | None:
        """Return the stored owner, or None if never initialized."""

    @abstractmethod
    def set_owner(self, owner: Identity) -> None:
        """Replace the owner slot."""

    @abstractmethod
    def get_student(self, student_id: int) -> str | None:
        """Return the name stored under ``student_id``, or None."""

    @abstractmethod
    def set_student(self, student_id: int, name: str) -> None:
        """Insert or overwrite the name stored under ``student_id``."""

    @abstractmethod
    def has_student(self, student_id: int) -> bool:
        """Return True if ``student_id`` has a stored name."""

    @abstractmethod
    def student_count(self) -> int:
        """Return the number of stored students."""
