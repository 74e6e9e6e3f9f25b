"""
Core data models for the Student Registry.

Bounds, event payloads and operation results shared by the registry
service and every host built on top of it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel

# Opaque caller principal supplied by the host; compared by equality only.
Identity = str

STUDENT_ID_MIN = 1
STUDENT_ID_MAX = 1_000_000
# Exclusive upper bound: the longest accepted name is 49 characters.
NAME_MAX_LENGTH = 50


class RegistryOperation(str, Enum):
    """Operations exposed by the registry."""

    INITIALIZE = "initialize"
    SET_OWNER = "set_owner"
    REGISTER = "register_student"
    UPDATE = "update_student_name"


class EventType(str, Enum):
    """Names of the structured events emitted by mutations."""

    STUDENT_REGISTERED = "student-registered"
    STUDENT_UPDATED = "student-updated"
    OWNER_CHANGED = "owner-changed"


class RegistryEvent(BaseModel):
    """Base class for events emitted alongside a successful mutation."""

    event: EventType

    model_config = {"frozen": True, "use_enum_values": True}

    def to_dict(self) -> dict[str, Any]:
        """Return the event as a plain JSON-compatible dict."""
        return self.model_dump(mode="json")


class StudentRegistered(RegistryEvent):
    """A new student record was inserted."""

    event: EventType = EventType.STUDENT_REGISTERED
    id: int
    name: str


class StudentUpdated(RegistryEvent):
    """An existing student record was renamed."""

    event: EventType = EventType.STUDENT_UPDATED
    id: int
    new_name: str


class OwnerChanged(RegistryEvent):
    """Ownership of the registry was transferred."""

    event: EventType = EventType.OWNER_CHANGED
    previous_owner: Identity
    new_owner: Identity


@dataclass
class OperationResult:
    """Result of a successful registry mutation."""

    operation: RegistryOperation
    status: str = "success"
    student_id: int | None = None
    events: list[RegistryEvent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a serializable summary."""
        return {
            "status": self.status,
            "operation": self.operation.value,
            "student_id": self.student_id,
            "events": [event.to_dict() for event in self.events],
        }
