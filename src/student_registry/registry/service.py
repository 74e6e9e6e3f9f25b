"""
Student Registry - owner-gated CRUD over student records.

All state lives in the PersistentStore handed in by the host. Every
mutating call validates completely before it writes, so a rejected call
leaves the store untouched.
"""

import logging
from typing import Any, Callable

from student_registry.core.exceptions import (
    InvalidIdError,
    InvalidNameError,
    NotAuthorizedError,
    RegistryStateError,
    StudentExistsError,
    StudentNotFoundError,
)
from student_registry.core.models import (
    NAME_MAX_LENGTH,
    STUDENT_ID_MAX,
    STUDENT_ID_MIN,
    Identity,
    OperationResult,
    OwnerChanged,
    RegistryEvent,
    RegistryOperation,
    StudentRegistered,
    StudentUpdated,
)
from student_registry.store.base import PersistentStore

logger = logging.getLogger(__name__)

EventSink = Callable[[RegistryEvent], Any]


def is_valid_student_id(student_id: Any) -> bool:
    """Return True if ``student_id`` is an int within the accepted range."""
    if isinstance(student_id, bool) or not isinstance(student_id, int):
        return False
    return STUDENT_ID_MIN <= student_id <= STUDENT_ID_MAX


def is_valid_student_name(name: Any) -> bool:
    """Return True if ``name`` is a non-empty string shorter than the limit."""
    return isinstance(name, str) and 0 < len(name) < NAME_MAX_LENGTH


class StudentRegistry:
    """
    Permissioned registry of student id to name.

    A single owner may mutate records; reads are open to anyone.

    Check order for mutations, first failure wins:
    1. caller is the owner (NotAuthorized)
    2. id within [1, 1_000_000] (InvalidId)
    3. name length within [1, 49] (InvalidName)
    4. presence of the id (StudentExists / StudentNotFound)
    """

    def __init__(self, store: PersistentStore, *, event_sink: EventSink | None = None):
        """
        Attach a registry to its store.

        Args:
            store: Host-supplied persistence for owner and students
            event_sink: Optional callable receiving each emitted event
        """
        self._store = store
        self._event_sink = event_sink

    @property
    def store(self) -> PersistentStore:
        return self._store

    @property
    def is_initialized(self) -> bool:
        """True once an owner has been set."""
        return self._store.get_owner() is not None

    def initialize(self, caller: Identity) -> OperationResult:
        """
        Set the deploying caller as the first owner.

        Raises:
            RegistryStateError: If the registry already has an owner or caller
                is empty
        """
        if self.is_initialized:
            raise RegistryStateError(
                "Registry is already initialized",
                details={"owner": self._store.get_owner()},
            )
        if not caller:
            raise RegistryStateError("Registry owner cannot be empty")

        self._store.set_owner(caller)
        logger.info(f"Registry initialized with owner={caller}")
        return OperationResult(operation=RegistryOperation.INITIALIZE)

    def get_owner(self) -> Identity:
        """Return the current owner."""
        return self._require_owner()

    def set_owner(self, caller: Identity, new_owner: Identity) -> OperationResult:
        """
        Transfer ownership to ``new_owner``.

        Raises:
            NotAuthorizedError: If caller is not the current owner
            RegistryStateError: If new_owner is empty
        """
        previous_owner = self._authorize(caller, RegistryOperation.SET_OWNER)
        if not new_owner:
            raise RegistryStateError("Registry owner cannot be empty")

        self._store.set_owner(new_owner)
        logger.info(f"Registry ownership transferred from {previous_owner} to {new_owner}")

        event = OwnerChanged(previous_owner=previous_owner, new_owner=new_owner)
        return self._complete(RegistryOperation.SET_OWNER, None, event)

    def register_student(self, caller: Identity, student_id: int, name: str) -> OperationResult:
        """
        Insert a new student record.

        Raises:
            NotAuthorizedError: If caller is not the current owner
            InvalidIdError: If the id is out of range
            InvalidNameError: If the name is empty or 50+ characters
            StudentExistsError: If the id is already registered
        """
        self._authorize(caller, RegistryOperation.REGISTER)
        self._check_id(student_id)
        self._check_name(name)
        if self._store.has_student(student_id):
            raise StudentExistsError(
                f"Student {student_id} is already registered",
                student_id=student_id,
            )

        self._store.set_student(student_id, name)
        logger.info(f"Registered student {student_id}")

        event = StudentRegistered(id=student_id, name=name)
        return self._complete(RegistryOperation.REGISTER, student_id, event)

    def update_student_name(
        self, caller: Identity, student_id: int, new_name: str
    ) -> OperationResult:
        """
        Overwrite the name of an existing student.

        Raises:
            NotAuthorizedError: If caller is not the current owner
            InvalidIdError: If the id is out of range
            InvalidNameError: If the name is empty or 50+ characters
            StudentNotFoundError: If the id was never registered
        """
        self._authorize(caller, RegistryOperation.UPDATE)
        self._check_id(student_id)
        self._check_name(new_name)
        if not self._store.has_student(student_id):
            raise StudentNotFoundError(
                f"Student {student_id} is not registered",
                student_id=student_id,
            )

        self._store.set_student(student_id, new_name)
        logger.info(f"Updated name of student {student_id}")

        event = StudentUpdated(id=student_id, new_name=new_name)
        return self._complete(RegistryOperation.UPDATE, student_id, event)

    def get_student_name(self, student_id: int) -> str:
        """
        Look up a student's name.

        Raises:
            InvalidIdError: If the id is out of range
            StudentNotFoundError: If the id was never registered
        """
        self._check_id(student_id)
        name = self._store.get_student(student_id)
        if name is None:
            raise StudentNotFoundError(
                f"Student {student_id} is not registered",
                student_id=student_id,
            )
        return name

    def student_exists(self, student_id: int) -> bool:
        """Return True if ``student_id`` is registered. Out-of-range ids are never present."""
        if not is_valid_student_id(student_id):
            return False
        return self._store.has_student(student_id)

    def _require_owner(self) -> Identity:
        owner = self._store.get_owner()
        if owner is None:
            raise RegistryStateError("Registry has not been initialized")
        return owner

    def _authorize(self, caller: Identity, operation: RegistryOperation) -> Identity:
        """Return the owner if ``caller`` matches it."""
        owner = self._require_owner()
        if caller != owner:
            logger.debug(f"Rejected {operation.value} from non-owner {caller}")
            raise NotAuthorizedError(
                f"Caller is not authorized to {operation.value}",
                caller=caller,
                operation=operation.value,
            )
        return owner

    @staticmethod
    def _check_id(student_id: Any) -> None:
        if not is_valid_student_id(student_id):
            raise InvalidIdError(
                f"Student id must be between {STUDENT_ID_MIN} and {STUDENT_ID_MAX}",
                student_id=student_id,
            )

    @staticmethod
    def _check_name(name: Any) -> None:
        if not is_valid_student_name(name):
            raise InvalidNameError(
                f"Student name must be 1 to {NAME_MAX_LENGTH - 1} characters",
                length=len(name) if isinstance(name, str) else None,
            )

    def _complete(
        self,
        operation: RegistryOperation,
        student_id: int | None,
        event: RegistryEvent,
    ) -> OperationResult:
        """Publish the event and build the result of a successful write."""
        if self._event_sink is not None:
            self._event_sink(event)
        return OperationResult(operation=operation, student_id=student_id, events=[event])
