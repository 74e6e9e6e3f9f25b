"""
Student Registry Store Module.

Host-side persistence collaborators for the registry.
"""

__all__ = [
    "PersistentStore",
    "InMemoryStore",
    "JsonFileStore",
    "RegistrySnapshot",
]

from student_registry.store.base import PersistentStore
from student_registry.store.file import JsonFileStore, RegistrySnapshot
from student_registry.store.memory import InMemoryStore
