"""
Student Registry Audit Module.

Append-only JSONL log of the events emitted by registry mutations.

Usage:
    >>> from student_registry.audit import EventLog
    >>> from student_registry.registry import StudentRegistry
    >>>
    >>> log = EventLog()
    >>> registry = StudentRegistry(store, event_sink=log.log)
"""

__all__ = ["EventLog", "WriteResult"]

from student_registry.audit.logger import EventLog, WriteResult
