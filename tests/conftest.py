"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from student_registry.registry.service import StudentRegistry
from student_registry.store.memory import InMemoryStore

OWNER = "owner-principal"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point every host at temporary directories and clear caller defaults."""
    monkeypatch.setenv("SR_STATE_DIR", str(temp_dir / "registry"))
    monkeypatch.setenv("SR_AUDIT_DIR", str(temp_dir / "audit"))
    for var in ("SR_CALLER", "SR_CALLER_HEADER", "SR_AUDIT_ENABLED", "SR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def store() -> InMemoryStore:
    """Provide an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def events_seen() -> list:
    """Collect events published to a registry's sink."""
    return []


@pytest.fixture
def registry(store: InMemoryStore, events_seen: list) -> StudentRegistry:
    """Provide a registry initialized with OWNER."""
    reg = StudentRegistry(store, event_sink=events_seen.append)
    reg.initialize(OWNER)
    return reg
