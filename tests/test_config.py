"""Tests for configuration loading."""

from pathlib import Path

import pytest

from student_registry.config import RegistryConfig
from student_registry.core.exceptions import ConfigurationError
from student_registry.host import open_registry
from student_registry.store.file import JsonFileStore


class TestRegistryConfig:
    """Tests for RegistryConfig."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SR_STATE_DIR", raising=False)
        monkeypatch.delenv("SR_AUDIT_DIR", raising=False)
        config = RegistryConfig.from_env()

        assert config.state_dir == Path("var/registry")
        assert config.audit_dir == Path("var/audit")
        assert config.audit_enabled is True
        assert config.caller is None
        assert config.caller_header == "x-caller-id"
        assert config.log_level == "INFO"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
        monkeypatch.setenv("SR_STATE_DIR", str(temp_dir / "s"))
        monkeypatch.setenv("SR_AUDIT_ENABLED", "no")
        monkeypatch.setenv("SR_CALLER", "alice")
        monkeypatch.setenv("SR_CALLER_HEADER", "X-Principal")
        monkeypatch.setenv("SR_LOG_LEVEL", "debug")

        config = RegistryConfig.from_env()

        assert config.state_dir == temp_dir / "s"
        assert config.audit_enabled is False
        assert config.caller == "alice"
        assert config.caller_header == "x-principal"
        assert config.log_level == "DEBUG"

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SR_AUDIT_ENABLED", "maybe")
        with pytest.raises(ConfigurationError) as exc_info:
            RegistryConfig.from_env()
        assert exc_info.value.env_var == "SR_AUDIT_ENABLED"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SR_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError):
            RegistryConfig.from_env()


class TestOpenRegistry:
    """Tests for host wiring."""

    def test_open_registry_uses_file_store(self, temp_dir: Path) -> None:
        config = RegistryConfig(state_dir=temp_dir / "state", audit_dir=temp_dir / "audit")
        registry = open_registry(config)

        assert isinstance(registry.store, JsonFileStore)
        registry.initialize("alice")
        registry.register_student("alice", 1, "Ada")
        assert list((temp_dir / "audit").glob("events_*.jsonl"))

    def test_audit_disabled(self, temp_dir: Path) -> None:
        config = RegistryConfig(
            state_dir=temp_dir / "state",
            audit_dir=temp_dir / "audit",
            audit_enabled=False,
        )
        registry = open_registry(config)
        registry.initialize("alice")
        registry.register_student("alice", 1, "Ada")
        assert not (temp_dir / "audit").exists()
