"""Tests for CLI module."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from student_registry.cli import app

runner = CliRunner()


@pytest.fixture
def initialized(temp_dir: Path) -> Path:
    """Initialize a registry owned by alice and return its state dir."""
    result = runner.invoke(app, ["init", "--caller", "alice"])
    assert result.exit_code == 0
    return temp_dir / "registry"


class TestInitCommand:
    """Tests for the init command."""

    def test_init(self, temp_dir: Path) -> None:
        result = runner.invoke(app, ["init", "--caller", "alice"])
        assert result.exit_code == 0
        assert "Registry initialized" in result.stdout
        assert (temp_dir / "registry" / "registry.json").exists()

    def test_init_uses_env_caller(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SR_CALLER", "carol")
        assert runner.invoke(app, ["init"]).exit_code == 0

        result = runner.invoke(app, ["owner"])
        assert result.stdout.strip() == "carol"

    def test_init_without_caller(self) -> None:
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 2
        assert "No caller identity" in result.stdout

    def test_init_twice(self, initialized: Path) -> None:
        result = runner.invoke(app, ["init", "--caller", "bob"])
        assert result.exit_code == 1
        assert "RegistryState" in result.stdout

    def test_state_dir_option(self, temp_dir: Path) -> None:
        other = temp_dir / "elsewhere"
        result = runner.invoke(app, ["init", "--caller", "alice", "--state-dir", str(other)])
        assert result.exit_code == 0
        assert (other / "registry.json").exists()


class TestStudentCommands:
    """Tests for register, update, get and exists."""

    def test_register_and_get(self, initialized: Path) -> None:
        result = runner.invoke(app, ["register", "123", "Alice Smith", "-c", "alice"])
        assert result.exit_code == 0
        assert "Registered student" in result.stdout
        assert "student-registered" in result.stdout

        result = runner.invoke(app, ["get", "123"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Alice Smith"

    def test_update(self, initialized: Path) -> None:
        runner.invoke(app, ["register", "123", "Alice Smith", "-c", "alice"])
        result = runner.invoke(app, ["update", "123", "Alice Johnson", "-c", "alice"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["get", "123"])
        assert result.stdout.strip() == "Alice Johnson"

    def test_exists(self, initialized: Path) -> None:
        runner.invoke(app, ["register", "5", "Ada", "-c", "alice"])

        assert runner.invoke(app, ["exists", "5"]).stdout.strip() == "true"
        assert runner.invoke(app, ["exists", "6"]).stdout.strip() == "false"
        assert runner.invoke(app, ["exists", "0"]).stdout.strip() == "false"

    def test_non_owner_rejected(self, initialized: Path) -> None:
        result = runner.invoke(app, ["register", "1", "Ada", "-c", "mallory"])
        assert result.exit_code == 1
        assert "NotAuthorized" in result.stdout

    def test_invalid_id(self, initialized: Path) -> None:
        result = runner.invoke(app, ["register", "1000001", "Ada", "-c", "alice"])
        assert result.exit_code == 1
        assert "InvalidId" in result.stdout

    def test_invalid_name(self, initialized: Path) -> None:
        result = runner.invoke(app, ["register", "1", "x" * 50, "-c", "alice"])
        assert result.exit_code == 1
        assert "InvalidName" in result.stdout

    def test_duplicate(self, initialized: Path) -> None:
        runner.invoke(app, ["register", "1", "Ada", "-c", "alice"])
        result = runner.invoke(app, ["register", "1", "Bob", "-c", "alice"])
        assert result.exit_code == 1
        assert "StudentExists" in result.stdout

    def test_get_missing(self, initialized: Path) -> None:
        result = runner.invoke(app, ["get", "999"])
        assert result.exit_code == 1
        assert "StudentNotFound" in result.stdout

    def test_update_missing(self, initialized: Path) -> None:
        result = runner.invoke(app, ["update", "999", "X", "-c", "alice"])
        assert result.exit_code == 1
        assert "StudentNotFound" in result.stdout


class TestOwnershipCommands:
    """Tests for owner and set-owner."""

    def test_owner(self, initialized: Path) -> None:
        result = runner.invoke(app, ["owner"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "alice"

    def test_owner_uninitialized(self) -> None:
        result = runner.invoke(app, ["owner"])
        assert result.exit_code == 1
        assert "RegistryState" in result.stdout

    def test_transfer(self, initialized: Path) -> None:
        result = runner.invoke(app, ["set-owner", "bob", "-c", "alice"])
        assert result.exit_code == 0
        assert "owner-changed" in result.stdout

        assert runner.invoke(app, ["register", "1", "Ada", "-c", "alice"]).exit_code == 1
        assert runner.invoke(app, ["register", "1", "Ada", "-c", "bob"]).exit_code == 0

    def test_transfer_to_empty_owner(self, initialized: Path) -> None:
        result = runner.invoke(app, ["set-owner", "", "-c", "alice"])
        assert result.exit_code == 1
        assert "RegistryState" in result.stdout
        assert runner.invoke(app, ["owner"]).stdout.strip() == "alice"


class TestEventsCommand:
    """Tests for the events command."""

    def test_events_listed(self, initialized: Path) -> None:
        runner.invoke(app, ["register", "1", "Ada", "-c", "alice"])
        runner.invoke(app, ["update", "1", "Ada L", "-c", "alice"])

        result = runner.invoke(app, ["events"])
        assert result.exit_code == 0
        assert "Registry Events (2)" in result.stdout

    def test_events_empty(self) -> None:
        result = runner.invoke(app, ["events"])
        assert result.exit_code == 0
        assert "Registry Events (0)" in result.stdout


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Student Registry" in result.stdout
        assert "0.1" in result.stdout
