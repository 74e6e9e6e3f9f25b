"""
Student Registry CLI - command-line host.

Initialize a registry, manage ownership and student records from the terminal.
"""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from student_registry.audit.logger import EventLog
from student_registry.config import RegistryConfig
from student_registry.core.exceptions import StudentRegistryError, format_exception
from student_registry.core.models import OperationResult
from student_registry.host import open_registry
from student_registry.registry.service import StudentRegistry

app = typer.Typer(
    name="student-registry",
    help="Student Registry - owner-gated student records",
    no_args_is_help=True,
)
console = Console()

StateDirOption = typer.Option(None, "--state-dir", "-s", help="Registry state directory")
CallerOption = typer.Option(None, "--caller", "-c", help="Caller identity (default: $SR_CALLER)")


def _load_config(state_dir: Optional[Path]) -> RegistryConfig:
    try:
        config = RegistryConfig.from_env()
    except StudentRegistryError as e:
        _fail(e)
    if state_dir is not None:
        config = config.model_copy(update={"state_dir": state_dir})
    return config


def _open(state_dir: Optional[Path]) -> tuple[RegistryConfig, StudentRegistry]:
    config = _load_config(state_dir)
    return config, open_registry(config)


def _resolve_caller(caller: Optional[str], config: RegistryConfig) -> str:
    resolved = caller or config.caller
    if not resolved:
        console.print("[red]No caller identity: pass --caller or set SR_CALLER[/red]")
        raise typer.Exit(2)
    return resolved


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]{escape(format_exception(error))}[/red]")
    raise typer.Exit(1)


def _print_events(result: OperationResult) -> None:
    for event in result.events:
        console.print(f"[dim]event:[/dim] {escape(str(event.to_dict()))}")


@app.command()
def init(
    caller: Optional[str] = CallerOption,
    state_dir: Optional[Path] = StateDirOption,
):
    """Initialize a new registry owned by the caller."""
    config, registry = _open(state_dir)
    caller = _resolve_caller(caller, config)

    try:
        registry.initialize(caller)
    except StudentRegistryError as e:
        _fail(e)

    console.print(
        Panel.fit(
            f"[bold blue]Registry initialized[/bold blue]\n"
            f"Owner: {escape(caller)}\n"
            f"State: {config.state_dir}",
        )
    )


@app.command()
def owner(state_dir: Optional[Path] = StateDirOption):
    """Show the current registry owner."""
    _, registry = _open(state_dir)
    try:
        current = registry.get_owner()
    except StudentRegistryError as e:
        _fail(e)
    console.print(escape(current))


@app.command("set-owner")
def set_owner(
    new_owner: str = typer.Argument(..., help="Identity of the new owner"),
    caller: Optional[str] = CallerOption,
    state_dir: Optional[Path] = StateDirOption,
):
    """Transfer ownership of the registry."""
    config, registry = _open(state_dir)
    caller = _resolve_caller(caller, config)

    try:
        result = registry.set_owner(caller, new_owner)
    except StudentRegistryError as e:
        _fail(e)

    console.print(f"[green]Owner set to[/green] {escape(new_owner)}")
    _print_events(result)


@app.command()
def register(
    student_id: int = typer.Argument(..., help="Student id (1-1000000)"),
    name: str = typer.Argument(..., help="Student name (1-49 characters)"),
    caller: Optional[str] = CallerOption,
    state_dir: Optional[Path] = StateDirOption,
):
    """Register a new student."""
    config, registry = _open(state_dir)
    caller = _resolve_caller(caller, config)

    try:
        result = registry.register_student(caller, student_id, name)
    except StudentRegistryError as e:
        _fail(e)

    console.print(f"[green]Registered student[/green] {student_id}")
    _print_events(result)


@app.command()
def update(
    student_id: int = typer.Argument(..., help="Student id (1-1000000)"),
    new_name: str = typer.Argument(..., help="New student name (1-49 characters)"),
    caller: Optional[str] = CallerOption,
    state_dir: Optional[Path] = StateDirOption,
):
    """Update the name of a registered student."""
    config, registry = _open(state_dir)
    caller = _resolve_caller(caller, config)

    try:
        result = registry.update_student_name(caller, student_id, new_name)
    except StudentRegistryError as e:
        _fail(e)

    console.print(f"[green]Updated student[/green] {student_id}")
    _print_events(result)


@app.command()
def get(
    student_id: int = typer.Argument(..., help="Student id"),
    state_dir: Optional[Path] = StateDirOption,
):
    """Show the name of a student."""
    _, registry = _open(state_dir)
    try:
        name = registry.get_student_name(student_id)
    except StudentRegistryError as e:
        _fail(e)
    console.print(escape(name))


@app.command()
def exists(
    student_id: int = typer.Argument(..., help="Student id"),
    state_dir: Optional[Path] = StateDirOption,
):
    """Print true if the student is registered, false otherwise."""
    _, registry = _open(state_dir)
    try:
        found = registry.student_exists(student_id)
    except StudentRegistryError as e:
        _fail(e)
    console.print("true" if found else "false")


@app.command()
def events(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of recent events to show"),
    state_dir: Optional[Path] = StateDirOption,
):
    """Show recently emitted registry events."""
    config = _load_config(state_dir)
    recent = EventLog(config.audit_dir).read_events(limit=limit)

    table = Table(title=f"Registry Events ({len(recent)})")
    table.add_column("Logged At", style="dim")
    table.add_column("Event", style="cyan")
    table.add_column("Details")

    for entry in recent:
        details = {
            k: v for k, v in entry.items() if k not in ("event_id", "logged_at", "event")
        }
        table.add_row(
            entry.get("logged_at", ""),
            entry.get("event", ""),
            escape(", ".join(f"{k}={v}" for k, v in details.items())),
        )

    console.print(table)


@app.command()
def version():
    """Show Student Registry version."""
    from student_registry import __version__

    console.print(f"Student Registry v{__version__}")


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
