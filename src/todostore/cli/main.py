"""CLI entry point for todostore.

Invoked as::

    todostore [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m todostore.cli.main

The store lives only for the duration of one command, so each command
builds a fresh ``TodoStore`` and drives it with a script of steps.

Commands
--------
run         Run a YAML or JSON script of store operations
demo        Run the built-in demo script
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from todostore.core.models import Todo
from todostore.core.store import TodoStore
from todostore.script.runner import DEMO_STEPS, ScriptError, ScriptRunner, StepResult
from todostore.serializer.serializer import TodoSerializer

console = Console()
err_console = Console(stderr=True)

_OUTPUT_CHOICES = click.Choice(["table", "json", "yaml"], case_sensitive=False)


def _configure_logging(verbose: bool) -> None:
    """Send DEBUG records of the ``todostore`` loggers to stderr via Rich."""
    if not verbose:
        return
    package_logger = logging.getLogger("todostore")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _read_source(path: str) -> str:
    """Read a script file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_steps_or_exit(source: str, path: str, fmt: str) -> Any:
    """Parse script text, printing errors and exiting on failure."""
    if fmt == "auto":
        fmt = "json" if Path(path).suffix.lower() == ".json" else "yaml"
    try:
        return TodoSerializer().load_document(source, fmt)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Cannot parse[/red] {path} as {fmt}: {exc}")
        sys.exit(1)


def _value_to_plain(value: Any, serializer: TodoSerializer) -> Any:
    if isinstance(value, Todo):
        return serializer.to_dict(value)
    if isinstance(value, list):
        return [serializer.to_dict(t) for t in value]
    return value


def _result_to_dict(result: StepResult, serializer: TodoSerializer) -> dict[str, object]:
    data: dict[str, object] = {"index": result.index, "op": result.op, "status": result.status}
    if result.ok:
        data["value"] = _value_to_plain(result.value, serializer)
    else:
        data["error"] = str(result.error)
    return data


def _describe_value(value: Any) -> str:
    if isinstance(value, Todo):
        return f"#{value.id} {value.content}"
    if isinstance(value, list):
        return f"{len(value)} todo(s)"
    if value is None:
        return "-"
    return str(value)


def _status_color(status: str) -> str:
    """Map a step status to a Rich color string."""
    return "green" if status == "ok" else "red"


def _print_report(
    results: Sequence[StepResult], store: TodoStore, output_format: str
) -> None:
    serializer = TodoSerializer()
    if output_format in ("json", "yaml"):
        document = {
            "steps": [_result_to_dict(r, serializer) for r in results],
            "todos": [serializer.to_dict(t) for t in store.find_all()],
        }
        if output_format == "json":
            click.echo(json.dumps(document, indent=2, ensure_ascii=False))
        else:
            click.echo(yaml.dump(document, default_flow_style=False, allow_unicode=True, sort_keys=False))
        return

    steps_table = Table(title="Steps", show_lines=False)
    steps_table.add_column("#", justify="right")
    steps_table.add_column("Op")
    steps_table.add_column("Status", style="bold")
    steps_table.add_column("Result")
    for r in results:
        color = _status_color(r.status)
        detail = _describe_value(r.value) if r.ok else str(r.error)
        steps_table.add_row(str(r.index), r.op, f"[{color}]{r.status}[/{color}]", detail)
    console.print(steps_table)

    todos_table = Table(title=f"Todos ({len(store)})")
    todos_table.add_column("ID", justify="right")
    todos_table.add_column("Done")
    todos_table.add_column("Content")
    todos_table.add_column("Category")
    todos_table.add_column("Tags")
    for todo in store.find_all():
        todos_table.add_row(
            str(todo.id),
            "x" if todo.complete else "",
            todo.content,
            todo.category,
            ", ".join(sorted(todo.tags)),
        )
    console.print(todos_table)

    failed = sum(1 for r in results if not r.ok)
    console.print(f"\n[bold]Summary:[/bold] {len(results)} step(s), {failed} failed")


def _run_or_exit(steps: Any, stop_on_error: bool) -> tuple[list[StepResult], TodoStore]:
    store = TodoStore()
    runner = ScriptRunner(store, stop_on_error=stop_on_error)
    try:
        return runner.run(steps), store
    except ScriptError as exc:
        err_console.print(f"[red]Script error:[/red] {exc}")
        sys.exit(2)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="todostore")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log store operations to stderr")
def cli(verbose: bool) -> None:
    """In-memory todo store driven by operation scripts."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from todostore import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]todostore[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["auto", "json", "yaml"], case_sensitive=False),
    default="auto",
    help="Script format (auto picks json for .json files, yaml otherwise)",
)
@click.option("--stop-on-error", is_flag=True, default=False, help="Stop at the first failed step")
@click.option("--output", "-o", "output_format", type=_OUTPUT_CHOICES, default="table", help="Report format")
def run_command(file: str, input_format: str, stop_on_error: bool, output_format: str) -> None:
    """Run a script of store operations against a fresh store.

    FILE is the path to a YAML or JSON list of steps.

    Examples:

    \b
        todostore run steps.yaml
        todostore run steps.json --output json
    """
    source = _read_source(file)
    steps = _load_steps_or_exit(source, file, input_format.lower())
    results, store = _run_or_exit(steps, stop_on_error)
    _print_report(results, store, output_format.lower())

    if any(not r.ok for r in results):
        sys.exit(1)


# ---------------------------------------------------------------------------
# demo command
# ---------------------------------------------------------------------------


@cli.command(name="demo")
@click.option("--output", "-o", "output_format", type=_OUTPUT_CHOICES, default="table", help="Report format")
def demo_command(output_format: str) -> None:
    """Run the built-in demo script.

    Some demo steps fail on purpose to show the error reporting; the
    command still exits successfully.
    """
    results, store = _run_or_exit(DEMO_STEPS, stop_on_error=False)
    _print_report(results, store, output_format.lower())


if __name__ == "__main__":
    cli()
