"""Render wwdcsearch failures for the terminal and exit."""

from __future__ import annotations

import traceback
from typing import Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from wwdcsearch.config import get_logger
from wwdcsearch.exceptions import ConfigurationError, CorpusError, WWDCSearchError

logger = get_logger(__name__)
console = Console(stderr=True)


def _corpus_location(details: dict[str, Any]) -> str | None:
    """Return ``path[:line[:column]]`` for a corpus error, if known."""
    path = details.get("path")
    if path is None:
        return None
    location = str(path)
    if details.get("line") is not None:
        location += f":{details['line']}"
        if details.get("column") is not None:
            location += f":{details['column']}"
    return location


def _context_lines(error: WWDCSearchError) -> list[str]:
    """Lines that locate the failure; shown even without --verbose."""
    details = error.details or {}
    lines: list[str] = []
    if isinstance(error, CorpusError):
        location = _corpus_location(details)
        if location:
            lines.append(f"at {location}")
        if "location" in details:
            lines.append(f"record {details['location']}: {details.get('reason', '')}")
    elif isinstance(error, ConfigurationError) and "field" in details:
        lines.append(f"{details['field']}: {details.get('reason', 'invalid value')}")
    return lines


def _render_wwdcsearch_error(error: WWDCSearchError, verbose: bool) -> None:
    console.print(f"[red]✗ {escape(error.message)}[/red]")
    for line in _context_lines(error):
        console.print(f"  [cyan]{escape(line)}[/cyan]", soft_wrap=True)
    if error.hint:
        console.print(f"[yellow]→ {escape(error.hint)}[/yellow]")
    if verbose and error.details:
        console.print("\n[dim]Details:[/dim]")
        for key, value in error.details.items():
            console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")


def _render_pydantic_error(error: PydanticValidationError) -> None:
    console.print(f"[red]✗ Invalid {escape(error.title)} data[/red]")
    for item in error.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "(root)"
        console.print(f"  [cyan]{escape(loc)}[/cyan]: {escape(item['msg'])}")


def handle_cli_error(
    error: Exception, verbose: bool = False, exit_code: int = 1
) -> None:
    """Print ``error`` for the user, log it and exit with ``exit_code``.

    Corpus errors are located as ``path:line:column``, configuration errors
    name the offending setting, and pydantic validation errors list every
    failing field.

    Args:
        error: The exception that was raised
        verbose: Whether to show details and tracebacks
        exit_code: Exit code to use when exiting
    """
    if isinstance(error, WWDCSearchError):
        _render_wwdcsearch_error(error, verbose)
        logger.error(
            "wwdcsearch error occurred",
            error_type=type(error).__name__,
            message=error.message,
            details=error.details,
            exit_code=exit_code,
        )

    elif isinstance(error, PydanticValidationError):
        _render_pydantic_error(error)
        logger.error(
            "Validation failed",
            model=error.title,
            error_count=error.error_count(),
            exit_code=exit_code,
        )

    else:
        console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")
        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(traceback.format_exc(), markup=False)
        else:
            console.print("[dim]Run with --verbose for full error details[/dim]")
        logger.error(
            "Unexpected error occurred",
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)
