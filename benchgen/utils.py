"""Shared utility functions for benchgen.

Provides file-system helpers, descriptor serialisation, duration formatting
and Rich-based console reporting.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object that was created.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def remove_tree(path: str | Path) -> bool:
    """Recursively delete *path* if it exists.

    Returns ``True`` when something was removed.  Permission errors are not
    swallowed.
    """
    target = Path(path)
    if not target.exists():
        return False
    shutil.rmtree(target)
    return True


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8.

    The parent directory must already exist.
    """
    file_path = Path(path)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def write_descriptor(model: BaseModel, path: str | Path) -> Path:
    """Serialise a descriptor model as pretty-printed JSON.

    Field aliases are used as JSON keys (``compilerOptions``,
    ``package-specs``) and unset optional fields are omitted.
    """
    content = model.model_dump_json(indent=2, by_alias=True, exclude_none=True)
    return write_text(path, content)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
