"""Shared utility functions for create-chrome-ext.

Provides Rich-based progress reporting, stable JSON I/O and the name
conversions used when patching the generated manifests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def to_package_name(project_name: str) -> str:
    """Convert a project name to an npm package identifier.

    Examples::

        to_package_name("My_Cool_Ext") -> "my-cool-ext"
        to_package_name("demo1") -> "demo1"
    """
    return project_name.lower().replace("_", "-")


def to_display_name(project_name: str) -> str:
    """Convert a project name to a human-readable extension title.

    Underscores and hyphens become spaces and every word is capitalised.
    Consecutive separators keep their spaces.

    Examples::

        to_display_name("My_Cool_Ext") -> "My Cool Ext"
        to_display_name("demo1") -> "Demo1"
    """
    words = project_name.replace("_", " ").replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON object from *path*.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} does not contain a JSON object")
    return data


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* with two-space indentation and a trailing newline.

    Key order is preserved, so dumping already-dumped data is byte-identical.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Write *data* to *path* using :func:`dump_json` formatting."""
    Path(path).write_text(dump_json(data), encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a blue progress step."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_next_steps(project_name: str) -> None:
    """Print the instructions shown after a successful run."""
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  1. cd {escape(project_name)}")
    console.print("  2. npm run dev    # Start development")
    console.print("  3. Load the 'dist' folder in Chrome at chrome://extensions/")
    console.print()
