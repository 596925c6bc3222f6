"""Recursive template copy with exclusion filters.

Each include-list entry is copied independently.  A failure on one entry is
reported and the remaining entries are still attempted; only a run where
nothing at all was copied is an error.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from create_chrome_ext.config import CopySpec
from create_chrome_ext.utils import console, print_step

from .errors import NoFilesCopiedError


class CopyReport(BaseModel):
    """Outcome of the copy step, one entry per include-list item."""

    copied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)
    files_written: int = 0


def match_key(rel_path: Path, is_dir: bool) -> str:
    """Return the string exclusion patterns are matched against.

    ``src/popup.ts`` -> ``"/src/popup.ts"``; directory ``.git`` -> ``"/.git/"``.
    """
    key = "/" + rel_path.as_posix()
    return key + "/" if is_dir else key


def is_excluded(rel_path: Path, is_dir: bool, patterns: list[str]) -> bool:
    """Return ``True`` if any pattern is a substring of the path's match key."""
    key = match_key(rel_path, is_dir)
    return any(pattern in key for pattern in patterns)


def copy_tree(src: Path, dest: Path, root: Path, patterns: list[str]) -> int:
    """Copy *src* to *dest* depth-first, skipping excluded paths.

    Paths are matched relative to *root* so that the template's install
    location never influences the filter.  Returns the number of files
    written.
    """
    is_dir = src.is_dir()
    if is_excluded(src.relative_to(root), is_dir, patterns):
        return 0

    if not is_dir:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
        return 1

    dest.mkdir(parents=True, exist_ok=True)
    written = 0
    with os.scandir(src) as entries:
        for entry in entries:
            written += copy_tree(Path(entry.path), dest / entry.name, root, patterns)
    return written


def copy_template(template_root: Path, project_dir: Path, spec: CopySpec) -> CopyReport:
    """Copy every include-list entry from *template_root* into *project_dir*.

    Raises:
        NoFilesCopiedError: If no entry was copied.
    """
    print_step("Copying template files...")
    print_step(f"  Template directory: {template_root}")

    report = CopyReport()
    for item in spec.include:
        src = template_root / item
        if not src.exists():
            report.skipped.append(item)
            console.print(
                f"[yellow]  ⚠ Skipped {escape(item)} (not found at {escape(str(src))})[/yellow]"
            )
            continue
        try:
            report.files_written += copy_tree(
                src, project_dir / item, template_root, spec.exclude_patterns
            )
        except OSError as exc:
            report.failed[item] = str(exc)
            console.print(f"[red]  ✗ Failed to copy {escape(item)}: {escape(str(exc))}[/red]")
            continue
        report.copied.append(item)
        console.print(f"[green]  ✓ Copied {escape(item)}[/green]")

    if not report.copied:
        raise NoFilesCopiedError(template_root, spec.include)
    return report
