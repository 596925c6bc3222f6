"""Best-effort dependency installation for a freshly generated project."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from rich.markup import escape

from create_chrome_ext.utils import console, print_success, print_warning


def install_dependencies(project_dir: Path, argv: list[str]) -> bool:
    """Run *argv* inside *project_dir* with inherited stdio.

    Blocks until the installer exits.  A missing executable or a non-zero
    exit status is reported as a warning and ``False`` is returned; the
    generated project is still usable, so neither is raised.
    """
    command = " ".join(argv)
    console.print()
    console.print("[bold yellow]Installing dependencies...[/bold yellow]")

    # Resolve through PATH so Windows shims like npm.cmd are found.
    executable = shutil.which(argv[0]) or argv[0]
    try:
        subprocess.run([executable, *argv[1:]], cwd=project_dir, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        print_warning(f"⚠ Failed to install dependencies. You can run \"{command}\" manually.")
        console.print(f"[dim]  {escape(str(exc))}[/dim]")
        return False

    print_success("✓ Dependencies installed")
    return True
