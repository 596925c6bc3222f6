"""create-chrome-ext command line entry point.

Usage::

    create-chrome-ext my-extension
    create-chrome-ext my-extension --skip-install
    create-chrome-ext -v
"""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from create_chrome_ext.config import ScaffoldSettings
from create_chrome_ext.scaffolder import ProjectScaffolder, ScaffoldError
from create_chrome_ext.utils import console, print_error, print_next_steps, print_success

DISTRIBUTION_NAME = "create-chrome-ext"
FALLBACK_VERSION = "1.1.1"


def resolve_version() -> str:
    """Return the installed distribution version, or the fallback."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors like every other failure: message on stderr, exit 1."""

    def error(self, message: str) -> NoReturn:
        print_error(message)
        self.print_usage(sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-chrome-ext",
        description="Create a new TypeScript Chrome extension project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-chrome-ext my-extension\n"
            "  create-chrome-ext my-extension --skip-install\n"
            "  create-chrome-ext -v\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        help="Name of the directory to create (letters, numbers, '-' and '_')",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=resolve_version(),
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not install npm dependencies after copying the template",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Use this template directory instead of the bundled one",
    )
    parser.add_argument(
        "--install-command",
        default=None,
        help="Command used to install dependencies (default: npm install)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-chrome-ext``."""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    # Names may start with a hyphen ("-my-ext"), which argparse leaves unparsed.
    if args.project_name is None and extra:
        args.project_name = extra[0]

    if not args.project_name:
        print_error("Project name is required")
        console.print("Usage: create-chrome-ext <project-name>")
        console.print("       create-chrome-ext -v    # Show version")
        sys.exit(1)

    try:
        settings = ScaffoldSettings.from_env()
        overrides: dict[str, object] = {}
        if args.skip_install:
            overrides["install_dependencies"] = False
        if args.template_dir:
            overrides["template_dir"] = Path(args.template_dir)
        if args.install_command:
            overrides["install_command"] = args.install_command
        if overrides:
            settings = ScaffoldSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    scaffolder = ProjectScaffolder(settings)
    try:
        scaffolder.scaffold(args.project_name, Path.cwd())
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)

    console.print()
    print_success("Project created successfully!")
    print_next_steps(args.project_name)


if __name__ == "__main__":
    main()
