"""Errors raised by the scaffolding pipeline.

Every failure that should stop a run derives from ``ScaffoldError`` so the CLI
can turn it into a message and a non-zero exit status in one place.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails irrecoverably."""


class InvalidNameError(ScaffoldError):
    """The requested project name is empty or has disallowed characters."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        if not project_name:
            message = "Project name is required"
        else:
            message = (
                f"Invalid project name {project_name!r}: only letters, numbers, "
                "hyphens, and underscores are allowed"
            )
        super().__init__(message)


class DestinationExistsError(ScaffoldError):
    """The target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists")


class TemplateNotFoundError(ScaffoldError):
    """No candidate location holds a usable template."""

    def __init__(self, checked: list[tuple[str, Path]]) -> None:
        self.checked = checked
        lines = ["Could not find template files (need 'src' and 'manifest.json')."]
        if checked:
            lines.append("Locations checked:")
            lines.extend(f"  - {label}: {path}" for label, path in checked)
        else:
            lines.append("No candidate locations were available.")
        lines.append("Please ensure the package is installed correctly.")
        super().__init__("\n".join(lines))


class NoFilesCopiedError(ScaffoldError):
    """None of the include-list entries could be copied."""

    def __init__(self, template_root: Path, include: list[str]) -> None:
        self.template_root = template_root
        self.include = include
        super().__init__(
            "No files were copied!\n"
            f"Template directory: {template_root}\n"
            f"Files checked: {', '.join(include)}\n"
            "Please verify the package was installed correctly and contains all template files."
        )


class ManifestPatchError(ScaffoldError):
    """A copied manifest is not a JSON object and cannot be rewritten."""

    def __init__(self, path: Path, reason: Exception) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not update {path}: {reason}")
