"""Template root discovery.

The bundled extension template can live in a few places depending on how the
tool was installed (wheel, editable checkout, explicit override).  Each place
is a ``TemplateCandidate``; ``TemplateLocator`` evaluates them in order and
returns the first directory that holds both ``src`` and ``manifest.json``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Callable

from create_chrome_ext.config import ScaffoldSettings

from .errors import TemplateNotFoundError

PACKAGE_NAME = "create_chrome_ext"
TEMPLATE_DIR_NAME = "template"
REQUIRED_ENTRIES: tuple[str, ...] = ("src", "manifest.json")


def is_template_root(path: Path) -> bool:
    """Return ``True`` if *path* contains every required template entry."""
    return all((path / entry).exists() for entry in REQUIRED_ENTRIES)


@dataclass(frozen=True)
class TemplateCandidate:
    """A named strategy that proposes one template location."""

    label: str
    resolve: Callable[[], Path | None]


class TemplateLocator:
    """Evaluates template candidates in order, first valid one wins."""

    def __init__(self, candidates: list[TemplateCandidate]) -> None:
        self.candidates = candidates

    def locate(self) -> Path:
        """Return the first candidate that is a valid template root.

        Raises:
            TemplateNotFoundError: If no candidate qualifies.  The error lists
                every location that was checked.
        """
        checked: list[tuple[str, Path]] = []
        for candidate in self.candidates:
            path = candidate.resolve()
            if path is None or any(path == seen for _, seen in checked):
                continue
            if is_template_root(path):
                return path
            checked.append((candidate.label, path))
        raise TemplateNotFoundError(checked)


# ---------------------------------------------------------------------------
# Default candidates
# ---------------------------------------------------------------------------


def bundled_template_dir() -> Path:
    """The template directory next to this package's modules."""
    return Path(__file__).resolve().parents[1] / TEMPLATE_DIR_NAME


def _package_data() -> Path:
    # The package was loaded from a path rather than by import name.
    try:
        root = resources.files(PACKAGE_NAME)
    except ModuleNotFoundError:
        return bundled_template_dir()
    return Path(str(root.joinpath(TEMPLATE_DIR_NAME)))


def _source_checkout() -> Path:
    return Path(__file__).resolve().parents[2] / TEMPLATE_DIR_NAME


def _shared_data() -> Path:
    return Path(sys.prefix) / "share" / "create-chrome-ext" / TEMPLATE_DIR_NAME


def default_candidates(settings: ScaffoldSettings) -> list[TemplateCandidate]:
    """Build the standard ordered candidate list for *settings*."""
    candidates: list[TemplateCandidate] = []
    if settings.template_dir is not None:
        override = settings.template_dir.expanduser()
        candidates.append(TemplateCandidate("configured template_dir", lambda: override))
    candidates.extend([
        TemplateCandidate("package data", _package_data),
        TemplateCandidate("source checkout", _source_checkout),
        TemplateCandidate("shared data", _shared_data),
    ])
    return candidates
