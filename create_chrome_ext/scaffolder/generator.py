"""Main scaffolding orchestrator.

Runs the pipeline that turns a project name into a ready-to-build browser
extension project: validate -> locate template -> create destination ->
copy -> patch manifests -> (optionally) install dependencies.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from rich.markup import escape

from create_chrome_ext.config import ScaffoldSettings
from create_chrome_ext.utils import console

from .copier import CopyReport, copy_template
from .errors import DestinationExistsError, InvalidNameError, ScaffoldError
from .installer import install_dependencies
from .locator import TemplateLocator, default_candidates
from .manifest import ManifestPatch, apply_patches

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """A validated request to create one project."""

    project_name: str = Field(..., min_length=1, pattern=PROJECT_NAME_PATTERN)
    working_directory: Path

    @property
    def project_dir(self) -> Path:
        return self.working_directory / self.project_name


class ScaffoldResult(BaseModel):
    """What a successful run produced."""

    project_dir: Path
    template_root: Path
    patch: ManifestPatch
    copy_report: CopyReport
    patched_files: list[str] = Field(default_factory=list)
    dependencies_installed: bool | None = Field(
        default=None, description="None when installation was not requested"
    )


def validate_request(project_name: str, cwd: str | Path) -> ScaffoldRequest:
    """Build a ``ScaffoldRequest``, translating validation failures.

    Raises:
        InvalidNameError: If *project_name* is empty or has characters outside
            ``[A-Za-z0-9_-]``.
    """
    try:
        return ScaffoldRequest(project_name=project_name, working_directory=Path(cwd))
    except ValidationError as exc:
        raise InvalidNameError(project_name) from exc


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Creates new extension projects from the bundled template.

    The template source is only ever read.  All writes happen below
    ``<cwd>/<project_name>``.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        locator: TemplateLocator | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.locator = locator or TemplateLocator(default_candidates(self.settings))

    def scaffold(self, project_name: str, cwd: str | Path) -> ScaffoldResult:
        """Generate the project *project_name* inside *cwd*.

        Raises:
            InvalidNameError: Bad project name.
            TemplateNotFoundError: No usable template root.
            DestinationExistsError: ``cwd/project_name`` already exists.
            NoFilesCopiedError: Every include-list entry was missing or failed.
            ManifestPatchError: A copied manifest is not a JSON object.

        The project directory is removed again if copying or patching fails.
        """
        request = validate_request(project_name, cwd)
        template_root = self.locator.locate()
        project_dir = self.create_destination(request.project_dir)

        console.print(
            f"\n[bold green]Creating new Chrome extension project: "
            f"{escape(request.project_name)}[/bold green]"
        )

        try:
            copy_report = copy_template(template_root, project_dir, self.settings.copy_spec)
            patch = ManifestPatch.from_project_name(request.project_name)
            patched_files = apply_patches(project_dir, patch)
        except ScaffoldError:
            shutil.rmtree(project_dir)
            raise

        installed: bool | None = None
        if self.settings.install_dependencies:
            installed = install_dependencies(project_dir, self.settings.install_argv())

        return ScaffoldResult(
            project_dir=project_dir,
            template_root=template_root,
            patch=patch,
            copy_report=copy_report,
            patched_files=patched_files,
            dependencies_installed=installed,
        )

    @staticmethod
    def create_destination(project_dir: Path) -> Path:
        """Create *project_dir*, refusing to reuse an existing path.

        The final ``mkdir`` is the only guard against a concurrent run that
        picks the same name.
        """
        if project_dir.exists():
            raise DestinationExistsError(project_dir)
        try:
            project_dir.mkdir()
        except FileExistsError as exc:
            raise DestinationExistsError(project_dir) from exc
        return project_dir
