"""create-chrome-ext scaffolder -- copies the bundled extension template.

Quick usage::

    from create_chrome_ext.scaffolder import ProjectScaffolder

    result = ProjectScaffolder().scaffold("my-ext", "/tmp/output")
    print(result.project_dir)
"""

from create_chrome_ext.scaffolder.errors import (
    DestinationExistsError,
    InvalidNameError,
    ManifestPatchError,
    NoFilesCopiedError,
    ScaffoldError,
    TemplateNotFoundError,
)
from create_chrome_ext.scaffolder.generator import ProjectScaffolder, ScaffoldRequest, ScaffoldResult
from create_chrome_ext.scaffolder.locator import TemplateCandidate, TemplateLocator
from create_chrome_ext.scaffolder.manifest import ManifestPatch

__all__ = [
    "DestinationExistsError",
    "InvalidNameError",
    "ManifestPatch",
    "ManifestPatchError",
    "NoFilesCopiedError",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "TemplateCandidate",
    "TemplateLocator",
    "TemplateNotFoundError",
]
