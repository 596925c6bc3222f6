"""Targeted rewrites of ``package.json`` and ``manifest.json``.

After the template is copied, the npm package gets the project's package
identifier and loses the template-only ``bin`` field and ``generate`` script;
the extension manifest gets the human-readable title.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from create_chrome_ext.utils import load_json, print_step, save_json, to_display_name, to_package_name

from .errors import ManifestPatchError

PACKAGE_JSON = "package.json"
MANIFEST_JSON = "manifest.json"


class ManifestPatch(BaseModel):
    """Names derived from the project name."""

    package_name: str = Field(..., description="npm package identifier")
    display_name: str = Field(..., description="Extension title shown in the browser")

    @classmethod
    def from_project_name(cls, project_name: str) -> "ManifestPatch":
        return cls(
            package_name=to_package_name(project_name),
            display_name=to_display_name(project_name),
        )


def _load_manifest(path: Path) -> dict:
    try:
        return load_json(path)
    except ValueError as exc:
        raise ManifestPatchError(path, exc) from exc


def patch_package_json(path: Path, patch: ManifestPatch) -> bool:
    """Rename the package and strip template-only entries.

    Returns ``False`` without touching anything if *path* does not exist.
    """
    if not path.exists():
        return False
    data = _load_manifest(path)
    data["name"] = patch.package_name
    data.pop("bin", None)
    scripts = data.get("scripts")
    if isinstance(scripts, dict):
        scripts.pop("generate", None)
    save_json(data, path)
    return True


def patch_manifest_json(path: Path, patch: ManifestPatch) -> bool:
    """Set the extension title.  Returns ``False`` if *path* does not exist."""
    if not path.exists():
        return False
    data = _load_manifest(path)
    data["name"] = patch.display_name
    save_json(data, path)
    return True


def apply_patches(project_dir: Path, patch: ManifestPatch) -> list[str]:
    """Patch both manifests in *project_dir*, skipping any that are absent.

    Returns the names of the files that were rewritten.
    """
    patched: list[str] = []
    print_step(f"Updating {PACKAGE_JSON}...")
    if patch_package_json(project_dir / PACKAGE_JSON, patch):
        patched.append(PACKAGE_JSON)
    print_step(f"Updating {MANIFEST_JSON}...")
    if patch_manifest_json(project_dir / MANIFEST_JSON, patch):
        patched.append(MANIFEST_JSON)
    return patched
