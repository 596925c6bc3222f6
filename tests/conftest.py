"""Shared pytest fixtures for the create-chrome-ext test suite.

Provides reusable fixtures for:
- A fake template tree with both wanted files and excluded clutter
- A clean working directory to scaffold into
- Settings and scaffolders pointed at the fake template
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_chrome_ext.config import ScaffoldSettings
from create_chrome_ext.scaffolder import ProjectScaffolder


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of the tests."""
    for var in (
        "CREATE_CHROME_EXT_TEMPLATE_DIR",
        "CREATE_CHROME_EXT_INSTALL_COMMAND",
        "CREATE_CHROME_EXT_SKIP_INSTALL",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

SAMPLE_PACKAGE_JSON: dict = {
    "name": "create-chrome-ext-ts",
    "version": "1.1.1",
    "bin": {"create-chrome-ext-ts": "./bin/create-chrome-extension.js"},
    "scripts": {
        "build": "webpack --mode production",
        "dev": "webpack --mode development --watch",
        "generate": "node generate-project.js",
    },
    "devDependencies": {"typescript": "^5.4.5"},
}

SAMPLE_MANIFEST_JSON: dict = {
    "manifest_version": 3,
    "name": "Chrome Extension TypeScript Template",
    "version": "1.0.0",
    "description": "Démo extension",
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_template(root: Path) -> Path:
    """Create a template tree under *root* and return it.

    Alongside the real template entries the tree carries everything the copy
    step must leave behind: dependency folders, build output, a git directory,
    lockfiles, OS metadata and the generator launcher.
    """
    _write(root / "src" / "background.ts", "console.log('background');\n")
    _write(root / "src" / "popup.ts", "console.log('popup');\n")
    _write(root / "src" / "popup.html", "<html></html>\n")
    _write(root / "src" / "lib" / "storage.ts", "export const KEY = 'enabled';\n")
    _write(root / "src" / "node_modules" / "left-pad" / "index.js", "module.exports = 1;\n")
    _write(root / "src" / "dist" / "popup.js", "compiled\n")
    _write(root / "src" / ".git" / "HEAD", "ref: refs/heads/main\n")
    _write(root / "src" / ".DS_Store", "\x00")
    _write(root / "manifest.json", json.dumps(SAMPLE_MANIFEST_JSON, indent=4))
    _write(root / "package.json", json.dumps(SAMPLE_PACKAGE_JSON, indent=4))
    _write(root / "tsconfig.json", '{"compilerOptions": {"strict": true}}\n')
    _write(root / "webpack.config.js", "module.exports = {};\n")
    _write(root / ".gitignore", "node_modules/\ndist/\n")
    _write(root / "README.md", "# Template\n")
    _write(root / "package-lock.json", "{}\n")
    _write(root / "generate-project.js", "// generator\n")
    _write(root / "bin" / "create-chrome-extension.js", "#!/usr/bin/env node\n")
    _write(root / "node_modules" / "webpack" / "index.js", "module.exports = {};\n")
    _write(root / "dist" / "background.js", "compiled\n")
    _write(root / ".git" / "config", "[core]\n")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A complete fake template tree."""
    return build_template(tmp_path / "template")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory that projects are scaffolded into."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def settings(template_root: Path) -> ScaffoldSettings:
    """Settings pointed at the fake template, with installation disabled."""
    return ScaffoldSettings(template_dir=template_root, install_dependencies=False)


@pytest.fixture
def scaffolder(settings: ScaffoldSettings) -> ProjectScaffolder:
    return ProjectScaffolder(settings)


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file below *root* (relative POSIX path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot():
    """The ``snapshot_tree`` helper, for comparing trees before and after a run."""
    return snapshot_tree
