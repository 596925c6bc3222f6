"""create-chrome-ext configuration.

Typed settings for a scaffolding run. Values come from defaults, from
environment variables (``ScaffoldSettings.from_env``) and finally from CLI
flags layered on top by the entry point.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_INCLUDE: list[str] = [
    "src",
    "manifest.json",
    "package.json",
    "tsconfig.json",
    "webpack.config.js",
    ".gitignore",
    "README.md",
]

# Matched as substrings against "/<relative path>", directories get a
# trailing slash.  "/.git/" therefore catches the repository directory but
# not ".gitignore".
DEFAULT_EXCLUDE: list[str] = [
    "node_modules",
    "dist",
    "/.git/",
    "generate-project.js",
    "bin",
    ".DS_Store",
    "package-lock.json",
]

_TRUTHY = ("1", "true", "yes", "on")


class CopySpec(BaseModel):
    """Which template entries are copied and which paths are left behind."""

    include: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE),
        description="Top-level template entries, copied in this order",
    )
    exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE),
        description="Substrings that exclude a file or directory from the copy",
    )


class ScaffoldSettings(BaseModel):
    """Settings for one scaffolding run.

    Instances are created once by the CLI entry point and handed to
    ``ProjectScaffolder``.
    """

    template_dir: Path | None = Field(
        default=None, description="Explicit template root, checked before any other location"
    )
    install_dependencies: bool = Field(default=True)
    install_command: str = Field(default="npm install", min_length=1)
    copy_spec: CopySpec = Field(default_factory=CopySpec)

    @field_validator("install_command")
    @classmethod
    def _command_not_blank(cls, value: str) -> str:
        if not shlex.split(value):
            raise ValueError("install_command must name a program")
        return value

    def install_argv(self) -> list[str]:
        """Return the install command split into an argument list."""
        return shlex.split(self.install_command)

    @classmethod
    def from_env(cls) -> "ScaffoldSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            CREATE_CHROME_EXT_TEMPLATE_DIR, CREATE_CHROME_EXT_INSTALL_COMMAND,
            CREATE_CHROME_EXT_SKIP_INSTALL.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CREATE_CHROME_EXT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CREATE_CHROME_EXT_TEMPLATE_DIR"])
        if os.environ.get("CREATE_CHROME_EXT_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["CREATE_CHROME_EXT_INSTALL_COMMAND"]
        skip = os.environ.get("CREATE_CHROME_EXT_SKIP_INSTALL", "").strip().lower()
        if skip in _TRUTHY:
            kwargs["install_dependencies"] = False
        return cls(**kwargs)
