"""Data models for upgrade-remix.

These Pydantic models represent the data read from the project and the
options collected from the command line.
"""

from __future__ import annotations

import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Framework(str, Enum):
    """Frameworks whose packages can be upgraded."""

    REMIX = "remix"
    REACT_ROUTER = "react-router"


class Manifest(BaseModel):
    """The dependency sections of a package.json file.

    Attributes:
        dependencies: Production dependencies, name → version specifier.
        dev_dependencies: Development dependencies (``devDependencies`` in
            the file).

    Key order follows the file so rendered commands are deterministic. Any
    other package.json fields are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    def all_dependencies(self) -> dict[str, str]:
        """Merge both sections; a name in both keeps its production entry."""
        merged = dict(self.dependencies)
        for name, spec in self.dev_dependencies.items():
            merged.setdefault(name, spec)
        return merged


class RunOptions(BaseModel):
    """Options for a single invocation, parsed once from the CLI.

    Attributes:
        version: Target version, range or dist-tag.
        dry_run: Render install/sync commands without executing them.
        force: Pass ``--force`` to the install command.
        no_sync: Skip the lockfile sync step after installing.
        list_versions: List installed versions instead of upgrading.
        package_manager: Explicit manager name; auto-detected when None.
        windows: Use Windows shell tools in list commands.
    """

    model_config = ConfigDict(frozen=True)

    version: str = "latest"
    dry_run: bool = False
    force: bool = False
    no_sync: bool = False
    list_versions: bool = False
    package_manager: str | None = None
    windows: bool = Field(default_factory=lambda: sys.platform == "win32")
