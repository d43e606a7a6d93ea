"""Package manager registry.

Each supported package manager is a PackageManager subclass that knows its
lockfile name and how to render install, sync and list commands. Adding a
manager means adding a subclass and registering it in MANAGERS.
"""

from __future__ import annotations

import shlex
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from .errors import NoManagerDetectedError, UnknownManagerError
from .shell import info
from .versions import TargetVersion


def join_tokens(*tokens: str | None | bool) -> str:
    """Join command tokens, dropping empty, None and False entries."""
    return " ".join(t for t in tokens if isinstance(t, str) and t)


def render_packages(packages: Sequence[str], version: str) -> str:
    """Render shell-quoted ``name@version`` arguments, space-separated."""
    return " ".join(shlex.quote(f"{name}@{version}") for name in packages)


class PackageManager(ABC):
    """Base class for all package managers.

    Subclasses provide the manager's name, lockfile and install verb along
    with the flags it uses. Rendering is shared so every manager follows
    the same token order:

        <install verb> [--force] [dev/prod flag] [exact flag] <packages>
    """

    name: str
    lock_file: str
    install_verb: str
    dev_flag: str
    prod_flag: str | None = None
    exact_flag: str
    force_flag: str = "--force"

    def install_command(
        self,
        packages: Sequence[str],
        version: str,
        *,
        is_dev: bool,
        force: bool = False,
        exact: bool = False,
    ) -> str:
        """Render the command that installs ``packages`` at ``version``.

        Args:
            packages: Package names, in the order they should appear.
            version: Token rendered after each ``name@``.
            is_dev: Save as development dependencies.
            force: Add the manager's force flag.
            exact: Add the manager's exact-pin flag.
        """
        return join_tokens(
            self.install_verb,
            force and self.force_flag,
            self.dev_flag if is_dev else self.prod_flag,
            exact and self.exact_flag,
            render_packages(packages, version),
        )

    @abstractmethod
    def sync_command(self) -> str:
        """Render the command that reinstalls from the lockfile."""

    @abstractmethod
    def list_command(self, package: str, *, windows: bool = False) -> str:
        """Render the command that shows the installed version of a package."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Npm(PackageManager):
    name = "npm"
    lock_file = "package-lock.json"
    install_verb = "npm install"
    dev_flag = "--save-dev"
    prod_flag = "--save"
    exact_flag = "--save-exact"

    def sync_command(self) -> str:
        return "npm ci"

    def list_command(self, package: str, *, windows: bool = False) -> str:
        return f"npm list {shlex.quote(package)}"


class Yarn(PackageManager):
    name = "yarn"
    lock_file = "yarn.lock"
    install_verb = "yarn add"
    dev_flag = "--dev"
    exact_flag = "--exact"

    def sync_command(self) -> str:
        return "yarn install --frozen-lockfile"

    def list_command(self, package: str, *, windows: bool = False) -> str:
        return f"yarn list --pattern {shlex.quote(package)}"


class Pnpm(PackageManager):
    name = "pnpm"
    lock_file = "pnpm-lock.yaml"
    install_verb = "pnpm add"
    dev_flag = "--save-dev"
    exact_flag = "--save-exact"

    def sync_command(self) -> str:
        return "pnpm install --frozen-lockfile"

    def list_command(self, package: str, *, windows: bool = False) -> str:
        return f"pnpm list {shlex.quote(package)}"


class Bun(PackageManager):
    name = "bun"
    lock_file = "bun.lockb"
    install_verb = "bun add"
    dev_flag = "--dev"
    exact_flag = "--exact"

    def sync_command(self) -> str:
        return "bun install --frozen-lockfile"

    def list_command(self, package: str, *, windows: bool = False) -> str:
        # `bun pm ls` takes no filter argument
        search = "findstr" if windows else "grep"
        return f"bun pm ls | {search} {shlex.quote(package)}"


# Detection priority follows insertion order.
MANAGERS: dict[str, PackageManager] = {
    m.name: m for m in (Npm(), Yarn(), Pnpm(), Bun())
}


def get_manager(name: str) -> PackageManager:
    """Look up a manager by name (case-insensitive).

    Raises:
        UnknownManagerError: If ``name`` is not a supported manager.
    """
    try:
        return MANAGERS[name.strip().lower()]
    except KeyError:
        raise UnknownManagerError(name, list(MANAGERS)) from None


def select_manager(override: str | None, root: Path) -> PackageManager:
    """Pick the package manager for the project at ``root``.

    An explicit override wins. Otherwise the first manager (npm, yarn, pnpm,
    bun) whose lockfile exists in ``root`` is used.

    Raises:
        UnknownManagerError: If ``override`` names an unsupported manager.
        NoManagerDetectedError: If no override is given and no known
            lockfile exists.
    """
    if override:
        manager = get_manager(override)
        info(f"Using {manager.name} (--package-manager)")
        return manager

    for manager in MANAGERS.values():
        if (root / manager.lock_file).exists():
            info(f"Found {manager.lock_file}, using {manager.name}")
            return manager

    raise NoManagerDetectedError([m.lock_file for m in MANAGERS.values()])


def build_install_command(
    manager: PackageManager,
    packages: Sequence[str],
    target: TargetVersion,
    *,
    is_dev: bool,
    force: bool = False,
) -> str:
    """Render an install command, pinning exactly unless the target is a range."""
    return manager.install_command(
        packages, target.spec, is_dev=is_dev, force=force, exact=target.exact
    )
