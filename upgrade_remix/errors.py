"""Error types for upgrade-remix.

Every error is a ClickException, so the CLI reports it as ``Error: <message>``
on stderr and exits with code 1. Nothing here is retried.
"""

from __future__ import annotations

import click


class UpgradeError(click.ClickException):
    """Base class for all fatal upgrade-remix errors."""


class ManifestNotFoundError(UpgradeError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f"Could not find a package.json file at {path}!\n"
            "Please run `upgrade-remix` from your app's root directory."
        )


class InvalidManifestError(UpgradeError):
    """package.json exists but cannot be read as a manifest."""


class NoManagerDetectedError(UpgradeError):
    def __init__(self, lock_files: list[str]) -> None:
        super().__init__(
            "Unsupported package manager: none of "
            f"{', '.join(lock_files)} found.\n"
            "Use --package-manager to pick one explicitly."
        )


class UnknownManagerError(UpgradeError):
    def __init__(self, name: str, supported: list[str]) -> None:
        super().__init__(
            f"Unknown package manager {name!r}. "
            f"Supported: {', '.join(supported)}"
        )


class FrameworkNotDetectedError(UpgradeError):
    """Neither (or both) of the framework marker packages is a dependency."""


class SubprocessFailureError(UpgradeError):
    """A package manager command exited non-zero."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {command}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)
