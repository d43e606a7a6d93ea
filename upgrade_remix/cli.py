"""CLI entry point for upgrade-remix."""

from __future__ import annotations

import click

from upgrade_remix.models import RunOptions
from upgrade_remix.pipeline import run_upgrade


@click.command()
@click.version_option(package_name="upgrade-remix")
@click.argument("target", metavar="VERSION", default="latest")
@click.option(
    "-d", "--dry-run", is_flag=True, help="Print commands without running them."
)
@click.option("-f", "--force", is_flag=True, help="Pass --force to the installer.")
@click.option(
    "-l",
    "--list-versions",
    is_flag=True,
    help="List installed framework package versions instead of upgrading.",
)
@click.option(
    "-p",
    "--package-manager",
    metavar="NAME",
    default=None,
    help="Package manager to use (npm, yarn, pnpm, bun). Detected from the lockfile by default.",
)
@click.option(
    "-s", "--no-sync", is_flag=True, help="Skip the lockfile sync after installing."
)
def cli(
    target: str,
    dry_run: bool,
    force: bool,
    list_versions: bool,
    package_manager: str | None,
    no_sync: bool,
) -> None:
    """Upgrade Remix / React Router packages to VERSION (default: latest).

    Run from your app's root directory. VERSION may be an exact version
    (2.0.0), a dist-tag (latest) or a range (^2.0.0); exact versions and
    tags are saved pinned.
    """
    options = RunOptions(
        version=target,
        dry_run=dry_run,
        force=force,
        no_sync=no_sync,
        list_versions=list_versions,
        package_manager=package_manager,
    )
    run_upgrade(options)
