"""Upgrade pipeline: check → detect → classify → install → sync.

This module orchestrates an upgrade-remix run:
1. Check that package.json exists and read it
2. Pick the package manager (override or lockfile detection)
3. Detect the framework from its marker package
4. Either list installed versions of the framework packages, or
5. Install the target version for production and dev dependencies, then
   reinstall from the lockfile to sync everything up

Every precondition is checked before the first command runs, so a failed
check never leaves the project half-upgraded. Commands run one at a time.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click

from .deps import classify, detect_framework, list_targets
from .managers import PackageManager, build_install_command, select_manager
from .manifest import load_manifest, manifest_path
from .models import Framework, Manifest, RunOptions
from .shell import info, run, step
from .versions import TargetVersion, parse_target_version


def list_versions(
    manager: PackageManager,
    manifest: Manifest,
    framework: Framework,
    *,
    windows: bool = False,
) -> list[str]:
    """Print the installed version of each framework and sentinel package.

    List commands are read-only, so they run even under --dry-run.

    Returns:
        The list commands that were executed.
    """
    packages = list_targets(manifest, framework)
    step(f"Listing installed versions of {len(packages)} packages")

    commands: list[str] = []
    for package in packages:
        cmd = manager.list_command(package, windows=windows)
        commands.append(cmd)
        info(f"Executing: {cmd}")
        output = run(cmd)
        if output.strip():
            click.echo(output.rstrip())
    return commands


def install_updates(
    manager: PackageManager,
    packages: Sequence[str],
    target: TargetVersion,
    *,
    is_dev: bool,
    force: bool,
    dry_run: bool,
) -> str:
    """Render and (unless dry-running) execute one install command.

    An empty package list is rendered and traced but not executed: some
    managers reject ``add`` with no packages, and others would fall back
    to a full install.

    Returns:
        The rendered install command.
    """
    kind = "dev dependencies" if is_dev else "dependencies"
    cmd = build_install_command(manager, packages, target, is_dev=is_dev, force=force)

    if not packages:
        info(f"No {kind} to upgrade, skipping: {cmd}")
    elif dry_run:
        info(f"[dry-run] Would execute: {cmd}")
    else:
        info(f"Executing: {cmd}")
        run(cmd)
    return cmd


def sync_lockfile(manager: PackageManager, *, dry_run: bool) -> str:
    """Reinstall from the lockfile so every dependency is in sync."""
    cmd = manager.sync_command()
    if dry_run:
        info(f"[dry-run] Would run '{cmd}' to sync up all deps")
    else:
        info(f"Running '{cmd}' to sync up all deps")
        run(cmd)
    return cmd


def upgrade(
    manager: PackageManager,
    manifest: Manifest,
    framework: Framework,
    options: RunOptions,
) -> list[str]:
    """Upgrade production then dev framework packages, then sync.

    Returns:
        Every rendered command in order, executed or not.
    """
    target = parse_target_version(options.version)
    step(f"Upgrading {framework.value} packages to {target.describe()}")

    commands = [
        install_updates(
            manager,
            classify(manifest.dependencies, framework),
            target,
            is_dev=False,
            force=options.force,
            dry_run=options.dry_run,
        ),
        install_updates(
            manager,
            classify(manifest.dev_dependencies, framework),
            target,
            is_dev=True,
            force=options.force,
            dry_run=options.dry_run,
        ),
    ]

    if options.no_sync:
        info("Skipping lockfile sync (--no-sync)")
    else:
        commands.append(sync_lockfile(manager, dry_run=options.dry_run))
    return commands


def run_upgrade(options: RunOptions, root: Path | None = None) -> list[str]:
    """Execute an upgrade-remix run.

    Args:
        options: Parsed command-line options.
        root: Project directory; defaults to the current directory.

    Returns:
        Every rendered command in order, executed or not.
    """
    root = root or Path.cwd()

    # Preconditions: nothing runs until all three pass
    step("Inspecting project")
    manifest = load_manifest(root)
    info(f"Read {manifest_path(root)}")
    manager = select_manager(options.package_manager, root)
    framework = detect_framework(manifest)
    info(f"Detected {framework.value} project")

    if options.list_versions:
        return list_versions(manager, manifest, framework, windows=options.windows)

    commands = upgrade(manager, manifest, framework, options)
    if options.dry_run:
        click.echo("\nDry run: no commands were executed.")
    return commands
