"""Tests for upgrade_remix.cli."""

from __future__ import annotations

from collections.abc import Callable
from importlib import metadata
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest
from click.testing import CliRunner

from upgrade_remix.cli import cli
from upgrade_remix.models import RunOptions


@patch("upgrade_remix.cli.run_upgrade")
def test_defaults(mock_run_upgrade: MagicMock) -> None:
    """With no arguments, upgrades to latest with every flag off."""
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0, result.output
    options: RunOptions = mock_run_upgrade.call_args[0][0]
    assert options.version == "latest"
    assert not options.dry_run
    assert not options.force
    assert not options.no_sync
    assert not options.list_versions
    assert options.package_manager is None


@patch("upgrade_remix.cli.run_upgrade")
def test_short_flags(mock_run_upgrade: MagicMock) -> None:
    """Short flags map onto RunOptions."""
    result = CliRunner().invoke(cli, ["^2.0.0", "-d", "-f", "-s", "-p", "pnpm"])

    assert result.exit_code == 0, result.output
    options: RunOptions = mock_run_upgrade.call_args[0][0]
    assert options.version == "^2.0.0"
    assert options.dry_run
    assert options.force
    assert options.no_sync
    assert options.package_manager == "pnpm"


@patch("upgrade_remix.cli.run_upgrade")
def test_long_flags(mock_run_upgrade: MagicMock) -> None:
    """Long flags map onto RunOptions."""
    result = CliRunner().invoke(
        cli, ["--list-versions", "--package-manager", "bun", "--no-sync"]
    )

    assert result.exit_code == 0, result.output
    options: RunOptions = mock_run_upgrade.call_args[0][0]
    assert options.list_versions
    assert options.package_manager == "bun"
    assert options.no_sync


def test_dry_run_end_to_end(
    make_project: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """A dry run prints the commands and exits 0 without running anything."""
    root = make_project(
        dependencies={"remix": "1.2.0", "@remix-run/react": "1.2.0"},
        lock_files=("yarn.lock",),
    )
    monkeypatch.chdir(root)

    with patch("upgrade_remix.pipeline.run") as mock_run:
        result = CliRunner().invoke(cli, ["2.0.0", "--dry-run"])

    assert result.exit_code == 0, result.output
    mock_run.assert_not_called()
    assert "Found yarn.lock, using yarn" in result.output
    assert "yarn add --exact remix@2.0.0 @remix-run/react@2.0.0" in result.output
    assert "yarn install --frozen-lockfile" in result.output


def test_missing_manifest_exits_nonzero(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Errors are reported as 'Error: ...' with exit code 1."""
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 1
    assert "Error: Could not find a package.json file" in result.output


def test_unknown_manager_exits_nonzero(
    make_project: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    root = make_project(dependencies={"@remix-run/react": "1.0.0"})
    monkeypatch.chdir(root)

    result = CliRunner().invoke(cli, ["-p", "deno"])

    assert result.exit_code == 1
    assert "Unknown package manager 'deno'" in result.output


@patch("upgrade_remix.cli.run_upgrade")
def test_positional_version(mock_run_upgrade: MagicMock) -> None:
    """VERSION is a positional argument, separate from --version."""
    result = CliRunner().invoke(cli, ["2.0.0"])

    assert result.exit_code == 0, result.output
    assert mock_run_upgrade.call_args[0][0].version == "2.0.0"


@patch("upgrade_remix.cli.run_upgrade")
def test_version_flag_prints_tool_version(mock_run_upgrade: MagicMock) -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0, result.output
    assert metadata.version("upgrade-remix") in result.output
    mock_run_upgrade.assert_not_called()


def test_scenario_exact_version_end_to_end(
    make_project: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """`upgrade-remix 2.0.0` installs and syncs through the detected manager."""
    root = make_project(
        dependencies={"remix": "1.2.0", "@remix-run/router": "1.0.0"}
    )
    monkeypatch.chdir(root)

    with patch("upgrade_remix.pipeline.run") as mock_run:
        result = CliRunner().invoke(cli, ["2.0.0"])

    assert result.exit_code == 0, result.output
    assert mock_run.call_args_list == [
        call("npm install --save --save-exact remix@2.0.0"),
        call("npm ci"),
    ]


def test_scenario_range_version_end_to_end(
    make_project: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    root = make_project(
        dependencies={"remix": "1.2.0", "@remix-run/router": "1.0.0"}
    )
    monkeypatch.chdir(root)

    with patch("upgrade_remix.pipeline.run") as mock_run:
        result = CliRunner().invoke(cli, ["^2.0.0", "--no-sync"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once_with("npm install --save remix@2.0.0")


def test_scenario_list_versions_end_to_end(
    make_project: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    root = make_project(dependencies={"react-router-dom": "6.22.0"})
    monkeypatch.chdir(root)

    with patch("upgrade_remix.pipeline.run") as mock_run:
        mock_run.return_value = "react-router-dom@6.22.0\n"
        result = CliRunner().invoke(cli, ["-l"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once_with("npm list react-router-dom")
    assert "react-router-dom@6.22.0" in result.output
