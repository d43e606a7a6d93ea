"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from upgrade_remix.models import Manifest

MakeProject = Callable[..., Path]


@pytest.fixture
def make_project(tmp_path: Path) -> MakeProject:
    """Return a factory that writes package.json and lockfiles into tmp_path."""

    def _make(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        lock_files: tuple[str, ...] = ("package-lock.json",),
    ) -> Path:
        content: dict = {"name": "my-app", "private": True}
        if dependencies is not None:
            content["dependencies"] = dependencies
        if dev_dependencies is not None:
            content["devDependencies"] = dev_dependencies
        (tmp_path / "package.json").write_text(json.dumps(content, indent=2))
        for lock_file in lock_files:
            (tmp_path / lock_file).write_text("")
        return tmp_path

    return _make


@pytest.fixture
def remix_manifest() -> Manifest:
    """A typical Remix v2 app manifest."""
    return Manifest(
        dependencies={
            "@remix-run/node": "^2.8.0",
            "@remix-run/react": "^2.8.0",
            "@remix-run/serve": "^2.8.0",
            "@remix-run/router": "^1.15.0",
            "isbot": "^4.1.0",
            "react": "^18.2.0",
            "react-router-dom": "^6.22.0",
        },
        dev_dependencies={
            "@remix-run/dev": "^2.8.0",
            "@remix-run/v1-route-convention": "^0.1.4",
            "typescript": "^5.1.6",
        },
    )


@pytest.fixture
def react_router_manifest() -> Manifest:
    """A React Router v7 framework-mode app manifest."""
    return Manifest(
        dependencies={
            "@react-router/node": "^7.1.0",
            "@react-router/serve": "^7.1.0",
            "isbot": "^5.1.0",
            "react": "^19.0.0",
            "react-router": "^7.1.0",
        },
        dev_dependencies={
            "@react-router/dev": "^7.1.0",
            "vite": "^5.4.0",
        },
    )
