"""Dependency classification.

Decides which framework a project uses and which of its dependencies belong
to that framework. Only names already in the manifest are ever returned.
"""

from __future__ import annotations

from collections.abc import Mapping

from .errors import FrameworkNotDetectedError
from .models import Framework, Manifest

# Router packages always shown by --list-versions, to help spot version skew.
SENTINEL_PACKAGES = ("@remix-run/router", "react-router", "react-router-dom")


def detect_framework(manifest: Manifest) -> Framework:
    """Identify the project's framework from its package names.

    Any Remix package (``remix``, ``@remix-run/*``) marks a Remix project,
    and any ``@react-router/*`` package marks a React Router project. Bare
    ``react-router``/``react-router-dom`` only count towards React Router
    when no Remix package is present, since Remix apps depend on them too.

    Raises:
        FrameworkNotDetectedError: If no framework package, or packages of
            both frameworks, are among the dependencies.
    """
    deps = manifest.all_dependencies()
    remix = bool(classify(deps, Framework.REMIX))
    react_router = any(name.startswith("@react-router/") for name in deps) or (
        not remix and bool(classify(deps, Framework.REACT_ROUTER))
    )

    detected = {Framework.REMIX: remix, Framework.REACT_ROUTER: react_router}
    found = [fw for fw, present in detected.items() if present]
    if not found:
        raise FrameworkNotDetectedError(
            "Could not detect a supported framework: expected remix, "
            "@remix-run/*, react-router, react-router-dom or @react-router/* "
            "in package.json dependencies."
        )
    if len(found) > 1:
        raise FrameworkNotDetectedError(
            "Found dependencies for more than one framework "
            f"({', '.join(fw.value for fw in found)}); cannot tell which to upgrade."
        )
    return found[0]


def is_framework_package(name: str, framework: Framework) -> bool:
    """Return True if ``name`` follows the framework's package naming.

    Remix: ``remix`` and ``@remix-run/*``, except the ``@remix-run/v1-*``
    compatibility shims and ``@remix-run/router``, which is versioned
    independently.

    React Router: ``react-router``, ``react-router-dom`` and
    ``@react-router/*``.
    """
    if framework is Framework.REMIX:
        return (
            (name.startswith("@remix-run/") or name == "remix")
            and not name.startswith("@remix-run/v1-")
            and name != "@remix-run/router"
        )
    return name.startswith("@react-router/") or name in (
        "react-router",
        "react-router-dom",
    )


def classify(deps: Mapping[str, str], framework: Framework) -> list[str]:
    """Return the framework packages in ``deps``, in manifest order."""
    return [name for name in deps if is_framework_package(name, framework)]


def list_targets(manifest: Manifest, framework: Framework) -> list[str]:
    """Packages to report for --list-versions.

    All framework packages (production first, then development), followed
    by any sentinel router packages the manifest declares.
    """
    deps = manifest.all_dependencies()
    names = classify(deps, framework)
    for sentinel in SENTINEL_PACKAGES:
        if sentinel in deps and sentinel not in names:
            names.append(sentinel)
    return names
