"""package.json reading utilities.

The manifest is only ever read here. Writing it back is left to the package
manager, which rewrites package.json as part of its install command.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .errors import InvalidManifestError, ManifestNotFoundError
from .models import Manifest

MANIFEST_FILE = "package.json"


def manifest_path(root: Path) -> Path:
    """Return the package.json path for a project root."""
    return root / MANIFEST_FILE


def load_manifest(root: Path) -> Manifest:
    """Load and validate package.json from ``root``.

    Raises:
        ManifestNotFoundError: If package.json does not exist.
        InvalidManifestError: If it is not UTF-8 JSON or its dependency sections
            are not name → version mappings.
    """
    path = manifest_path(root)
    if not path.exists():
        raise ManifestNotFoundError(str(path))

    try:
        return Manifest.model_validate_json(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, ValidationError) as exc:
        raise InvalidManifestError(f"Could not read {path}:\n{exc}") from exc
