"""Target version handling.

A target is either *exact* (``2.0.0``, ``latest``) or *loose* (``^2.0.0``,
``~2.0.0``). Exact targets make the install command pin the version; loose
targets drop the range operator and let the package manager apply its own
default range when it saves package.json.
"""

from __future__ import annotations

import semver
from pydantic import BaseModel, ConfigDict

RANGE_OPERATORS = ("^", "~")


class TargetVersion(BaseModel):
    """A parsed target version.

    Attributes:
        raw: The string as given on the command line.
        exact: True unless ``raw`` starts with a range operator.
        spec: The token rendered after ``name@`` in install commands.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    exact: bool
    spec: str

    @property
    def is_dist_tag(self) -> bool:
        """True for registry tags such as ``latest`` or ``next``."""
        return not self.spec[:1].isdigit() and not semver.Version.is_valid(
            self.spec
        )

    def describe(self) -> str:
        """Human-readable summary for the trace output."""
        if self.is_dist_tag:
            kind = "dist-tag"
        elif semver.Version.is_valid(self.spec):
            kind = "version"
        else:
            kind = "partial version"
        pin = "exact" if self.exact else "range"
        return f"{self.spec} ({kind}, {pin})"


def parse_target_version(version: str) -> TargetVersion:
    """Classify a target version string.

    Examples:
        "2.0.0"  → exact, spec "2.0.0"
        "^2.0.0" → loose, spec "2.0.0"
        "latest" → exact, spec "latest"
    """
    version = version.strip()
    if version.startswith(RANGE_OPERATORS):
        return TargetVersion(raw=version, exact=False, spec=version[1:])
    return TargetVersion(raw=version, exact=True, spec=version)
