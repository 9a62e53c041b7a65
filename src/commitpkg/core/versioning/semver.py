# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 The git-commit-pkg Authors
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

"""
Semantic version parsing and derivation.

Only the shapes the release policy knows about are accepted:
MAJOR.MINOR.PATCH, optionally followed by -alpha.N or -beta.N. Every
derivation returns a new SemanticVersion and never touches the manifest;
writing the chosen version back is the job of the menu action.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

from commitpkg.core.exceptions import VersionError, invalid_version


class PrereleaseTag(str, Enum):
    NONE = "none"
    ALPHA = "alpha"
    BETA = "beta"


_VERSION_RE = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<tag>alpha|beta)\.(?P<number>\d+))?$"
)


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    prerelease_tag: PrereleaseTag = PrereleaseTag.NONE
    prerelease_number: int | None = None

    def __post_init__(self):
        if min(self.major, self.minor, self.patch) < 0:
            raise VersionError(f"Negative version component in {self.base}")
        if (self.prerelease_tag is PrereleaseTag.NONE) != (
            self.prerelease_number is None
        ):
            raise VersionError(
                "Prerelease number must be set exactly when a prerelease tag is set"
            )
        if self.prerelease_number is not None and self.prerelease_number < 0:
            raise VersionError(
                f"Prerelease number must not be negative, got {self.prerelease_number}"
            )

    @property
    def base(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease_tag is not PrereleaseTag.NONE

    def __str__(self) -> str:
        if not self.is_prerelease:
            return self.base
        return f"{self.base}-{self.prerelease_tag.value}.{self.prerelease_number}"


def parse_version(text: str) -> SemanticVersion:
    """
    Parse a manifest version string.

    Raises:
        VersionError: if the string is not MAJOR.MINOR.PATCH[-alpha.N|-beta.N]
    """
    match = _VERSION_RE.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise invalid_version(str(text))

    tag = match.group("tag")
    number = match.group("number")
    return SemanticVersion(
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        PrereleaseTag(tag) if tag else PrereleaseTag.NONE,
        int(number) if number else None,
    )


def bump_patch(version: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(version.major, version.minor, version.patch + 1)


def bump_minor(version: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(version.major, version.minor + 1, 0)


def bump_major(version: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(version.major + 1, 0, 0)


def release(version: SemanticVersion) -> SemanticVersion:
    """Drop the prerelease part, keeping major.minor.patch."""
    return SemanticVersion(version.major, version.minor, version.patch)


def bump_prerelease(version: SemanticVersion) -> SemanticVersion:
    """
    Next prerelease on the same tag. A stable version has no tag to keep,
    so it is returned unchanged.
    """
    if not version.is_prerelease:
        return version
    return replace(version, prerelease_number=version.prerelease_number + 1)


def promote_to_beta(version: SemanticVersion) -> SemanticVersion:
    """
    Move an alpha line to its first beta.

    Raises:
        VersionError: if the version is not an alpha prerelease
    """
    if version.prerelease_tag is not PrereleaseTag.ALPHA:
        raise VersionError(f"Only alpha versions can be promoted to beta, got {version}")
    return replace(version, prerelease_tag=PrereleaseTag.BETA, prerelease_number=1)
