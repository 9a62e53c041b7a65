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
Decides whether a commit needs the interactive version menu, and which
choices that menu offers.
"""

import re
from collections.abc import Callable
from enum import Enum

from loguru import logger

from commitpkg.core.menu.menu import MenuOption
from commitpkg.core.versioning.semver import (
    PrereleaseTag,
    SemanticVersion,
    bump_major,
    bump_minor,
    bump_patch,
    bump_prerelease,
    promote_to_beta,
    release,
)

_SKIP_MARKER_RE = re.compile(r"\[(skip ci|ci skip)\]", re.IGNORECASE)


class GateDecision(Enum):
    VERSION_CHANGED = "version_changed"
    SKIP_MARKER = "skip_marker"
    CONFIRM = "confirm"

    @property
    def needs_menu(self) -> bool:
        return self is GateDecision.CONFIRM


def has_skip_marker(message: str) -> bool:
    return _SKIP_MARKER_RE.search(message) is not None


class CommitGate:
    @staticmethod
    def decide(
        current_version: str, baseline_version: str | None, message: str
    ) -> GateDecision:
        """
        Args:
            current_version: manifest version before any edit
            baseline_version: manifest version at the tip of the base branch,
                None when it could not be read
            message: proposed commit message
        """
        if baseline_version is None:
            logger.debug("No baseline version available, treating version as unchanged")
        elif current_version != baseline_version:
            logger.debug(
                f"Version changed from {baseline_version} to {current_version}, no menu needed"
            )
            return GateDecision.VERSION_CHANGED

        if has_skip_marker(message):
            logger.debug("Skip marker found in commit message, no menu needed")
            return GateDecision.SKIP_MARKER

        return GateDecision.CONFIRM

    @staticmethod
    def build_options(
        version: SemanticVersion,
        apply_version: Callable[[SemanticVersion], None],
        add_skip_marker: Callable[[], None],
        cancel: Callable[[], None],
    ) -> list[MenuOption]:
        """
        Prerelease lines may only move within the prerelease (or be released);
        stable lines may only take a plain bump.
        """

        def version_option(label: str, new_version: SemanticVersion) -> MenuOption:
            return MenuOption(
                label, lambda: apply_version(new_version), str(new_version)
            )

        options = []
        if version.is_prerelease:
            options.append(version_option("release", release(version)))
            options.append(version_option("prerelease", bump_prerelease(version)))
            if version.prerelease_tag is PrereleaseTag.ALPHA:
                options.append(
                    version_option("prerelease - beta", promote_to_beta(version))
                )
            options.append(MenuOption("skip ci", add_skip_marker))
        else:
            options.append(version_option("patch release", bump_patch(version)))
            options.append(version_option("minor release", bump_minor(version)))
            options.append(version_option("major release", bump_major(version)))
            options.append(MenuOption("skip ci", add_skip_marker))

        options.append(MenuOption("cancel", cancel))
        return options
