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
Reconciling the repository and the manifest after an interrupted commit.

Two situations are handled: a termination request while this process has
a commit in flight, and a marker left behind by a previous process that
was killed before it could clean up.
"""

from loguru import logger

from commitpkg.context import GlobalContext, Session
from commitpkg.core.exceptions import TerminationRequested
from commitpkg.core.manifest.manifest import Manifest, version_from_manifest_text
from commitpkg.core.marker.commit_marker import remove_quietly
from commitpkg.core.menu.menu import MenuOption, choose


class InterruptRecovery:
    def __init__(
        self,
        global_context: GlobalContext,
        session: Session,
        manifest: Manifest | None = None,
        terminal=None,
    ):
        self.global_context = global_context
        self.session = session
        self.manifest = manifest
        self.terminal = terminal

    def handle(self) -> int:
        """
        React to a termination request. Returns the exit code for the process.
        """
        if not self.session.committing:
            return 0

        try:
            self.cleanup()
            logger.info("temporary files have been deleted")
            self._offer_undo(self.undo)
        except TerminationRequested:
            # interrupted again while recovering, leave the manifest as it is
            self.cleanup()
        return 0

    def cleanup(self) -> None:
        """Remove git's index lock and the commit marker. Both may be absent."""
        remove_quietly(self.global_context.index_lock)
        self.global_context.marker.remove()
        self.session.committing = False

    def undo(self) -> None:
        """Restore the manifest to the version it had before any menu choice."""
        if self.manifest is None or self.session.original_version is None:
            logger.debug("Nothing to undo, manifest was never loaded")
            return
        self.manifest.write_version(self.session.original_version)

    def recover_stale_marker(self) -> bool:
        """
        Clean up after a previous run that died mid-commit.

        The version to go back to is the one committed at HEAD, since the
        version the dead process started from is gone with it.

        Returns:
            True if a stale marker was found
        """
        if not self.global_context.marker.exists():
            return False

        logger.warning("The previous commit was interrupted before it finished")
        self.cleanup()
        logger.info("temporary files have been deleted")

        if self.manifest is None:
            return True

        head_text = self.global_context.git_commands.show_file(
            "HEAD", self.global_context.manifest_relpath
        )
        head_version = version_from_manifest_text(head_text) if head_text else None
        if head_version is None or head_version == self.manifest.raw_version:
            logger.debug(f"Manifest version matches HEAD ({head_version}), nothing to undo")
            return True

        self._offer_undo(lambda: self.manifest.write_version(head_version))
        return True

    def _offer_undo(self, undo) -> None:
        choose(
            "Undo the version change?",
            [
                MenuOption("yes", undo),
                MenuOption("no", lambda: None),
            ],
            self.session,
            self.terminal,
        )
