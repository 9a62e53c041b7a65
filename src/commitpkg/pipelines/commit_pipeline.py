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
Commit orchestration.

    IDLE -> MARKING -> COMMITTING -> CLEANUP_OK
                           |
                           +-> ERROR -> (try again) MARKING
                                     -> (exit) marker removed, exit 1

The marker is written before git is invoked and is kept through a failed
attempt until the user has chosen what to do, so an interrupt at any point
in between still sees a commit in flight.
"""

import typer
from loguru import logger

from commitpkg.context import CommitState, GlobalContext, Session
from commitpkg.core.exceptions import CommitError, GitError
from commitpkg.core.git_commands.git_commands import CommitResult, GitCommands
from commitpkg.core.git_interface.interface import GitResult
from commitpkg.core.manifest.manifest import Manifest
from commitpkg.core.menu.menu import MenuOption, choose
from commitpkg.core.ui.theme import themed


class CommitPipeline:
    def __init__(
        self,
        global_context: GlobalContext,
        session: Session,
        manifest: Manifest,
        terminal=None,
    ):
        self.global_context = global_context
        self.session = session
        self.manifest = manifest
        self.terminal = terminal

    def run(self) -> CommitResult:
        while True:
            try:
                result = self._attempt()
            except CommitError as e:
                self._on_error(e)
                continue
            return self._finish(result)

    def _attempt(self) -> GitResult:
        self.session.transition(CommitState.MARKING)
        self.global_context.marker.create()
        self.session.committing = True

        self.session.transition(CommitState.COMMITTING)
        try:
            result = self.global_context.git_commands.commit(
                self.session.message, self.session.commit_options
            )
        except GitError as e:
            self.session.transition(CommitState.ERROR)
            raise CommitError(e.message, e.details)

        if not result.ok:
            self.session.transition(CommitState.ERROR)
            raise CommitError(
                result.error_text or f"git commit exited with {result.returncode}",
                f"git commit exit status {result.returncode}",
            )
        if result.has_warning:
            logger.warning(result.stderr.strip())
        return result

    def _finish(self, result: GitResult) -> CommitResult:
        self.global_context.marker.remove()
        self.session.committing = False
        self.session.transition(CommitState.CLEANUP_OK)

        commit = GitCommands.parse_commit_output(result.stdout)
        summary = commit.summary
        logger.info(
            f"{commit.branch}: {self.session.message}\n"
            f"changed files: {themed('changes', str(summary.changes))} "
            f"insertions: {themed('insertions', str(summary.insertions))} "
            f"deletions: {themed('deletions', str(summary.deletions))}\n"
            f"package version: {self.manifest.raw_version}"
        )
        return commit

    def _on_error(self, error: CommitError) -> None:
        logger.error(error.message)
        if error.details:
            logger.debug(f"Details: {error.details}")
        choose(
            "An error occurred, what to do?",
            [
                MenuOption("try again", lambda: None),
                MenuOption("exit", self._exit),
            ],
            self.session,
            self.terminal,
        )

    def _exit(self) -> None:
        self.global_context.marker.remove()
        self.session.committing = False
        raise typer.Exit(1)
