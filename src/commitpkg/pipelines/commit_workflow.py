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

import typer
from loguru import logger

from commitpkg.constants import SKIP_CI_MARKER
from commitpkg.context import GlobalContext, Session
from commitpkg.core.exceptions import TerminationRequested
from commitpkg.core.gate.commit_gate import CommitGate
from commitpkg.core.manifest.manifest import Manifest, version_from_manifest_text
from commitpkg.core.menu.menu import choose
from commitpkg.pipelines.commit_pipeline import CommitPipeline
from commitpkg.pipelines.push_pipeline import PushPipeline
from commitpkg.pipelines.recovery import InterruptRecovery

MENU_TITLE = (
    "Version hasn’t been changed and there is no [skip ci] in commit message, "
    "what to do?"
)


class CommitWorkflow:
    """
    Runs one invocation end to end: gate, optional version menu, commit,
    optional push. Any termination request on the way is handed to
    InterruptRecovery and ends the process with status 0.
    """

    def __init__(
        self,
        global_context: GlobalContext,
        message: str,
        commit_options: list[str],
        terminal=None,
    ):
        self.global_context = global_context
        self.session = Session(message=message, commit_options=list(commit_options))
        self.terminal = terminal
        self.manifest: Manifest | None = None

    def run(self) -> None:
        try:
            self._run()
        except TerminationRequested as e:
            logger.info(e.message)
            code = self._recovery().handle()
            raise typer.Exit(code)

    def _recovery(self) -> InterruptRecovery:
        return InterruptRecovery(
            self.global_context, self.session, self.manifest, self.terminal
        )

    def _run(self) -> None:
        # fatal startup errors surface here, before anything is written
        self.manifest = Manifest.load(self.global_context.manifest_path)

        self._recovery().recover_stale_marker()
        self.session.original_version = self.manifest.version

        decision = CommitGate.decide(
            self.manifest.raw_version, self._baseline_version(), self.session.message
        )
        logger.debug(f"Commit gate decision: {decision.value}")

        if decision.needs_menu:
            options = CommitGate.build_options(
                self.manifest.version,
                apply_version=self.manifest.write_version,
                add_skip_marker=self._add_skip_marker,
                cancel=self._cancel,
            )
            choose(MENU_TITLE, options, self.session, self.terminal)

        CommitPipeline(
            self.global_context, self.session, self.manifest, self.terminal
        ).run()
        PushPipeline(self.global_context, self.session, self.terminal).run()

    def _baseline_version(self) -> str | None:
        base_branch = self.global_context.config.base_branch
        text = self.global_context.git_commands.show_file(
            base_branch, self.global_context.manifest_relpath
        )
        version = version_from_manifest_text(text) if text is not None else None
        if version is None:
            logger.warning(
                f"Could not read the manifest version on {base_branch}, treating it as unchanged"
            )
        return version

    def _add_skip_marker(self) -> None:
        self.session.message = f"{SKIP_CI_MARKER} {self.session.message}"
        logger.info(f"Added {SKIP_CI_MARKER} to the commit message")

    def _cancel(self) -> None:
        logger.info("Canceled")
        raise typer.Exit(0)
