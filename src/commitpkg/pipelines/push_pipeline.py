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

from loguru import logger

from commitpkg.context import GlobalContext, Session
from commitpkg.core.exceptions import PushError
from commitpkg.core.git_commands.git_commands import GitCommands, PushResult
from commitpkg.core.menu.menu import MenuOption, choose


class PushPipeline:
    """Offers a push after a successful commit. A failed push is not retried."""

    def __init__(self, global_context: GlobalContext, session: Session, terminal=None):
        self.global_context = global_context
        self.session = session
        self.terminal = terminal
        self.result: PushResult | None = None

    def run(self) -> PushResult | None:
        choose(
            "Make a push?",
            [
                MenuOption("no", lambda: None),
                MenuOption("yes", self._push),
            ],
            self.session,
            self.terminal,
        )
        return self.result

    def _push(self) -> None:
        result = self.global_context.git_commands.push(self.global_context.config.remote)
        if not result.ok:
            raise PushError(
                result.error_text or f"git push exited with {result.returncode}"
            )
        if result.has_warning:
            logger.warning(result.stderr.strip())

        push = GitCommands.parse_push_output(result.stdout)
        logger.info(f"Pushed to the repo {push.repo}")
        if push.hash_from and push.hash_to:
            logger.info(
                f"{push.hash_from}..{push.hash_to} {push.local_ref} -> {push.remote_ref}"
            )
        elif push.local_ref:
            logger.info(f"{push.summary} {push.local_ref} -> {push.remote_ref}")
        self.result = push
