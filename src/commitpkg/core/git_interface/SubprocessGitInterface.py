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

import subprocess
from pathlib import Path

from loguru import logger

from commitpkg.core.exceptions import TerminationRequested, git_not_found

from .interface import GitInterface, GitResult


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path | None = None) -> None:
        self.repo_path = Path(repo_path) if repo_path is not None else Path(".")

    def run_git(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> GitResult:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(f"Running git command: {' '.join(cmd)} cwd={effective_cwd}")

        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
                cwd=effective_cwd,
            )
        except FileNotFoundError:
            raise git_not_found()

        try:
            stdout, stderr = process.communicate()
        except TerminationRequested:
            # git is left to finish on its own, recovery only cleans up around it
            logger.debug(f"Termination requested while {' '.join(cmd)} was running")
            raise

        if stdout:
            logger.debug(
                f"git stdout: {stdout[:2000]}"
                + ("...(truncated)" if len(stdout) > 2000 else "")
            )
        if stderr:
            logger.debug(
                f"git stderr: {stderr[:2000]}"
                + ("...(truncated)" if len(stderr) > 2000 else "")
            )
        logger.debug(f"git returncode: {process.returncode}")

        if process.returncode != 0:
            logger.debug(f"Git command failed: {' '.join(cmd)} code={process.returncode}")

        return GitResult(
            returncode=process.returncode,
            stdout=stdout or "",
            stderr=stderr or "",
        )
