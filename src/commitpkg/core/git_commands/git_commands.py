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

import re
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from commitpkg.core.exceptions import not_git_repository
from commitpkg.core.git_interface.interface import GitInterface, GitResult
from commitpkg.core.logging.utils import time_block


@dataclass(frozen=True)
class CommitSummary:
    changes: int = 0
    insertions: int = 0
    deletions: int = 0


@dataclass(frozen=True)
class CommitResult:
    branch: str
    commit: str
    summary: CommitSummary


@dataclass(frozen=True)
class PushResult:
    repo: str
    local_ref: str
    remote_ref: str
    hash_from: str | None = None
    hash_to: str | None = None
    summary: str = ""


class GitCommands:
    # [main 1a2b3c4] msg / [main (root-commit) 1a2b3c4] msg / [detached HEAD 1a2b3c4] msg
    _COMMIT_HEADER_RE = re.compile(
        r"^\[(?P<branch>.+?)(?: \(root-commit\))? (?P<commit>[0-9a-f]{4,64})\]",
        re.MULTILINE,
    )
    _CHANGES_RE = re.compile(r"(\d+) files? changed")
    _INSERTIONS_RE = re.compile(r"(\d+) insertions?\(\+\)")
    _DELETIONS_RE = re.compile(r"(\d+) deletions?\(-\)")
    _PUSH_TO_RE = re.compile(r"^To (?P<repo>.+)$", re.MULTILINE)
    _PUSH_RANGE_RE = re.compile(r"^(?P<from>[0-9a-f]+)\.\.\.?(?P<to>[0-9a-f]+)")

    def __init__(self, git: GitInterface, repo_path: Path | None = None):
        self.git = git
        self.repo_path = Path(repo_path) if repo_path is not None else Path(".")

    # -------------------------------
    # Repository state
    # -------------------------------

    def git_dir(self) -> Path:
        """Absolute path of the repository's metadata directory (.git)."""
        out = self.git.run_git_text_out(["rev-parse", "--git-dir"])
        if out is None:
            raise not_git_repository(str(self.repo_path))
        git_dir = Path(out.strip())
        if not git_dir.is_absolute():
            git_dir = (self.repo_path / git_dir).resolve()
        return git_dir

    def show_file(self, ref: str, path: str | Path) -> str | None:
        """Contents of a file as recorded at ref, or None if it is not there."""
        spec = f"{ref}:./{Path(path).as_posix()}"
        return self.git.run_git_text_out(["show", spec])

    # -------------------------------
    # Commit / push
    # -------------------------------

    def commit(self, message: str, options: list[str]) -> GitResult:
        with time_block("git commit"):
            return self.git.run_git(["commit", "-m", message, *options])

    def push(self, remote: str | None = None) -> GitResult:
        args = ["push", "--porcelain"]
        if remote:
            args.append(remote)
        with time_block("git push"):
            return self.git.run_git(args)

    # -------------------------------
    # Output parsing
    # -------------------------------

    @classmethod
    def parse_commit_output(cls, output: str) -> CommitResult:
        header = cls._COMMIT_HEADER_RE.search(output)
        if header is None:
            logger.debug(f"Could not parse commit header from: {output!r}")
            branch, commit = "", ""
        else:
            branch, commit = header.group("branch"), header.group("commit")

        def _count(pattern: re.Pattern) -> int:
            match = pattern.search(output)
            return int(match.group(1)) if match else 0

        summary = CommitSummary(
            changes=_count(cls._CHANGES_RE),
            insertions=_count(cls._INSERTIONS_RE),
            deletions=_count(cls._DELETIONS_RE),
        )
        return CommitResult(branch=branch, commit=commit, summary=summary)

    @classmethod
    def parse_push_output(cls, output: str) -> PushResult:
        """
        Parse `git push --porcelain` output: a "To <repo>" line followed by
        tab separated "<flag> <local>:<remote> <summary>" ref lines.
        """
        to_match = cls._PUSH_TO_RE.search(output)
        repo = to_match.group("repo").strip() if to_match else ""

        for line in output.splitlines():
            parts = line.split("\t")
            if len(parts) < 3 or ":" not in parts[1]:
                continue
            local_ref, remote_ref = parts[1].split(":", 1)
            summary = parts[2].strip()
            range_match = cls._PUSH_RANGE_RE.match(summary)
            return PushResult(
                repo=repo,
                local_ref=local_ref,
                remote_ref=remote_ref,
                hash_from=range_match.group("from") if range_match else None,
                hash_to=range_match.group("to") if range_match else None,
                summary=summary,
            )

        return PushResult(repo=repo, local_ref="", remote_ref="")
