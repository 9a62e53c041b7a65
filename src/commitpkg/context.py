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

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from commitpkg.constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_MANIFEST,
    DEFAULT_MARKER_NAME,
    GIT_INDEX_LOCK,
)
from commitpkg.core.git_commands.git_commands import GitCommands
from commitpkg.core.git_interface.interface import GitInterface
from commitpkg.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)
from commitpkg.core.marker.commit_marker import CommitMarker
from commitpkg.core.versioning.semver import SemanticVersion


class GlobalConfig(BaseModel):
    manifest: str = DEFAULT_MANIFEST
    base_branch: str = DEFAULT_BASE_BRANCH
    marker_name: str = DEFAULT_MARKER_NAME
    remote: str | None = None
    verbose: bool = False
    theme: Literal["classic", "ocean", "mono"] = "classic"


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_interface: GitInterface
    git_commands: GitCommands
    git_dir: Path
    marker: CommitMarker
    config: GlobalConfig

    @property
    def manifest_path(self) -> Path:
        path = Path(self.config.manifest)
        return path if path.is_absolute() else self.repo_path / path

    @property
    def manifest_relpath(self) -> Path:
        """Manifest path relative to the directory git runs in."""
        path = Path(self.config.manifest)
        if path.is_absolute():
            return path.relative_to(self.repo_path.resolve())
        return path

    @property
    def index_lock(self) -> Path:
        return self.git_dir / GIT_INDEX_LOCK

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        git_interface = SubprocessGitInterface(repo_path)
        git_commands = GitCommands(git_interface, repo_path)
        git_dir = git_commands.git_dir()
        marker = CommitMarker.in_git_dir(git_dir, config.marker_name)

        return GlobalContext(
            repo_path, git_interface, git_commands, git_dir, marker, config
        )


class CommitState(Enum):
    IDLE = "idle"
    MARKING = "marking"
    COMMITTING = "committing"
    CLEANUP_OK = "cleanup_ok"
    ERROR = "error"


@dataclass
class Session:
    """
    Per-run mutable state, owned by the workflow and passed to every
    component that needs to read or update it.
    """

    message: str
    commit_options: list[str]
    original_version: SemanticVersion | None = None
    committing: bool = False
    input_processing: bool = True
    state: CommitState = CommitState.IDLE
    history: list[CommitState] = field(default_factory=list)

    def transition(self, state: CommitState) -> None:
        self.history.append(state)
        self.state = state
