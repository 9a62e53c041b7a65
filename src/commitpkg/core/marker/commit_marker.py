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

from pathlib import Path

from loguru import logger


def remove_quietly(path: Path) -> bool:
    """Delete a file if present. Returns whether something was removed."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")
        return False
    logger.debug(f"Removed {path}")
    return True


class CommitMarker:
    """
    Empty file inside the git directory that exists exactly while a commit
    attempt is in flight. A marker found at startup means the previous run
    was killed before it could clean up.
    """

    def __init__(self, path: Path):
        self.path = path

    @classmethod
    def in_git_dir(cls, git_dir: Path, name: str) -> "CommitMarker":
        return cls(git_dir / name)

    def exists(self) -> bool:
        return self.path.exists()

    def create(self) -> None:
        self.path.write_text("", encoding="utf-8")
        logger.debug(f"Commit marker created at {self.path}")

    def remove(self) -> bool:
        return remove_quietly(self.path)
