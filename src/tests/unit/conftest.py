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

import json
from unittest.mock import Mock

import pytest

from commitpkg.context import GlobalConfig, GlobalContext, Session
from commitpkg.core.git_commands.git_commands import GitCommands
from commitpkg.core.git_interface.interface import GitInterface
from commitpkg.core.marker.commit_marker import CommitMarker


class ScriptedTerminal:
    """Stands in for the real terminal: replays a fixed list of input events."""

    def __init__(self, events=(), on_render=None):
        self.events = list(events)
        self.on_render = on_render
        self.titles = []
        self.rendered = []
        self.moves = []
        self.flushed = 0
        self.finished = 0

    def read_event(self):
        if not self.events:
            raise AssertionError("menu asked for more input than was scripted")
        return self.events.pop(0)

    def flush_input(self):
        self.flushed += 1

    def render_menu(self, title, state):
        self.titles.append(title)
        self.rendered.append([option.label for option in state.options])
        if self.on_render is not None:
            self.on_render(title)

    def move_selection(self, state, previous_index, offset):
        self.moves.append((previous_index, state.selected_index, offset))

    def finish_menu(self, state):
        self.finished += 1


@pytest.fixture
def make_terminal():
    return ScriptedTerminal


@pytest.fixture
def commit_stdout():
    return (
        "[main 1a2b3c4] fix: handle empty input\n"
        " 2 files changed, 3 insertions(+), 1 deletion(-)\n"
    )


@pytest.fixture
def manifest_path(tmp_path):
    return tmp_path / "package.json"


@pytest.fixture
def write_manifest(manifest_path):
    def _write(version, **extra):
        data = {"name": "demo", "version": version, **extra}
        manifest_path.write_text(json.dumps(data, indent="\t") + "\n", encoding="utf-8")
        return manifest_path

    return _write


@pytest.fixture
def read_version(manifest_path):
    def _read():
        return json.loads(manifest_path.read_text(encoding="utf-8"))["version"]

    return _read


@pytest.fixture
def git_dir(tmp_path):
    path = tmp_path / ".git"
    path.mkdir()
    return path


@pytest.fixture
def mock_git_commands():
    return Mock(spec=GitCommands)


@pytest.fixture
def global_context(tmp_path, git_dir, mock_git_commands):
    return GlobalContext(
        repo_path=tmp_path,
        git_interface=Mock(spec=GitInterface),
        git_commands=mock_git_commands,
        git_dir=git_dir,
        marker=CommitMarker.in_git_dir(git_dir, "commit-pkg"),
        config=GlobalConfig(),
    )


@pytest.fixture
def session():
    return Session(message="fix: handle empty input", commit_options=["-a"])
