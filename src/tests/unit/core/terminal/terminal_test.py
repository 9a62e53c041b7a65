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

import io
from unittest.mock import Mock

import pytest
from colorama import Cursor
from readchar import key

from commitpkg.core.menu.events import InputEvent
from commitpkg.core.menu.menu import MenuOption, MenuState
from commitpkg.core.terminal.terminal import Terminal
from commitpkg.core.ui.theme import set_theme


@pytest.fixture(autouse=True)
def mono_theme():
    set_theme("mono")
    yield
    set_theme("classic")


def _state(index=0):
    return MenuState(
        (
            MenuOption("patch release", Mock(), "1.2.4"),
            MenuOption("skip ci", Mock()),
            MenuOption("cancel", Mock()),
        ),
        selected_index=index,
    )


def test_read_event_decodes_keys():
    keys = iter([key.DOWN, key.ENTER])
    terminal = Terminal(stream=io.StringIO(), reader=lambda: next(keys))

    assert terminal.read_event() is InputEvent.DOWN
    assert terminal.read_event() is InputEvent.SELECT


def test_read_event_maps_keyboard_interrupt():
    def reader():
        raise KeyboardInterrupt

    terminal = Terminal(stream=io.StringIO(), reader=reader)

    assert terminal.read_event() is InputEvent.INTERRUPT


def test_render_menu_lists_options_and_marks_selection():
    stream = io.StringIO()
    Terminal(stream=stream).render_menu("What to do?", _state())

    out = stream.getvalue()
    assert "[git-commit-pkg] What to do?\n" in out
    assert "  patch release\n  skip ci\n  cancel\n" in out
    assert Cursor.UP(3) in out
    assert "> patch release 1.2.4" in out


def test_render_menu_moves_to_selected_line():
    stream = io.StringIO()
    Terminal(stream=stream).render_menu("What to do?", _state(index=1))

    assert Cursor.UP(2) in stream.getvalue()


def test_move_selection_redraws_previous_and_new_line():
    stream = io.StringIO()
    state = _state(index=2)

    Terminal(stream=stream).move_selection(state, previous_index=0, offset=-1)

    out = stream.getvalue()
    assert "  patch release" in out
    assert Cursor.UP(1) in out
    assert out.endswith("> cancel\r")


def test_zero_offset_writes_no_cursor_movement():
    stream = io.StringIO()
    state = MenuState((MenuOption("only", Mock()),))

    Terminal(stream=stream).move_selection(state, previous_index=0, offset=0)

    assert "\x1b[" not in stream.getvalue().replace("\x1b[2K", "")


def test_finish_menu_moves_below_menu():
    stream = io.StringIO()

    Terminal(stream=stream).finish_menu(_state(index=0))

    assert stream.getvalue() == Cursor.DOWN(3) + "\r"


def test_flush_input_ignores_non_tty():
    terminal = Terminal(stream=io.StringIO(), input_stream=io.StringIO())

    terminal.flush_input()
