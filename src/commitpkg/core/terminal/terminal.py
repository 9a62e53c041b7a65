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

import sys

import readchar
from colorama import Cursor
from colorama.ansi import clear_line

from commitpkg.constants import APP_NAME
from commitpkg.core.menu.events import InputEvent, decode_key
from commitpkg.core.ui.theme import themed

try:
    import termios
except ImportError:  # Windows
    termios = None


class Terminal:
    """
    Renders menus with cursor movement and reads keystrokes in raw mode.

    While a menu is open the cursor sits at column 0 of the selected line.
    """

    def __init__(self, stream=None, reader=None, input_stream=None):
        self._stream = stream
        self._reader = reader or readchar.readkey
        self._input_stream = input_stream

    @property
    def stream(self):
        return self._stream or sys.stdout

    @property
    def input_stream(self):
        return self._input_stream or sys.stdin

    def read_event(self) -> InputEvent:
        try:
            raw = self._reader()
        except KeyboardInterrupt:
            return InputEvent.INTERRUPT
        return decode_key(raw)

    def flush_input(self) -> None:
        """Discard keystrokes typed while no menu was listening."""
        if termios is None:
            return
        try:
            if self.input_stream.isatty():
                termios.tcflush(self.input_stream, termios.TCIFLUSH)
        except (OSError, ValueError, termios.error):
            pass

    def render_menu(self, title: str, state) -> None:
        lines = [f"{themed('prefix', f'[{APP_NAME}]')} {title}"]
        lines.extend(f"  {option.label}" for option in state.options)
        self._write("\n".join(lines) + "\n")
        # back up to the first option, then to the selected one
        self._move_vertical(-len(state.options) + state.selected_index)
        self._draw_selected(state)

    def move_selection(self, state, previous_index: int, offset: int) -> None:
        self._write(clear_line() + "\r" + f"  {state.options[previous_index].label}")
        self._move_vertical(offset)
        self._draw_selected(state)

    def finish_menu(self, state) -> None:
        """Leave the cursor on the line below the menu."""
        self._move_vertical(len(state.options) - state.selected_index)
        self._write("\r")

    def _draw_selected(self, state) -> None:
        option = state.selected
        text = themed("selected", option.label)
        if option.preview:
            text += " " + themed("preview", option.preview)
        self._write(clear_line() + "\r" + f"> {text}" + "\r")

    def _move_vertical(self, offset: int) -> None:
        # a zero count would still move one line on most terminals
        if offset < 0:
            self._write(Cursor.UP(-offset))
        elif offset > 0:
            self._write(Cursor.DOWN(offset))

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
