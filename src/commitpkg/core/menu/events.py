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

from enum import Enum

from readchar import key


class InputEvent(Enum):
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    INTERRUPT = "interrupt"
    OTHER = "other"


_KEYMAP = {
    key.UP: InputEvent.UP,
    key.LEFT: InputEvent.UP,
    key.DOWN: InputEvent.DOWN,
    key.RIGHT: InputEvent.DOWN,
    key.ENTER: InputEvent.SELECT,
    "\r": InputEvent.SELECT,
    "\n": InputEvent.SELECT,
    key.SPACE: InputEvent.SELECT,
    key.CTRL_C: InputEvent.INTERRUPT,
}


def decode_key(raw: str) -> InputEvent:
    """Map a raw keystroke (possibly an escape sequence) to an input event."""
    return _KEYMAP.get(raw, InputEvent.OTHER)
