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

import pytest
from readchar import key

from commitpkg.core.menu.events import InputEvent, decode_key


@pytest.mark.parametrize(
    "raw,expected",
    [
        (key.UP, InputEvent.UP),
        (key.LEFT, InputEvent.UP),
        (key.DOWN, InputEvent.DOWN),
        (key.RIGHT, InputEvent.DOWN),
        (key.ENTER, InputEvent.SELECT),
        ("\r", InputEvent.SELECT),
        ("\n", InputEvent.SELECT),
        (" ", InputEvent.SELECT),
        (key.CTRL_C, InputEvent.INTERRUPT),
        ("x", InputEvent.OTHER),
        ("", InputEvent.OTHER),
    ],
)
def test_decode_key(raw, expected):
    assert decode_key(raw) is expected
