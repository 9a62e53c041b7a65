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

"""
Colors for the handful of things the tool highlights: its own prefix, the
selected menu line and its version preview, and the commit summary counts.
"""

from dataclasses import dataclass

from colorama import Fore, Style


@dataclass(frozen=True)
class Palette:
    prefix: str = ""
    error: str = ""
    selected: str = ""
    preview: str = ""
    changes: str = ""
    insertions: str = ""
    deletions: str = ""

    def paint(self, role: str, text: str) -> str:
        color = getattr(self, role, "")
        if not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"


PALETTES = {
    "classic": Palette(
        prefix=Fore.MAGENTA,
        error=Fore.RED,
        selected=Fore.BLUE + Style.BRIGHT,
        preview=Fore.LIGHTBLACK_EX,
        changes=Fore.YELLOW,
        insertions=Fore.GREEN,
        deletions=Fore.RED,
    ),
    "ocean": Palette(
        prefix=Fore.CYAN + Style.BRIGHT,
        error=Fore.RED + Style.BRIGHT,
        selected=Fore.CYAN + Style.BRIGHT,
        preview=Fore.BLUE + Style.DIM,
        changes=Fore.CYAN,
        insertions=Fore.GREEN,
        deletions=Fore.RED,
    ),
    # no escape codes at all, for logs piped to files
    "mono": Palette(),
}

_active: Palette = PALETTES["classic"]


def set_theme(name: str) -> None:
    """Switch the active palette. Unknown names fall back to classic."""
    global _active
    _active = PALETTES.get(name, PALETTES["classic"])


def themed(role: str, text: str) -> str:
    return _active.paint(role, text)
