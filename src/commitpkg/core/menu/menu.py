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
Single-selection menu.

MenuState and MenuController know nothing about escape sequences or cursor
movement: they consume decoded InputEvents and delegate drawing to a
Terminal, so the navigation rules can be exercised without a TTY.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from commitpkg.core.exceptions import TerminationRequested
from commitpkg.core.menu.events import InputEvent


@dataclass(frozen=True)
class MenuOption:
    label: str
    apply: Callable[[], None]
    preview: str | None = None


@dataclass
class MenuState:
    options: tuple[MenuOption, ...]
    selected_index: int = 0

    def __post_init__(self):
        self.options = tuple(self.options)
        if not self.options:
            raise ValueError("A menu needs at least one option")
        if not 0 <= self.selected_index < len(self.options):
            raise ValueError(f"Selected index {self.selected_index} out of range")

    @property
    def selected(self) -> MenuOption:
        return self.options[self.selected_index]

    def move(self, step: int) -> int:
        """
        Move the selection by step (-1 or 1), wrapping around at both ends.

        Returns the number of lines the cursor has to travel from the old
        selection to the new one: the step itself, or the step adjusted by the
        menu length when the selection wrapped.
        """
        count = len(self.options)
        index = self.selected_index + step
        offset = step
        if index < 0:
            index += count
            offset += count
        elif index >= count:
            index -= count
            offset -= count
        self.selected_index = index
        return offset


class MenuController:
    def __init__(
        self,
        title: str,
        options: Sequence[MenuOption],
        session,
        terminal=None,
    ):
        if terminal is None:
            from commitpkg.core.terminal.terminal import Terminal

            terminal = Terminal()

        self.title = title
        self.state = MenuState(tuple(options))
        self.session = session
        self.terminal = terminal

    def open(self) -> None:
        self.terminal.flush_input()
        self.terminal.render_menu(self.title, self.state)
        self.session.input_processing = True

    def handle(self, event: InputEvent) -> bool:
        """
        Process one input event. Returns True once an option has been
        selected and applied.

        Raises:
            TerminationRequested: on the interrupt event, whatever the state
        """
        if event is InputEvent.INTERRUPT:
            if self.session.input_processing:
                self.terminal.finish_menu(self.state)
            raise TerminationRequested()

        if not self.session.input_processing:
            return False

        if event is InputEvent.UP or event is InputEvent.DOWN:
            previous = self.state.selected_index
            offset = self.state.move(-1 if event is InputEvent.UP else 1)
            self.terminal.move_selection(self.state, previous, offset)
            return False

        if event is InputEvent.SELECT:
            self.session.input_processing = False
            self.terminal.finish_menu(self.state)
            option = self.state.selected
            logger.debug(f"Menu '{self.title}' resolved to '{option.label}'")
            option.apply()
            return True

        return False

    def run(self) -> MenuOption:
        """Show the menu and process keystrokes until an option is chosen."""
        self.open()
        while True:
            if self.handle(self.terminal.read_event()):
                return self.state.selected


def choose(
    title: str, options: Sequence[MenuOption], session, terminal=None
) -> MenuOption:
    return MenuController(title, options, session, terminal).run()
