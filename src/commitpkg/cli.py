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

import typer
from colorama import init

from commitpkg.commands import commit
from commitpkg.constants import APP_NAME
from commitpkg.runtimeutil import ensure_utf8_output, setup_signal_handlers

init(autoreset=True)

app = typer.Typer(
    help=f"{APP_NAME}: bump the package version or say [skip ci], then commit",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="commit", context_settings=commit.CONTEXT_SETTINGS)(commit.main)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8 as it can be weird with typers console.print sometimes
    ensure_utf8_output()
    # Ctrl+C / SIGTERM go through interrupt recovery
    setup_signal_handlers()
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
