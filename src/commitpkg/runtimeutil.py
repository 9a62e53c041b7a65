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

import importlib.metadata
import os
import signal
import sys

import typer
from loguru import logger

from commitpkg.constants import APP_NAME, LOG_DIR
from commitpkg.core.exceptions import TerminationRequested


def ensure_utf8_output():
    # force utf-8 encoding
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8")


def setup_signal_handlers():
    """Turn SIGINT/SIGTERM into TerminationRequested at the current suspension point."""

    def signal_handler(sig, frame):
        logger.debug(f"Received signal {sig}")
        raise TerminationRequested()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def export_gpg_tty():
    """Expose the controlling terminal to gpg so signed commits can prompt for a passphrase."""
    try:
        tty = os.ttyname(sys.stdin.fileno())
    except (OSError, AttributeError, ValueError) as e:
        logger.warning(f"Could not determine the terminal for GPG_TTY: {e}")
        return
    os.environ["GPG_TTY"] = tty
    logger.debug(f"GPG_TTY={tty}")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        try:
            version = importlib.metadata.version(APP_NAME)
            typer.echo(f"{APP_NAME} version {version}")
        except importlib.metadata.PackageNotFoundError:
            typer.echo(f"{APP_NAME} version: development")
        raise typer.Exit()


def get_log_dir_callback(value: bool):
    """Show the log directory and exit."""
    if value:
        typer.echo(str(LOG_DIR))
        raise typer.Exit()
