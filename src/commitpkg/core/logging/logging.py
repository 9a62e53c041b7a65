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
Logging configuration for the git-commit-pkg CLI application.

Everything the user sees goes through loguru: informational records are
printed to stdout, warnings and errors to stderr, each with the tool prefix.
A rotating debug log file is kept alongside for troubleshooting.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.text import Text

from commitpkg.constants import APP_NAME, LOG_DIR
from commitpkg.core.ui.theme import themed

# loguru's numeric level for WARNING
_STDERR_LEVEL_NO = 30


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(self, command_name: str, log_dir: Path = LOG_DIR):
        self.command_name = command_name
        self.log_dir = log_dir
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)
        self._setup_logger()

    def _console_sink(self, message) -> None:
        record = message.record
        text = record["message"].rstrip("\n")
        if record["level"].no >= _STDERR_LEVEL_NO:
            prefix = themed("error", f"[{APP_NAME}]")
            self.err_console.print(Text.from_ansi(f"{prefix} {text}"))
        else:
            prefix = themed("prefix", f"[{APP_NAME}]")
            self.console.print(Text.from_ansi(f"{prefix} {text}"))

    def _setup_logger(self) -> None:
        """Set up loguru with proper formatting and sinks."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        log_level = os.getenv("COMMITPKG_LOG_LEVEL", "INFO").upper()
        console_level = os.getenv("COMMITPKG_CONSOLE_LOG_LEVEL", log_level).upper()

        logger.add(
            self._console_sink, level=console_level, format="{message}", catch=True
        )

        self.log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = self.log_dir / f"{APP_NAME}_{timestamp}.log"

        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=True,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path:
        """Get the current log file path."""
        return self.logfile


def setup_logger(command_name: str, debug: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug output on the console

    Returns:
        Path to the log file
    """
    if debug:
        os.environ["COMMITPKG_LOG_LEVEL"] = "DEBUG"
        os.environ["COMMITPKG_CONSOLE_LOG_LEVEL"] = "DEBUG"

    structured_logger = StructuredLogger(command_name)
    return structured_logger.get_logfile()
