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
Custom exception hierarchy for the git-commit-pkg CLI application.

Errors fall into four groups: fatal startup errors (bad manifest, bad
version, not a git repository), recoverable commit errors, terminal push
errors, and cleanup errors which are never raised at all.
"""

import contextlib

import typer
from loguru import logger


class CommitPkgError(Exception):
    """
    Base exception for all git-commit-pkg errors.

    All tool-specific exceptions should inherit from this class so they can
    be reported consistently by handle_commitpkg_exception.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a CommitPkgError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class GitError(CommitPkgError):
    """
    Errors related to git operations.

    Raised when git is missing or the working directory is not a repository.
    """

    pass


class ManifestError(CommitPkgError):
    """Raised when the manifest cannot be read, parsed or written."""

    pass


class VersionError(CommitPkgError):
    """
    Raised for version strings outside MAJOR.MINOR.PATCH[-alpha.N|-beta.N]
    and for derivations that are not valid for the current version.
    """

    pass


class ValidationError(CommitPkgError):
    """
    Input validation errors.

    Raised when the command line lacks arguments or a commit message.
    """

    pass


class ConfigurationError(CommitPkgError):
    """
    Configuration-related errors.

    Raised when configuration files or environment variables contain
    values that fail validation.
    """

    pass


class CommitError(CommitPkgError):
    """Raised when the git commit invocation exits with a non-zero status."""

    pass


class PushError(CommitPkgError):
    """Raised when the git push invocation fails. Never retried."""

    pass


class TerminationRequested(CommitPkgError):
    """
    Raised from signal handlers and from the menu when the user presses
    Ctrl+C. Caught by the workflow and turned into interrupt recovery.
    """

    def __init__(self, message: str = "Terminated by Ctrl+C", details=None):
        super().__init__(message, details)


@contextlib.contextmanager
def handle_commitpkg_exception(exit_on_fail: bool = True):
    """
    Report CommitPkgErrors to the user and optionally exit with status 1.

    Usable both as a context manager and as a decorator.
    """
    try:
        yield
    except TerminationRequested as e:
        # commits in flight are recovered by the workflow before reaching here
        logger.info(e.message)
        if exit_on_fail:
            raise typer.Exit(0)
        raise
    except CommitPkgError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(f"Details: {e.details}")
        if exit_on_fail:
            raise typer.Exit(1)
        raise


# Convenience functions for creating common errors
def git_not_found() -> GitError:
    """Create a GitError for when git is not available."""
    return GitError(
        "Git is not installed or not in PATH",
        "Please install git and ensure it's available in your PATH environment variable",
    )


def not_git_repository(path: str = ".") -> GitError:
    """Create a GitError for when not in a git repository."""
    return GitError(
        f"Not a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def manifest_not_found(path: str) -> ManifestError:
    """Create a ManifestError for a missing manifest file."""
    return ManifestError(
        f"Manifest not found: {path}",
        "Run the command from the project root or pass --manifest",
    )


def invalid_version(version: str) -> VersionError:
    """Create a VersionError for a version string that is not semver."""
    return VersionError(
        f"Invalid version: {version}",
        "Expected MAJOR.MINOR.PATCH with an optional -alpha.N or -beta.N suffix",
    )


def missing_arguments() -> ValidationError:
    return ValidationError("No arguments passed")


def missing_message() -> ValidationError:
    return ValidationError(
        "Commit message is required",
        "Pass the message with -m <message> or -am <message>",
    )
