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

from pathlib import Path

import typer
from loguru import logger

from commitpkg.constants import (
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from commitpkg.context import GlobalConfig, GlobalContext
from commitpkg.core.config.config_loader import ConfigLoader
from commitpkg.core.exceptions import handle_commitpkg_exception
from commitpkg.core.logging.logging import setup_logger
from commitpkg.core.ui.theme import set_theme
from commitpkg.core.validation import extract_commit_message
from commitpkg.pipelines.commit_workflow import CommitWorkflow
from commitpkg.runtimeutil import (
    export_gpg_tty,
    get_log_dir_callback,
    version_callback,
)

# git commit arguments pass through untouched, so every option of our own
# is long-only and absent from git commit's vocabulary
CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": ["--help"],
}


def load_global_config(custom_config: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        Path(custom_config) if custom_config is not None else None,
    )


def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_dir: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for git-commit-pkg live) and exit",
    ),
    gpgtty: bool = typer.Option(
        False,
        "--gpgtty",
        help="Export GPG_TTY from the current terminal before committing (for signed commits)",
    ),
    repo_path: str = typer.Option(
        ".",
        "--repo",
        help="Path to the git repository to operate on.",
    ),
    manifest: str | None = typer.Option(
        None,
        "--manifest",
        help="Manifest file holding the version (default: package.json)",
    ),
    base_branch: str | None = typer.Option(
        None,
        "--base-branch",
        help="Branch whose manifest version is the baseline (default: main)",
    ),
    remote: str | None = typer.Option(
        None,
        "--remote",
        help="Remote to push to (default: git's own choice)",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
) -> None:
    """
    Commit with a version bump or an explicit [skip ci].

    Every argument not listed here is passed to git commit as is; the
    message is taken from -m <message> or -am <message>.

    Examples:
        git-commit-pkg -m "fix: handle empty input"

        git-commit-pkg -am "feat: new export format" --no-verify
    """
    # initial setup of logger, updated once the config is known
    setup_logger("commit")

    with handle_commitpkg_exception(exit_on_fail=True):
        message, commit_options = extract_commit_message(list(ctx.args))

        config, used_config_sources, _ = load_global_config(
            custom_config,
            manifest=manifest,
            base_branch=base_branch,
            remote=remote,
        )
        if config.verbose:
            setup_logger("commit", debug=True)
        set_theme(config.theme)
        logger.debug(f"Used {used_config_sources} to build global context.")

        if gpgtty:
            export_gpg_tty()

        global_context = GlobalContext.from_global_config(config, Path(repo_path))
        logger.debug(
            "Committing with options={options} git_dir={git_dir}",
            options=commit_options,
            git_dir=global_context.git_dir,
        )

        CommitWorkflow(global_context, message, commit_options).run()
