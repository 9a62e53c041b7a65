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

from platformdirs import user_config_dir, user_log_path

APP_NAME = "git-commit-pkg"
ENV_APP_PREFIX = "COMMITPKG_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "commitpkgconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

DEFAULT_MANIFEST = "package.json"
DEFAULT_BASE_BRANCH = "main"
DEFAULT_MARKER_NAME = "commit-pkg"

# git's own lock, left behind when a commit is killed mid-write
GIT_INDEX_LOCK = "index.lock"

SKIP_CI_MARKER = "[skip ci]"
