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
Layered configuration.

Each field of the model is taken from the first source that defines it,
in this order: command line options, an explicit --custom-config file, the
repository-local commitpkgconfig.toml, COMMITPKG_* environment variables
and finally the per-user config file. Fields no source defines keep the
model defaults.
"""

import os
import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from commitpkg.core.exceptions import ConfigurationError


class ConfigLoader:
    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Returns:
            (model, names of the sources that contributed, whether any
            default was used)

        Raises:
            ConfigurationError: if the custom config file is missing or the
                merged values fail validation
        """
        layers: list[tuple[str, dict]] = [("Input Args", input_args)]
        if custom_config_path is not None:
            if not custom_config_path.exists():
                raise ConfigurationError(
                    f"Custom config file not found: {custom_config_path}"
                )
            layers.append(("Custom Config", ConfigLoader.load_toml(custom_config_path)))
        layers += [
            ("Local Config", ConfigLoader.load_toml(local_config_path)),
            ("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        for name, data in layers:
            logger.debug(f"{name=} {data=}")

        merged, used_sources, missing = ConfigLoader.merge(
            set(config_model.model_fields), layers
        )

        try:
            model = config_model.model_validate(merged)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e))

        return model, used_sources, bool(missing)

    @staticmethod
    def merge(fields: set[str], layers: list[tuple[str, dict]]):
        """First layer to define a field wins. Keys outside fields are dropped."""
        merged = {}
        used_sources = []
        missing = set(fields)

        for name, data in layers:
            found = missing & data.keys()
            if not found:
                continue
            used_sources.append(name)
            merged.update({key: data[key] for key in found})
            missing -= found

        return merged, used_sources, missing

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Read a TOML file. A missing or malformed file counts as empty."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """COMMITPKG_BASE_BRANCH=dev becomes {"base_branch": "dev"}."""
        prefix = app_prefix.lower()
        return {
            key[len(app_prefix) :].lower(): value
            for key, value in os.environ.items()
            if key.lower().startswith(prefix)
        }
