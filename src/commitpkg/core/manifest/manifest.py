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
Reading and rewriting the JSON manifest (package.json).

The manifest is rewritten with its original key order, tab indentation and
a trailing newline so that a version bump shows up as a one-line diff.
"""

import json
from pathlib import Path

from loguru import logger

from commitpkg.core.exceptions import ManifestError, manifest_not_found
from commitpkg.core.versioning.semver import SemanticVersion, parse_version


class Manifest:
    def __init__(self, path: Path, data: dict):
        self.path = path
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "Manifest":
        """
        Read and validate the manifest.

        Raises:
            ManifestError: if the file is missing, unreadable, not a JSON
                object or has no string version field
            VersionError: if the version is not a supported semver string
        """
        path = Path(path)
        if not path.is_file():
            raise manifest_not_found(str(path))

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ManifestError(f"Manifest is not valid JSON: {path}", str(e))
        except OSError as e:
            raise ManifestError(f"Could not read manifest: {path}", str(e))

        manifest = cls(path, data)
        # fail before anything is mutated
        parse_version(manifest.raw_version)
        return manifest

    @property
    def raw_version(self) -> str:
        if not isinstance(self._data, dict) or not isinstance(
            self._data.get("version"), str
        ):
            raise ManifestError(f"No version field in {self.path}")
        return self._data["version"]

    @property
    def version(self) -> SemanticVersion:
        return parse_version(self.raw_version)

    def write_version(self, version: SemanticVersion | str) -> None:
        """Set the version and rewrite the manifest file."""
        self._data["version"] = str(version)
        try:
            self.path.write_text(dump_manifest(self._data), encoding="utf-8")
        except OSError as e:
            raise ManifestError(f"Could not write manifest: {self.path}", str(e))

        logger.info(f"Version’s been updated to {self._data['version']}")


def dump_manifest(data: dict) -> str:
    return json.dumps(data, indent="\t", ensure_ascii=False) + "\n"


def version_from_manifest_text(text: str) -> str | None:
    """Extract the raw version from manifest contents, None if absent or invalid."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    version = data.get("version")
    return version if isinstance(version, str) else None
