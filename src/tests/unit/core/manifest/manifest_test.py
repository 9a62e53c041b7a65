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

import json

import pytest

from commitpkg.core.exceptions import ManifestError, VersionError
from commitpkg.core.manifest.manifest import (
    Manifest,
    dump_manifest,
    version_from_manifest_text,
)
from commitpkg.core.versioning.semver import parse_version


def test_load_reads_version(write_manifest):
    manifest = Manifest.load(write_manifest("1.2.3-alpha.2"))

    assert manifest.raw_version == "1.2.3-alpha.2"
    assert str(manifest.version) == "1.2.3-alpha.2"


def test_load_missing_file(tmp_path):
    with pytest.raises(ManifestError, match="Manifest not found"):
        Manifest.load(tmp_path / "package.json")


def test_load_invalid_json(manifest_path):
    manifest_path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="not valid JSON"):
        Manifest.load(manifest_path)


def test_load_without_version(manifest_path):
    manifest_path.write_text('{"name": "demo"}', encoding="utf-8")

    with pytest.raises(ManifestError, match="No version field"):
        Manifest.load(manifest_path)


def test_load_non_object(manifest_path):
    manifest_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ManifestError):
        Manifest.load(manifest_path)


def test_load_invalid_version(write_manifest):
    with pytest.raises(VersionError):
        Manifest.load(write_manifest("1.2"))


def test_write_version_preserves_layout(manifest_path):
    manifest_path.write_text(
        '{"name": "demo", "version": "1.0.0", "scripts": {"test": "jest"}}',
        encoding="utf-8",
    )
    manifest = Manifest.load(manifest_path)

    manifest.write_version(parse_version("1.0.1"))

    text = manifest_path.read_text(encoding="utf-8")
    assert text == (
        "{\n"
        '\t"name": "demo",\n'
        '\t"version": "1.0.1",\n'
        '\t"scripts": {\n'
        '\t\t"test": "jest"\n'
        "\t}\n"
        "}\n"
    )
    assert manifest.raw_version == "1.0.1"


def test_write_version_accepts_string(write_manifest, read_version):
    manifest = Manifest.load(write_manifest("1.0.0"))

    manifest.write_version("2.0.0")

    assert read_version() == "2.0.0"


def test_write_version_keeps_non_ascii(write_manifest, manifest_path):
    manifest = Manifest.load(write_manifest("1.0.0", description="Grüße"))

    manifest.write_version("1.0.1")

    assert "Grüße" in manifest_path.read_text(encoding="utf-8")


def test_dump_manifest_trailing_newline():
    assert dump_manifest({"version": "1.0.0"}) == '{\n\t"version": "1.0.0"\n}\n'


@pytest.mark.parametrize(
    "text,expected",
    [
        (json.dumps({"version": "1.0.0"}), "1.0.0"),
        (json.dumps({"name": "demo"}), None),
        (json.dumps({"version": 1}), None),
        ("[]", None),
        ("not json", None),
    ],
)
def test_version_from_manifest_text(text, expected):
    assert version_from_manifest_text(text) == expected


def test_load_zeroth_prerelease(write_manifest):
    manifest = Manifest.load(write_manifest("1.0.0-alpha.0"))

    assert manifest.version.prerelease_number == 0
