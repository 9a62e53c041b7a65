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

from unittest.mock import Mock

import pytest

from commitpkg.core.gate.commit_gate import CommitGate, GateDecision, has_skip_marker
from commitpkg.core.versioning.semver import parse_version


@pytest.mark.parametrize(
    "message",
    [
        "[skip ci] docs",
        "docs [ci skip]",
        "docs [SKIP CI] typo",
        "[Ci Skip]",
    ],
)
def test_has_skip_marker(message):
    assert has_skip_marker(message)


@pytest.mark.parametrize("message", ["skip ci", "[skipci]", "fix: ci", "[skip  ci]"])
def test_has_no_skip_marker(message):
    assert not has_skip_marker(message)


def test_changed_version_needs_no_menu():
    decision = CommitGate.decide("1.0.1", "1.0.0", "fix")

    assert decision is GateDecision.VERSION_CHANGED
    assert not decision.needs_menu


def test_skip_marker_needs_no_menu():
    decision = CommitGate.decide("1.0.0", "1.0.0", "[skip ci] fix")

    assert decision is GateDecision.SKIP_MARKER
    assert not decision.needs_menu


def test_unchanged_version_without_marker_needs_menu():
    decision = CommitGate.decide("1.0.0", "1.0.0", "fix")

    assert decision is GateDecision.CONFIRM
    assert decision.needs_menu


def test_missing_baseline_is_treated_as_unchanged():
    assert CommitGate.decide("1.0.0", None, "fix") is GateDecision.CONFIRM
    assert CommitGate.decide("1.0.0", None, "[ci skip]") is GateDecision.SKIP_MARKER


def _options(version):
    return CommitGate.build_options(
        parse_version(version),
        apply_version=Mock(),
        add_skip_marker=Mock(),
        cancel=Mock(),
    )


def test_stable_options():
    options = _options("1.2.3")

    assert [o.label for o in options] == [
        "patch release",
        "minor release",
        "major release",
        "skip ci",
        "cancel",
    ]
    assert [o.preview for o in options] == ["1.2.4", "1.3.0", "2.0.0", None, None]


def test_alpha_options():
    options = _options("1.2.3-alpha.2")

    assert [o.label for o in options] == [
        "release",
        "prerelease",
        "prerelease - beta",
        "skip ci",
        "cancel",
    ]
    assert [o.preview for o in options[:3]] == [
        "1.2.3",
        "1.2.3-alpha.3",
        "1.2.3-beta.1",
    ]


def test_beta_options_have_no_promotion():
    options = _options("1.2.3-beta.1")

    assert [o.label for o in options] == ["release", "prerelease", "skip ci", "cancel"]


def test_version_option_applies_its_own_version():
    apply_version = Mock()
    options = CommitGate.build_options(
        parse_version("1.2.3"), apply_version, Mock(), Mock()
    )

    options[1].apply()

    apply_version.assert_called_once_with(parse_version("1.3.0"))


def test_skip_and_cancel_options_call_their_actions():
    add_skip_marker, cancel = Mock(), Mock()
    options = CommitGate.build_options(
        parse_version("1.2.3"), Mock(), add_skip_marker, cancel
    )

    options[3].apply()
    options[4].apply()

    add_skip_marker.assert_called_once_with()
    cancel.assert_called_once_with()
