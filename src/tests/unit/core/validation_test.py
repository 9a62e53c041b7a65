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

import pytest

from commitpkg.core.exceptions import ValidationError
from commitpkg.core.validation import extract_commit_message


def test_message_flag_removed():
    assert extract_commit_message(["-m", "fix: x"]) == ("fix: x", [])


def test_all_message_flag_keeps_add_all():
    assert extract_commit_message(["-am", "fix: x", "--no-verify"]) == (
        "fix: x",
        ["-a", "--no-verify"],
    )


def test_other_options_keep_order():
    message, options = extract_commit_message(
        ["--signoff", "-m", "fix: x", "--author", "A <a@b.c>"]
    )

    assert message == "fix: x"
    assert options == ["--signoff", "--author", "A <a@b.c>"]


def test_only_first_message_flag_is_taken():
    message, options = extract_commit_message(["-m", "first", "-m", "second"])

    assert message == "first"
    assert options == ["-m", "second"]


def test_no_arguments():
    with pytest.raises(ValidationError, match="No arguments passed"):
        extract_commit_message([])


@pytest.mark.parametrize("args", [["-a"], ["-m"], ["-am"], ["-m", ""]])
def test_missing_message(args):
    with pytest.raises(ValidationError, match="Commit message is required"):
        extract_commit_message(args)
