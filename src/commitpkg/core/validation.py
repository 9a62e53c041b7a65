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

from commitpkg.core.exceptions import missing_arguments, missing_message

_MESSAGE_FLAGS = ("-m", "-am")


def extract_commit_message(args: list[str]) -> tuple[str, list[str]]:
    """
    Split the commit message out of the arguments meant for git commit.

    `-m <msg>` is removed entirely; `-am <msg>` leaves `-a` in place. Only
    the first message flag is taken. Everything else is returned unchanged
    and in order.

    Raises:
        ValidationError: if there are no arguments or no message
    """
    if not args:
        raise missing_arguments()

    options = list(args)
    message = None
    for i, item in enumerate(options):
        if item in _MESSAGE_FLAGS:
            message = options[i + 1] if i + 1 < len(options) else None
            if item == "-am":
                options[i : i + 2] = ["-a"]
            else:
                del options[i : i + 2]
            break

    if not message:
        raise missing_message()

    return message, options
