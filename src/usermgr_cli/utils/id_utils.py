"""Identifier helpers for user records."""

from __future__ import annotations

from collections.abc import Sequence

from usermgr_cli.models.user import User


def generate_id(users: Sequence[User]) -> int:
    """Return the id for a new user.

    The next id is the last user's id plus one, or 1 for an empty list.
    Only the final element is inspected, so a list whose last element does
    not hold the highest id can produce a duplicate.
    """
    if not users:
        return 1
    return users[-1].id + 1
