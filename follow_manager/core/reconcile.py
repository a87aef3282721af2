"""Split following and followers lists into relationship partitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .errors import InvalidFormat
from .models import FollowData, User


class Partitions(NamedTuple):
    not_mutual: list[User]
    not_following: list[User]
    mutuals: list[User]


def username_keys(users: Iterable[User]) -> set[str]:
    return {u.key for u in users}


def find_not_mutual(following: list[User], followers: list[User]) -> list[User]:
    """Accounts followed by the user that do not follow back."""
    follower_keys = username_keys(followers)
    return [u for u in following if u.key not in follower_keys]


def reconcile(following: list[User], followers: list[User]) -> Partitions:
    """Compute the three partitions.

    Usernames match case-insensitively. Every ``following`` entry lands in
    exactly one of ``not_mutual`` / ``mutuals`` and every ``followers`` entry
    is either in ``not_following`` or has a counterpart in ``following``.
    Order and duplicates of the inputs are preserved.
    """
    follower_keys = username_keys(followers)
    following_keys = username_keys(following)

    not_mutual: list[User] = []
    mutuals: list[User] = []
    for user in following:
        (mutuals if user.key in follower_keys else not_mutual).append(user)

    not_following = [u for u in followers if u.key not in following_keys]
    return Partitions(not_mutual, not_following, mutuals)


def build_follow_data(
    following: list[User], followers: list[User], username: str | None = None
) -> FollowData:
    """Reconcile two canonical lists into a :class:`FollowData`.

    Two empty lists mean neither file had a recognizable shape, so this is
    reported as :class:`InvalidFormat` rather than an account with no
    relationships.
    """
    if not following and not followers:
        raise InvalidFormat("No followers or following entries found in either file.")
    parts = reconcile(following, followers)
    return FollowData(
        username=username,
        followers=followers,
        following=following,
        not_mutual=parts.not_mutual,
        not_following=parts.not_following,
        mutuals=parts.mutuals,
    )
