"""Turn decoded Instagram export payloads into canonical user lists.

Instagram has shipped ``followers_1.json`` and ``following.json`` in a few
different shapes over time. Each known shape is a decoder case below; the
cases for a role are tried in a fixed order and the first one that finds a
list of entries wins. Anything unrecognized yields an empty list, never an
exception, so the caller decides whether "nothing found" is an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .models import Role, User

log = logging.getLogger(__name__)

ENTRY_RECORDS_KEY = "string_list_data"
FOLLOWING_WRAPPER_KEY = "relationships_following"

#: Known wrapper keys per role, tried before the document-order fallback.
KNOWN_KEYS: dict[Role, tuple[str, ...]] = {
    Role.FOLLOWERS: ("followers", "relationships_followers"),
    Role.FOLLOWING: ("following", "relationships_following"),
}


def _user_from_record(record: Any) -> User | None:
    if not isinstance(record, dict):
        return None
    username = record.get("value")
    if not isinstance(username, str) or not username:
        return None
    href = record.get("href")
    timestamp = record.get("timestamp")
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        timestamp = None
    return User(
        username=username,
        profile_url=href if isinstance(href, str) else None,
        captured_at=timestamp,
    )


def flatten_entries(entries: Iterable[Any]) -> list[User]:
    """Flatten every entry's ``string_list_data`` into one list, in order."""
    users: list[User] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        records = entry.get(ENTRY_RECORDS_KEY)
        if not isinstance(records, list):
            continue
        for record in records:
            user = _user_from_record(record)
            if user is not None:
                users.append(user)
    return users


# ----------------------------------------------------------------------
# Shape cases. Each returns the list of entries it recognized or ``None``.
# ----------------------------------------------------------------------
def _entry_array(payload: Any, role: Role) -> list | None:
    return payload if isinstance(payload, list) else None


def _following_wrapper(payload: Any, role: Role) -> list | None:
    if role is not Role.FOLLOWING or not isinstance(payload, dict):
        return None
    value = payload.get(FOLLOWING_WRAPPER_KEY)
    return value if isinstance(value, list) else None


def _keyed_wrapper(payload: Any, role: Role) -> list | None:
    """Probe known keys, then fall back to keys in document order.

    Followers only fall back to the first key of the object; following files
    accept the first list found under any key. Document order is the order
    in which :func:`json.loads` inserted the keys.
    """
    if not isinstance(payload, dict):
        return None
    fallback = list(payload)
    if role is Role.FOLLOWERS:
        fallback = fallback[:1]
    for key in (*KNOWN_KEYS[role], *fallback):
        value = payload.get(key)
        if isinstance(value, list):
            return value
    return None


Shape = tuple[str, Callable[[Any, Role], list | None]]

SHAPES: dict[Role, tuple[Shape, ...]] = {
    Role.FOLLOWERS: (
        ("entry array", _entry_array),
        ("keyed wrapper", _keyed_wrapper),
    ),
    Role.FOLLOWING: (
        ("following wrapper", _following_wrapper),
        ("entry array", _entry_array),
        ("keyed wrapper", _keyed_wrapper),
    ),
}


def normalize(payload: Any, role: Role) -> list[User]:
    """Return the canonical user list found in ``payload``.

    Duplicates are kept and the source order is preserved. An unrecognized
    payload gives an empty list.
    """
    for name, decode in SHAPES[role]:
        entries = decode(payload, role)
        if entries is not None:
            users = flatten_entries(entries)
            log.debug("%s payload matched %s: %d users", role.value, name, len(users))
            return users
    log.debug("%s payload has no recognizable user list", role.value)
    return []


def parse_followers(payload: Any) -> list[User]:
    return normalize(payload, Role.FOLLOWERS)


def parse_following(payload: Any) -> list[User]:
    return normalize(payload, Role.FOLLOWING)
