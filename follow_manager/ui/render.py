"""Text rendering of result lists, independent of Discord."""

from __future__ import annotations

from ..core.models import TABS, FollowData, User
from ..i18n import Language, translate

PAGE_SIZE = 20


def filter_users(users: list[User], query: str | None) -> list[User]:
    """Keep users whose username contains ``query``, ignoring case."""
    if not query:
        return list(users)
    needle = query.strip().lower()
    return [u for u in users if needle in u.username.lower()]


def page_count(total: int, size: int = PAGE_SIZE) -> int:
    return max(1, -(-total // size))


def paginate(users: list[User], page: int, size: int = PAGE_SIZE) -> list[User]:
    """Return page ``page`` (zero based), clamped to the valid range."""
    page = min(max(page, 0), page_count(len(users), size) - 1)
    start = page * size
    return users[start : start + size]


def format_user_line(user: User, lang: Language | str = Language.EN) -> str:
    line = f"@{user.username}"
    if user.full_name:
        line += f" ({user.full_name})"
    if user.profile_url:
        line += f" · [{translate('viewProfile', lang)}]({user.profile_url})"
    return line


def summary_lines(data: FollowData, lang: Language | str = Language.EN) -> list[str]:
    counts = data.counts()
    return [f"{translate(tab, lang)}: {counts[tab]}" for tab in TABS]
