"""Orchestration of one analysis run.

:class:`FollowService` sits between the callers (the Discord commands) and
the pure core: it decodes raw file content, runs the normalizer and the
reconciliation engine, and keeps the last result in an injected
:class:`~follow_manager.core.storage.FollowStore`.
"""

from __future__ import annotations

import datetime
import json
import logging
from datetime import UTC
from pathlib import Path
from typing import Any

from .adapters.base import RemoteSource
from .core.errors import MissingInput, UnparseableContent
from .core.models import FollowData, StoredData
from .core.normalizer import parse_followers, parse_following
from .core.reconcile import build_follow_data
from .core.storage import FollowStore, JSONFollowStore

log = logging.getLogger(__name__)


def decode_payload(raw: bytes | str, name: str = "file") -> Any:
    """Decode raw file content into a JSON value.

    Raises :class:`UnparseableContent` for invalid UTF-8 or invalid JSON.
    """
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise UnparseableContent(f"The {name} is not valid JSON.") from exc


def _now_ms() -> int:
    return int(datetime.datetime.now(tz=UTC).timestamp() * 1000)


class FollowService:
    """Analysis entry points for a single user."""

    def __init__(self, store: FollowStore) -> None:
        self.store = store

    def load(self) -> FollowData | None:
        """Return the cached result, if any."""
        try:
            stored = self.store.load()
        except ValueError:
            log.warning("Discarding unreadable cached follow data", exc_info=True)
            self.store.clear()
            return None
        if stored is None:
            return None
        return stored.to_follow_data()

    def analyze_files(
        self, followers_raw: bytes | str | None, following_raw: bytes | str | None
    ) -> FollowData:
        """Analyze the content of the two export files."""
        if followers_raw is None or following_raw is None:
            raise MissingInput("Both the followers and the following file are required.")

        followers = parse_followers(decode_payload(followers_raw, "followers file"))
        following = parse_following(decode_payload(following_raw, "following file"))
        data = build_follow_data(following, followers)
        log.info(
            "Analyzed files: %d following, %d followers, %d not mutual",
            len(following),
            len(followers),
            len(data.not_mutual),
        )
        self._remember(data)
        return data

    async def analyze_remote(self, source: RemoteSource, session_id: str | None) -> FollowData:
        """Fetch pre-computed partitions from ``source``.

        The reconciliation engine is not run; the remote partitions are
        trusted as they are.
        """
        session_id = (session_id or "").strip()
        if not session_id:
            raise MissingInput("A session id is required.")
        data = await source.fetch(session_id)
        log.info(
            "Fetched remote analysis for %s: %d following, %d followers",
            data.username or "?",
            len(data.following),
            len(data.followers),
        )
        self._remember(data)
        return data

    def reset(self) -> None:
        self.store.clear()

    def _remember(self, data: FollowData) -> None:
        self.store.save(StoredData.from_follow_data(data, timestamp=_now_ms()))


class ServiceRegistry:
    """Hand out one :class:`FollowService` per caller.

    Each caller gets its own JSON file under ``data_dir``.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self._services: dict[str, FollowService] = {}

    def for_user(self, key: int | str) -> FollowService:
        key = str(key)
        service = self._services.get(key)
        if service is None:
            store = JSONFollowStore(self.data_dir / f"{key}.json")
            service = self._services[key] = FollowService(store)
        return service
