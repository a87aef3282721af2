"""HTTP adapter implementing :class:`~follow_manager.adapters.base.RemoteSource`.

The remote service logs into Instagram with the user's session cookie and
returns the followers, the following list and three partitions it already
computed. It uses :mod:`httpx` so the adapter stays fully asynchronous. The
response schema is private to this module; callers only ever see
:class:`~follow_manager.core.models.FollowData`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from ..core.errors import RemoteFetchFailed
from ..core.models import FollowData, User
from .base import RemoteSource

log = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({"success", "ok"})


class RemoteAnalysis(BaseModel):
    """Body returned by the remote analysis endpoint."""

    status: str
    message: str | None = None
    username: str | None = None
    followers: list[User] = Field(default_factory=list)
    following: list[User] = Field(default_factory=list)
    not_followed_back: list[User] = Field(default_factory=list)
    not_following: list[User] = Field(default_factory=list)
    mutuals: list[User] = Field(default_factory=list)
    counts: dict[str, int] = Field(default_factory=dict)

    def to_follow_data(self) -> FollowData:
        return FollowData(
            username=self.username,
            followers=self.followers,
            following=self.following,
            not_mutual=self.not_followed_back,
            not_following=self.not_following,
            mutuals=self.mutuals,
        )


class HTTPRemoteSource(RemoteSource):
    """Remote source that posts the session id to an HTTP endpoint."""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Store the service ``base_url`` and optional HTTP ``client``."""
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout)

    # ------------------------------------------------------------------
    async def fetch(self, session_id: str) -> FollowData:
        """Fetch the analysis for ``session_id``.

        Parameters
        ----------
        session_id:
            Instagram ``sessionid`` cookie, passed through untouched.

        Raises
        ------
        RemoteFetchFailed
            On transport errors, non-2xx responses, undecodable bodies or a
            status other than success.

        """
        url = f"{self.base_url}/analyze"
        try:
            response = await self.client.post(url, json={"session_id": session_id})
        except httpx.HTTPError as exc:
            log.warning("Remote analysis request failed: %s", exc)
            raise RemoteFetchFailed(f"Could not reach the analysis service: {exc}") from exc

        body = self._json(response)
        if response.is_error:
            raise RemoteFetchFailed(
                body.get("message") or f"Analysis service returned HTTP {response.status_code}.",
                status_code=response.status_code,
                response=body,
            )

        try:
            analysis = RemoteAnalysis.model_validate(body)
        except ValidationError as exc:
            raise RemoteFetchFailed(
                "Analysis service returned an unexpected response.",
                status_code=response.status_code,
                response=body,
            ) from exc

        if analysis.status.lower() not in SUCCESS_STATUSES:
            raise RemoteFetchFailed(
                analysis.message or f"Analysis failed with status {analysis.status!r}.",
                status_code=response.status_code,
                response=body,
            )
        return analysis.to_follow_data()

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            if response.is_error:
                return {}
            raise RemoteFetchFailed(
                "Analysis service returned a non-JSON response.",
                status_code=response.status_code,
            ) from None
        return data if isinstance(data, dict) else {"data": data}

    async def close(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient`."""
        await self.client.aclose()
