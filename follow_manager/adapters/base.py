"""Base interface for remote producers of follow data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.models import FollowData


class RemoteSource(ABC):
    """Abstract remote service that analyzes an account on the user's behalf."""

    @abstractmethod
    async def fetch(self, session_id: str) -> FollowData:
        """Return the analysis for the account behind ``session_id``."""

    async def close(self) -> None:
        """Release any resources held by the source."""
