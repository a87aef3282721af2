"""Persistence of the last analysis result.

The service only talks to :class:`FollowStore`; the JSON file backend keeps
one record per file and the memory backend keeps it in-process.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path

from .models import StoredData


class FollowStore(ABC):
    """Abstract store holding a single :class:`StoredData` record."""

    @abstractmethod
    def load(self) -> StoredData | None:
        """Return the stored record, or ``None`` when nothing is stored."""

    @abstractmethod
    def save(self, data: StoredData) -> None:
        """Replace the stored record with ``data``."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored record."""


class JSONFollowStore(FollowStore):
    """Persist a :class:`StoredData` record to a JSON file.

    Writes go through a temporary file that is moved into place so a crash
    mid-write never leaves a truncated record behind.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialise storage using JSON file at ``path``."""
        self.path = Path(path)

    def load(self) -> StoredData | None:
        if not self.path.exists():
            return None
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return StoredData.model_validate(data)

    def save(self, data: StoredData) -> None:
        """Persist ``data`` atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        payload = data.model_dump(by_alias=True, exclude_none=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryFollowStore(FollowStore):
    """Keep the record in memory only."""

    def __init__(self) -> None:
        self._data: StoredData | None = None

    def load(self) -> StoredData | None:
        return self._data

    def save(self, data: StoredData) -> None:
        self._data = data

    def clear(self) -> None:
        self._data = None
