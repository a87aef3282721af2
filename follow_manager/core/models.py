"""Data models for Follow Manager's core entities.

The models are implemented using :mod:`pydantic` so that they provide
runtime validation and convenient serialisation to and from dictionaries.
Users keep the field names of the Instagram export (``href`` and
``timestamp``) as aliases so cached records stay readable next to the
original files.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

#: Result lists in the order they are presented to the user.
TABS: tuple[str, ...] = (
    "not_mutual",
    "not_following",
    "mutuals",
    "following",
    "followers",
)


class Role(str, Enum):
    """Which side of the relationship an export file describes."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class User(BaseModel):
    """A canonical account record.

    Attributes
    ----------
    username:
        The join key. Two users are the same account iff their usernames are
        equal after lowercasing; no other field participates in identity.
    profile_url:
        Deep link supplied by the export (``href``).
    captured_at:
        Timestamp supplied by the export (``timestamp``).
    full_name, profile_pic_url, is_private, is_verified, user_id:
        Optional metadata only the remote service provides.

    """

    model_config = ConfigDict(populate_by_name=True)

    username: str
    profile_url: str | None = Field(default=None, alias="href")
    captured_at: int | float | None = Field(default=None, alias="timestamp")
    full_name: str | None = None
    profile_pic_url: str | None = None
    is_private: bool | None = None
    is_verified: bool | None = None
    user_id: int | str | None = None

    @property
    def key(self) -> str:
        """Normalized username used for matching."""
        return self.username.lower()


class FollowData(BaseModel):
    """Result of one analysis run.

    ``followers`` and ``following`` are passed through from the input; the
    three partitions are either computed locally or supplied by the remote
    service. Both producers build this same model.
    """

    username: str | None = None
    followers: list[User] = Field(default_factory=list)
    following: list[User] = Field(default_factory=list)
    not_mutual: list[User] = Field(default_factory=list)
    not_following: list[User] = Field(default_factory=list)
    mutuals: list[User] = Field(default_factory=list)

    def tab(self, name: str) -> list[User]:
        """Return the list shown under tab ``name``."""
        if name not in TABS:
            raise KeyError(name)
        return getattr(self, name)

    def counts(self) -> dict[str, int]:
        return {name: len(self.tab(name)) for name in TABS}


class StoredData(BaseModel):
    """The single record persisted between sessions."""

    model_config = ConfigDict(populate_by_name=True)

    followers: list[User] = Field(default_factory=list)
    following: list[User] = Field(default_factory=list)
    not_mutual: list[User] | None = Field(default=None, alias="notMutual")
    not_following: list[User] | None = Field(default=None, alias="notFollowing")
    mutuals: list[User] | None = None
    username: str | None = None
    # milliseconds since the epoch
    timestamp: int | None = None

    @classmethod
    def from_follow_data(
        cls, data: FollowData, timestamp: int | None = None
    ) -> StoredData:
        return cls(
            followers=data.followers,
            following=data.following,
            not_mutual=data.not_mutual,
            not_following=data.not_following,
            mutuals=data.mutuals,
            username=data.username,
            timestamp=timestamp,
        )

    def to_follow_data(self) -> FollowData:
        """Rebuild a :class:`FollowData` from the stored lists.

        Stored partitions are reused only when all three were stored, so a
        remote result comes back exactly as it was shown. Otherwise all three
        are recomputed from the two lists to keep them consistent.
        """
        if (
            self.not_mutual is not None
            and self.not_following is not None
            and self.mutuals is not None
        ):
            not_mutual, not_following, mutuals = (
                self.not_mutual,
                self.not_following,
                self.mutuals,
            )
        else:
            from .reconcile import reconcile

            not_mutual, not_following, mutuals = reconcile(self.following, self.followers)
        return FollowData(
            username=self.username,
            followers=self.followers,
            following=self.following,
            not_mutual=not_mutual,
            not_following=not_following,
            mutuals=mutuals,
        )
