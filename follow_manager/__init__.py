"""Core package for Follow Manager.

This module exposes the data models, the normalizer and the reconciliation
engine so that consumers of the package can simply import them from
``follow_manager``. The Discord bot and the remote adapter live in their own
subpackages and are only imported when used.
"""

from .core.errors import (
    FollowDataError,
    InvalidFormat,
    MissingInput,
    RemoteFetchFailed,
    UnparseableContent,
)
from .core.models import FollowData, Role, StoredData, User
from .core.normalizer import normalize, parse_followers, parse_following
from .core.reconcile import Partitions, build_follow_data, find_not_mutual, reconcile
from .core.storage import FollowStore, JSONFollowStore, MemoryFollowStore

__all__ = [
    "FollowData",
    "FollowDataError",
    "FollowStore",
    "InvalidFormat",
    "JSONFollowStore",
    "MemoryFollowStore",
    "MissingInput",
    "Partitions",
    "RemoteFetchFailed",
    "Role",
    "StoredData",
    "UnparseableContent",
    "User",
    "build_follow_data",
    "find_not_mutual",
    "normalize",
    "parse_followers",
    "parse_following",
    "reconcile",
]
