import pytest

from follow_manager.core.errors import InvalidFormat
from follow_manager.core.models import User
from follow_manager.core.reconcile import build_follow_data, find_not_mutual, reconcile


def users(*names: str) -> list[User]:
    return [User(username=n) for n in names]


def names(seq: list[User]) -> list[str]:
    return [u.username for u in seq]


def test_end_to_end_partitions():
    parts = reconcile(users("alice", "bob", "carol"), users("bob", "dave"))
    assert names(parts.not_mutual) == ["alice", "carol"]
    assert names(parts.not_following) == ["dave"]
    assert names(parts.mutuals) == ["bob"]


def test_matching_ignores_case():
    parts = reconcile(users("Alice"), users("alice"))
    assert names(parts.mutuals) == ["Alice"]
    assert parts.not_mutual == []
    assert parts.not_following == []


def test_duplicates_are_preserved():
    parts = reconcile(users("alice", "alice"), [])
    assert names(parts.not_mutual) == ["alice", "alice"]

    parts = reconcile(users("bob", "BOB"), users("bob"))
    assert names(parts.mutuals) == ["bob", "BOB"]
    assert parts.not_following == []


def test_partitions_are_complete_and_disjoint():
    following = users("a", "B", "c", "d", "a")
    followers = users("b", "C", "e", "E")
    parts = reconcile(following, followers)

    # every following entry lands in exactly one of not_mutual / mutuals
    assert len(parts.not_mutual) + len(parts.mutuals) == len(following)
    assert {id(u) for u in parts.not_mutual}.isdisjoint(id(u) for u in parts.mutuals)
    # every followers entry is either not followed back or matched
    following_keys = {u.key for u in following}
    matched = [u for u in followers if u.key in following_keys]
    assert len(parts.not_following) + len(matched) == len(followers)
    assert names(parts.not_following) == ["e", "E"]


def test_other_fields_do_not_affect_identity():
    following = [User(username="amy", profile_url="https://x/1", captured_at=1)]
    followers = [User(username="AMY", profile_url="https://x/2", captured_at=2)]
    parts = reconcile(following, followers)
    assert parts.mutuals == following


def test_find_not_mutual_matches_reconcile():
    following = users("alice", "bob", "carol")
    followers = users("BOB")
    assert find_not_mutual(following, followers) == reconcile(following, followers).not_mutual


def test_build_follow_data_passes_lists_through():
    following = users("alice", "bob")
    followers = users("bob", "dave")
    data = build_follow_data(following, followers, username="me")
    assert data.username == "me"
    assert data.following == following
    assert data.followers == followers
    assert names(data.not_mutual) == ["alice"]
    assert names(data.not_following) == ["dave"]
    assert names(data.mutuals) == ["bob"]


def test_build_follow_data_rejects_two_empty_lists():
    with pytest.raises(InvalidFormat):
        build_follow_data([], [])


def test_one_empty_side_is_a_valid_result():
    data = build_follow_data(users("alice"), [])
    assert names(data.not_mutual) == ["alice"]
    assert data.mutuals == []

    data = build_follow_data([], users("dave"))
    assert names(data.not_following) == ["dave"]
