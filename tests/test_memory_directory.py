"""Tests for the in-memory directory source and its snapshots."""

import pytest

from peerbook.domain import Contact, RelationshipTag, is_active, is_added, is_pending
from peerbook.infrastructure import InMemoryContactDirectory


def test_add_tag_creates_contact_and_sets_flag() -> None:
    store = InMemoryContactDirectory()
    store.add_tag("0x04a", RelationshipTag.ADDED)
    snap = store.snapshot()
    assert is_added(snap, "0x04a") is True
    assert is_pending(snap, "0x04a") is True


def test_request_accepted_then_blocked() -> None:
    store = InMemoryContactDirectory()
    store.add_tag("0x04a", RelationshipTag.REQUEST_RECEIVED)
    store.add_tag("0x04a", RelationshipTag.ADDED)
    assert is_pending(store.snapshot(), "0x04a") is False
    assert is_active(store.snapshot(), "0x04a") is True

    store.add_tag("0x04a", RelationshipTag.BLOCKED)
    assert is_active(store.snapshot(), "0x04a") is False
    store.remove_tag("0x04a", "blocked")
    assert is_active(store.snapshot(), "0x04a") is True


def test_snapshot_is_read_only_and_stable() -> None:
    store = InMemoryContactDirectory()
    store.upsert(Contact(identity="0x04a", alias="A", identicon="i"))
    before = store.snapshot()
    store.add_tag("0x04a", RelationshipTag.ADDED)
    assert is_added(before, "0x04a") is False
    assert is_added(store.snapshot(), "0x04a") is True
    with pytest.raises(TypeError):
        before["0x04b"] = Contact(identity="0x04b", alias="B", identicon="i")


def test_add_tag_keeps_existing_fields() -> None:
    store = InMemoryContactDirectory({"0x04a": Contact(identity="0x04a", alias="A", identicon="i", name="Alice")})
    store.add_tag("0x04a", RelationshipTag.ADDED)
    assert store.get("0x04a").name == "Alice"


def test_remove_tag_on_unknown_identity_is_noop() -> None:
    store = InMemoryContactDirectory()
    store.remove_tag("0x04missing", RelationshipTag.ADDED)
    assert len(store.snapshot()) == 0


def test_empty_identity_rejected() -> None:
    store = InMemoryContactDirectory()
    with pytest.raises(ValueError, match="identity"):
        store.add_tag("", RelationshipTag.ADDED)
