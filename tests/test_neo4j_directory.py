"""Unit tests for Neo4jContactDirectory against a recording fake driver (no database)."""

import pytest

from peerbook.domain import RelationshipTag, generate_alias, is_active, is_blocked
from peerbook.infrastructure import Neo4jContactDirectory, ensure_contact_constraint


class _FakeSession:
    def __init__(self, driver) -> None:
        self._driver = driver

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        return None

    def run(self, query, **params):
        self._driver.calls.append((query, params))
        return list(self._driver.records)


class _FakeDriver:
    def __init__(self, records=()) -> None:
        self.records = list(records)
        self.calls: list[tuple[str, dict]] = []

    def session(self):
        return _FakeSession(self)


def _record(identity, tags, contact_name=None, **node):
    return {
        "c": {"identity": identity, **node},
        "k": {"tags": tags, "contact_name": contact_name},
    }


def test_snapshot_maps_records_to_contacts() -> None:
    driver = _FakeDriver(
        [
            _record("0x04a", ["added"], alias="Alias A", identicon="ia", contact_name="Alice"),
            _record("0x04b", ["blocked", "muted"], image_kinds=["thumbnail"], image_uris=["u"]),
        ]
    )
    snap = Neo4jContactDirectory(driver, user_id="owner-1").snapshot()

    assert set(snap) == {"0x04a", "0x04b"}
    assert snap["0x04a"].name == "Alice"
    assert snap["0x04a"].alias == "Alias A"
    assert is_active(snap, "0x04a") is True
    assert is_blocked(snap, "0x04b") is True
    assert snap["0x04b"].tags == frozenset({RelationshipTag.BLOCKED})
    assert snap["0x04b"].alias == generate_alias("0x04b")
    assert snap["0x04b"].images["thumbnail"].uri == "u"
    query, params = driver.calls[0]
    assert "KNOWS" in query
    assert params == {"user_id": "owner-1"}


def test_add_tag_sends_tag_value_and_generated_names() -> None:
    driver = _FakeDriver()
    Neo4jContactDirectory(driver, user_id="owner-1").add_tag("0x04a", RelationshipTag.REQUEST_RECEIVED)
    _, params = driver.calls[0]
    assert params["tag"] == "request-received"
    assert params["identity"] == "0x04a"
    assert params["alias"] == generate_alias("0x04a")


def test_remove_tag() -> None:
    driver = _FakeDriver()
    Neo4jContactDirectory(driver).remove_tag("0x04a", "blocked")
    _, params = driver.calls[0]
    assert params == {"user_id": "default", "identity": "0x04a", "tag": "blocked"}


def test_add_tag_rejects_empty_identity_and_unknown_tag() -> None:
    directory = Neo4jContactDirectory(_FakeDriver())
    with pytest.raises(ValueError):
        directory.add_tag(" ", RelationshipTag.ADDED)
    with pytest.raises(ValueError):
        directory.add_tag("0x04a", "muted")


def test_ensure_contact_constraint() -> None:
    driver = _FakeDriver()
    ensure_contact_constraint(driver)
    assert "CONSTRAINT" in driver.calls[0][0]
