"""Tests for group roster resolution."""

from peerbook.application import lookup_or_default, resolve_roster
from peerbook.domain import Contact, GroupDescriptor, ProfileImage, RelationshipTag, SelfProfile


def _contact(identity: str, alias: str, name: str | None = None) -> Contact:
    return Contact(identity=identity, alias=alias, identicon="i", name=name)


def test_unknown_members_are_synthesized_and_flagged() -> None:
    group = GroupDescriptor(members=("X", "Y"), admins={"Y"})
    roster = resolve_roster(group, {})
    assert [e.identity for e in roster] == sorted(["X", "Y"], key=lambda i: lookup_or_default({}, i).alias.lower())
    flags = {e.identity: e.admin for e in roster}
    assert flags == {"X": False, "Y": True}


def test_roster_sorted_by_name_then_alias_case_insensitive() -> None:
    directory = {
        "a": _contact("a", alias="zed", name="bob"),
        "b": _contact("b", alias="Carl"),
        "c": _contact("c", alias="yak", name="Alice"),
    }
    roster = resolve_roster(GroupDescriptor(members=("a", "b", "c")), directory)
    assert [e.identity for e in roster] == ["c", "a", "b"]
    keys = [(e.name or e.alias).lower() for e in roster]
    assert keys == sorted(keys)


def test_ties_keep_member_order() -> None:
    directory = {
        "a": _contact("a", alias="Same"),
        "b": _contact("b", alias="same"),
    }
    assert [e.identity for e in resolve_roster(GroupDescriptor(members=("b", "a")), directory)] == ["b", "a"]
    assert [e.identity for e in resolve_roster(GroupDescriptor(members=("a", "b")), directory)] == ["a", "b"]


def test_self_profile_overrides_directory_entry() -> None:
    image = {"thumbnail": ProfileImage(kind="thumbnail", uri="u")}
    directory = {"me": Contact(identity="me", alias="stale", identicon="i", tags={RelationshipTag.ADDED})}
    me = SelfProfile(identity="me", name="Gentle Otter", preferred_name="Max", identicon="mine", images=image)
    roster = resolve_roster(GroupDescriptor(members=("me",), admins={"me"}), directory, me)
    assert len(roster) == 1
    entry = roster[0]
    assert entry.alias == "Gentle Otter"
    assert entry.name == "Max"
    assert entry.contact.identicon == "mine"
    assert entry.contact.images == image
    assert entry.admin is True
    # The caller's directory is untouched.
    assert directory["me"].alias == "stale"


def test_self_profile_not_member_is_not_added() -> None:
    me = SelfProfile(identity="me", name="Me")
    roster = resolve_roster(GroupDescriptor(members=("x",)), {}, me)
    assert [e.identity for e in roster] == ["x"]


def test_roster_length_matches_members_and_admin_is_not_stored() -> None:
    directory = {"a": _contact("a", alias="A")}
    group = GroupDescriptor(members=("a", "b", "c", "a"), admins={"a", "zz"})
    roster = resolve_roster(group, directory)
    assert len(roster) == 3
    for entry in roster:
        assert entry.admin == (entry.identity in group.admins)
    assert not hasattr(directory["a"], "admin")


def test_same_identity_admin_in_one_group_only() -> None:
    directory = {"a": _contact("a", alias="A")}
    first = resolve_roster(GroupDescriptor(members=("a",), admins={"a"}), directory)
    second = resolve_roster(GroupDescriptor(members=("a",)), directory)
    assert first[0].admin is True
    assert second[0].admin is False


def test_empty_group() -> None:
    assert resolve_roster(GroupDescriptor(), {"a": _contact("a", alias="A")}) == []


def test_empty_name_sorts_before_alias() -> None:
    directory = {
        "a": _contact("a", alias="Aardvark"),
        "b": _contact("b", alias="Zebra", name=""),
    }
    roster = resolve_roster(GroupDescriptor(members=("a", "b")), directory)
    assert [e.identity for e in roster] == ["b", "a"]


def test_blank_member_identities_are_ignored() -> None:
    group = GroupDescriptor(members=("x", "", "  ", None))
    assert group.members == ("x",)
    assert [e.identity for e in resolve_roster(group, {})] == ["x"]
