"""Group chat rosters: members resolved against the directory and the user's own profile."""

from collections.abc import Mapping

from peerbook.application.directory import lookup_or_default
from peerbook.application.ports import ContactNaming
from peerbook.domain import Contact, GroupDescriptor, RosterEntry, SelfProfile


def contact_from_profile(profile: SelfProfile) -> Contact:
    """The current account as a contact: display name becomes alias, preferred name becomes name."""
    return Contact(
        identity=profile.identity,
        alias=profile.name,
        name=profile.preferred_name,
        identicon=profile.identicon,
        images=profile.images,
    )


def roster_sort_key(contact: Contact) -> str:
    if contact.name is not None:
        return contact.name.lower()
    return (contact.alias or "").lower()


def resolve_roster(
    group: GroupDescriptor,
    directory: Mapping[str, Contact],
    self_profile: SelfProfile | None = None,
    *,
    naming: ContactNaming | None = None,
) -> list[RosterEntry]:
    """Return every group member, sorted by name (or alias), flagged admin where applicable.

    Members unknown to the directory get a default contact. When the current
    user is a member, their own profile is used instead of any directory entry.
    The directory itself is not modified.
    """
    effective: Mapping[str, Contact] = directory
    if self_profile is not None:
        effective = dict(directory)
        effective[self_profile.identity] = contact_from_profile(self_profile)

    members = [lookup_or_default(effective, identity, naming) for identity in group.members]
    # list.sort is stable: ties keep member order.
    members.sort(key=roster_sort_key)
    return [
        RosterEntry(contact=contact, admin=contact.identity in group.admins)
        for contact in members
    ]
