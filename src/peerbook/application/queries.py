"""Sorting, filtering and projections over contact collections."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from peerbook.domain import ChatDescriptor, Contact, is_active, is_blocked

T = TypeVar("T")


def _values(contacts: Mapping[str, Contact] | Iterable[Contact]) -> Iterable[Contact]:
    if isinstance(contacts, Mapping):
        return contacts.values()
    return contacts


def contact_sort_key(contact: Contact) -> str:
    # Unlike rosters, the directory-wide order never looks at the alias.
    for value in (contact.name, contact.address):
        if value is not None:
            return value.lower()
    return contact.identity.lower()


def sort_contacts(contacts: Mapping[str, Contact] | Iterable[Contact]) -> list[Contact]:
    """Contacts ordered case-insensitively by name, else address, else identity."""
    return sorted(_values(contacts), key=contact_sort_key)


def _is_developer_only(item: Any) -> bool:
    if isinstance(item, Mapping):
        flag = item.get("developer")
    else:
        flag = getattr(item, "developer", None)
    return flag is True


def filter_dev_tools_only(items: Iterable[T], dev_mode: bool) -> list[T]:
    """Drop items flagged developer-only unless dev mode is on."""
    if dev_mode:
        return list(items)
    return [item for item in items if not _is_developer_only(item)]


def filter_group_contacts(
    group_member_identities: Iterable[str], contacts: Iterable[Contact]
) -> list[Contact]:
    members = set(group_member_identities)
    return [c for c in contacts if c.identity in members]


def query_chat_contacts(
    chat: ChatDescriptor,
    all_contacts: Mapping[str, Contact],
    query_fn: Callable[[Callable[[Contact], bool], Iterable[Contact]], T],
) -> T:
    """Call query_fn(is_participant, contacts) so the caller picks filter or map semantics."""
    participants = {p for p in chat.participants if p}

    def is_participant(contact: Contact) -> bool:
        return contact.identity in participants

    return query_fn(is_participant, all_contacts.values())


def blocked_identities(contacts: Mapping[str, Contact] | Iterable[Contact]) -> frozenset:
    """Identities the messaging layer should drop inbound messages from."""
    return frozenset(c.identity for c in _values(contacts) if is_blocked(c))


def active_contacts(contacts: Mapping[str, Contact] | Iterable[Contact]) -> list[Contact]:
    return sort_contacts(c for c in _values(contacts) if is_active(c))
