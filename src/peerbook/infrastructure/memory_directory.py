"""In-memory implementation of ContactDirectorySource (no DB)."""

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType

from peerbook.application.directory import new_contact
from peerbook.application.ports import ContactNaming
from peerbook.domain import Contact, RelationshipTag


class InMemoryContactDirectory:
    """Stores contacts in memory, keyed by identity. Order preserved by insertion.
    Tag changes replace the stored Contact; snapshots already handed out never change.
    """

    def __init__(
        self,
        contacts: Mapping[str, Contact] | None = None,
        *,
        naming: ContactNaming | None = None,
    ) -> None:
        self._by_identity: dict[str, Contact] = {}
        self._naming = naming
        for contact in (contacts or {}).values():
            self.upsert(contact)

    def upsert(self, contact: Contact) -> None:
        self._by_identity[contact.identity] = contact

    def get(self, identity: str) -> Contact | None:
        return self._by_identity.get(identity)

    def add_tag(self, identity: str, tag: RelationshipTag) -> None:
        contact = self._existing_or_new(identity)
        self.upsert(dataclasses.replace(contact, tags=contact.tags | {RelationshipTag(tag)}))

    def remove_tag(self, identity: str, tag: RelationshipTag) -> None:
        contact = self._by_identity.get(identity)
        if contact is None:
            return
        self.upsert(dataclasses.replace(contact, tags=contact.tags - {RelationshipTag(tag)}))

    def snapshot(self) -> Mapping[str, Contact]:
        return MappingProxyType(dict(self._by_identity))

    def _existing_or_new(self, identity: str) -> Contact:
        if not identity or not identity.strip():
            raise ValueError("identity must be non-empty")
        contact = self._by_identity.get(identity)
        if contact is None:
            contact = new_contact(identity, self._naming)
        return contact
