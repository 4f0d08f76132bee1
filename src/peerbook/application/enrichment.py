"""Per-contact view models: derived relationship flags plus profile-picture redaction."""

from collections.abc import Mapping

from peerbook.application.dto import EnrichedContact
from peerbook.application.ports import NameResolver
from peerbook.domain import (
    Contact,
    PrivacySetting,
    is_active,
    is_added,
    is_blocked,
    is_legacy_pending,
    is_pending,
)


def preferred_display_name(contact: Contact) -> str:
    """Chosen name if there is one, else the generated alias."""
    return contact.name or contact.alias


def _hide_images(
    contact: Contact,
    added: bool,
    privacy_setting: PrivacySetting | None,
    self_identity: str | None,
) -> bool:
    if privacy_setting is None or contact.identity == self_identity:
        return False
    if privacy_setting == PrivacySetting.NONE:
        return True
    return privacy_setting == PrivacySetting.CONTACTS_ONLY and not added


def enrich_one(
    contact: Contact,
    privacy_setting: PrivacySetting | None = None,
    self_identity: str | None = None,
    *,
    name_resolver: NameResolver | None = None,
) -> EnrichedContact:
    """Build the view model for one contact.

    Images are dropped when a privacy setting is given, the contact is not the
    current user, and the setting is "none" or "contacts-only" for a contact
    that is not added. Without a setting images are passed through untouched.
    """
    added = is_added(contact)
    resolve = name_resolver or preferred_display_name
    images = contact.images
    if _hide_images(contact, added, privacy_setting, self_identity):
        images = None
    return EnrichedContact(
        identity=contact.identity,
        alias=contact.alias,
        identicon=contact.identicon,
        display_name=resolve(contact),
        added=added,
        pending=is_pending(contact),
        legacy_pending=is_legacy_pending(contact),
        blocked=is_blocked(contact),
        active=is_active(contact),
        name=contact.name,
        address=contact.address,
        images=images,
    )


def enrich_many(
    directory: Mapping[str, Contact],
    privacy_setting: PrivacySetting | None,
    self_identity: str | None,
    *,
    name_resolver: NameResolver | None = None,
) -> dict[str, EnrichedContact]:
    """Enrich every entry; the result has exactly the directory's keys."""
    return {
        identity: enrich_one(
            contact,
            privacy_setting,
            self_identity,
            name_resolver=name_resolver,
        )
        for identity, contact in directory.items()
    }
