"""Read-only lookups over a directory snapshot (identity -> Contact)."""

from collections.abc import Mapping

from peerbook.application.ports import ContactNaming
from peerbook.domain import Contact, HashContactNaming, addresses_equal

_DEFAULT_NAMING = HashContactNaming()


def new_contact(identity: str, naming: ContactNaming | None = None) -> Contact:
    """Synthesize the contact we show for an identity we know nothing about."""
    naming = naming or _DEFAULT_NAMING
    return Contact(
        identity=identity,
        alias=naming.alias_for(identity),
        identicon=naming.identicon_for(identity),
    )


def lookup_or_default(
    directory: Mapping[str, Contact],
    identity: str | None,
    naming: ContactNaming | None = None,
) -> Contact | None:
    """Return the stored contact, or a synthesized default. Never writes to the directory.

    A blank identity has no contact: None is returned instead of raising.
    """
    if not identity or not identity.strip():
        return None
    contact = directory.get(identity)
    if contact is not None:
        return contact
    return new_contact(identity, naming)


def find_by_address(directory: Mapping[str, Contact], address: str) -> Contact | None:
    """Return the first contact whose wallet address matches (checksum casing ignored)."""
    for contact in directory.values():
        if addresses_equal(contact.address, address):
            return contact
    return None


def exists(directory: Mapping[str, Contact], identity: str) -> bool:
    return identity in directory
