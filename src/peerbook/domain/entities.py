"""Domain entities: Contact, SelfProfile, GroupDescriptor and the closed enums."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class RelationshipTag(str, Enum):
    """One side of the contact-request protocol, as recorded by the sync layer."""

    ADDED = "added"
    BLOCKED = "blocked"
    REQUEST_RECEIVED = "request-received"

    @classmethod
    def parse(cls, raw: object) -> "RelationshipTag | None":
        """Return the tag for a raw value, or None if it is not a known tag.

        Accepts the bare value ("added") and the namespaced form used by
        older sync payloads ("contact/added").
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        value = raw.strip().lstrip(":")
        if value.startswith("contact/"):
            value = value[len("contact/"):]
        try:
            return cls(value)
        except ValueError:
            return None


class PrivacySetting(str, Enum):
    """Who may see a contact's profile pictures."""

    NONE = "none"
    CONTACTS_ONLY = "contacts-only"
    ANY = "any"


@dataclass(frozen=True)
class ProfileImage:
    """One profile picture variant (thumbnail, large, ...)."""

    kind: str
    uri: str
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class Contact:
    """
    A contact as stored in the directory, keyed by identity.
    Relationship state lives only in `tags`; derived states are computed on demand.
    """

    identity: str
    alias: str
    identicon: str
    name: str | None = None
    images: Mapping[str, ProfileImage] | None = None
    tags: frozenset = field(default_factory=frozenset)
    address: str | None = None
    ens_verified_at: int | None = None
    ens_verification_retries: int | None = None

    def __post_init__(self):
        if not self.identity or not self.identity.strip():
            raise ValueError("Contact identity must be non-empty.")
        # Known values become enum members; anything else is kept but inert.
        tags = frozenset(RelationshipTag.parse(t) or t for t in self.tags)
        object.__setattr__(self, "tags", tags)


@dataclass(frozen=True)
class SelfProfile:
    """
    The current account as seen by its owner.
    `name` is the generated display name; `preferred_name` is the one the user picked.
    """

    identity: str
    name: str
    preferred_name: str | None = None
    identicon: str = ""
    images: Mapping[str, ProfileImage] | None = None

    def __post_init__(self):
        if not self.identity or not self.identity.strip():
            raise ValueError("SelfProfile identity must be non-empty.")


def _unique(identities: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(i for i in identities if i and i.strip()))


@dataclass(frozen=True)
class GroupDescriptor:
    """Membership of one group chat. Member order is kept as given, duplicates removed."""

    members: tuple[str, ...] = ()
    admins: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "members", _unique(self.members))
        object.__setattr__(self, "admins", frozenset(self.admins))


@dataclass(frozen=True)
class ChatDescriptor:
    """A chat and its participant identities (entries may be None)."""

    chat_id: str
    participants: tuple = ()


@dataclass(frozen=True)
class RosterEntry:
    """A contact resolved as part of a specific group, with its admin flag for that group."""

    contact: Contact
    admin: bool = False

    @property
    def identity(self) -> str:
        return self.contact.identity

    @property
    def alias(self) -> str:
        return self.contact.alias

    @property
    def name(self) -> str | None:
        return self.contact.name
