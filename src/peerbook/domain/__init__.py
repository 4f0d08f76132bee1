"""Domain layer: entities, relationship predicates and value helpers. No dependencies on outer layers."""

from peerbook.domain.address import addresses_equal, is_valid_address, normalize_address
from peerbook.domain.entities import (
    ChatDescriptor,
    Contact,
    GroupDescriptor,
    PrivacySetting,
    ProfileImage,
    RelationshipTag,
    RosterEntry,
    SelfProfile,
)
from peerbook.domain.naming import HashContactNaming, generate_alias, generate_identicon
from peerbook.domain.relationship import (
    is_active,
    is_added,
    is_blocked,
    is_legacy_pending,
    is_pending,
    is_removed,
    is_request_received,
)

__all__ = [
    "ChatDescriptor",
    "Contact",
    "GroupDescriptor",
    "HashContactNaming",
    "PrivacySetting",
    "ProfileImage",
    "RelationshipTag",
    "RosterEntry",
    "SelfProfile",
    "addresses_equal",
    "generate_alias",
    "generate_identicon",
    "is_active",
    "is_added",
    "is_blocked",
    "is_legacy_pending",
    "is_pending",
    "is_removed",
    "is_request_received",
    "is_valid_address",
    "normalize_address",
]
