"""
Peerbook core: contact relationships, privacy policy and group rosters.

- domain: entities (Contact, SelfProfile, GroupDescriptor), tags and relationship predicates.
- application: directory lookups, enrichment, roster resolution, collection queries, ports.
- infrastructure: directory sources (InMemoryContactDirectory, YAML snapshots, Neo4jContactDirectory).
"""

from peerbook.application import (
    ContactDirectorySource,
    EnrichedContact,
    active_contacts,
    blocked_identities,
    enrich_many,
    enrich_one,
    find_by_address,
    lookup_or_default,
    resolve_roster,
    sort_contacts,
)
from peerbook.domain import (
    Contact,
    GroupDescriptor,
    PrivacySetting,
    RelationshipTag,
    RosterEntry,
    SelfProfile,
)
from peerbook.infrastructure import InMemoryContactDirectory, Neo4jContactDirectory

__all__ = [
    "Contact",
    "ContactDirectorySource",
    "EnrichedContact",
    "GroupDescriptor",
    "InMemoryContactDirectory",
    "Neo4jContactDirectory",
    "PrivacySetting",
    "RelationshipTag",
    "RosterEntry",
    "SelfProfile",
    "active_contacts",
    "blocked_identities",
    "enrich_many",
    "enrich_one",
    "find_by_address",
    "lookup_or_default",
    "resolve_roster",
    "sort_contacts",
]
