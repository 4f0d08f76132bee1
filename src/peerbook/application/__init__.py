"""Application layer: directory lookups, enrichment, rosters, queries and ports. Depends only on domain."""

from peerbook.application.directory import (
    exists,
    find_by_address,
    lookup_or_default,
    new_contact,
)
from peerbook.application.dto import EnrichedContact
from peerbook.application.enrichment import enrich_many, enrich_one, preferred_display_name
from peerbook.application.ports import ContactDirectorySource, ContactNaming, NameResolver
from peerbook.application.queries import (
    active_contacts,
    blocked_identities,
    filter_dev_tools_only,
    filter_group_contacts,
    query_chat_contacts,
    sort_contacts,
)
from peerbook.application.roster import contact_from_profile, resolve_roster

__all__ = [
    "ContactDirectorySource",
    "ContactNaming",
    "EnrichedContact",
    "NameResolver",
    "active_contacts",
    "blocked_identities",
    "contact_from_profile",
    "enrich_many",
    "enrich_one",
    "exists",
    "filter_dev_tools_only",
    "filter_group_contacts",
    "find_by_address",
    "lookup_or_default",
    "new_contact",
    "preferred_display_name",
    "query_chat_contacts",
    "resolve_roster",
    "sort_contacts",
]
