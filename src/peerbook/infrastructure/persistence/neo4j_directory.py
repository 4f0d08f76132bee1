"""Neo4j implementation of ContactDirectorySource.
Graph: (owner:Person {id: user_id, registered: true})-[:KNOWS {tags, contact_name}]->(c:Contact {identity}).
Relationship tags and the owner's name for the contact live on the KNOWS relationship;
the Contact node carries what is shared by every owner (alias, identicon, address, images).
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from peerbook.application.ports import ContactNaming
from peerbook.domain import Contact, RelationshipTag
from peerbook.infrastructure.snapshot import contact_from_record

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT contact_identity_unique IF NOT EXISTS
FOR (c:Contact) REQUIRE c.identity IS UNIQUE
"""

_SNAPSHOT_QUERY = """
MATCH (owner:Person {id: $user_id, registered: true})-[k:KNOWS]->(c:Contact)
RETURN c, k
ORDER BY c.identity
"""

_ADD_TAG_QUERY = """
MERGE (owner:Person {id: $user_id, registered: true})
MERGE (c:Contact {identity: $identity})
ON CREATE SET c.alias = $alias, c.identicon = $identicon
MERGE (owner)-[k:KNOWS]->(c)
ON CREATE SET k.tags = []
SET k.tags = CASE WHEN $tag IN k.tags THEN k.tags ELSE k.tags + $tag END
"""

_REMOVE_TAG_QUERY = """
MATCH (owner:Person {id: $user_id, registered: true})-[k:KNOWS]->(c:Contact {identity: $identity})
SET k.tags = [t IN k.tags WHERE t <> $tag]
"""


def ensure_contact_constraint(driver) -> None:
    """Create unique constraint on Contact(identity) if missing."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jContactDirectory:
    """Contact directory stored in Neo4j, scoped by owner user_id."""

    def __init__(
        self,
        driver: object,
        user_id: str = "default",
        *,
        naming: ContactNaming | None = None,
    ) -> None:
        self._driver = driver
        self._user_id = user_id
        self._naming = naming

    def snapshot(self) -> Mapping[str, Contact]:
        with self._driver.session() as session:
            result = session.run(_SNAPSHOT_QUERY, user_id=self._user_id)
            contacts = {}
            for record in result:
                contact = _record_to_contact(record, self._naming)
                contacts[contact.identity] = contact
        logger.debug("Read %d contacts for owner %s", len(contacts), self._user_id)
        return MappingProxyType(contacts)

    def add_tag(self, identity: str, tag: RelationshipTag) -> None:
        if not identity or not identity.strip():
            raise ValueError("identity must be non-empty")
        tag = RelationshipTag(tag)
        contact = contact_from_record({"identity": identity}, self._naming)
        with self._driver.session() as session:
            session.run(
                _ADD_TAG_QUERY,
                user_id=self._user_id,
                identity=identity,
                alias=contact.alias,
                identicon=contact.identicon,
                tag=tag.value,
            )

    def remove_tag(self, identity: str, tag: RelationshipTag) -> None:
        with self._driver.session() as session:
            session.run(
                _REMOVE_TAG_QUERY,
                user_id=self._user_id,
                identity=identity,
                tag=RelationshipTag(tag).value,
            )


def _record_to_contact(record, naming: ContactNaming | None) -> Contact:
    c = record["c"]
    k = record["k"]
    kinds = c.get("image_kinds") or []
    uris = c.get("image_uris") or []
    return contact_from_record(
        {
            "identity": c["identity"],
            "alias": c.get("alias"),
            "identicon": c.get("identicon"),
            "address": c.get("address"),
            # Owner's name for the contact; fall back to the name the contact published.
            "name": k.get("contact_name") or c.get("name"),
            "tags": k.get("tags") or [],
            "images": dict(zip(kinds, uris)),
            "ens_verified_at": c.get("ens_verified_at"),
            "ens_verification_retries": c.get("ens_verification_retries"),
        },
        naming,
    )
