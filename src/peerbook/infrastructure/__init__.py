"""Infrastructure layer: storage collaborators that supply directory snapshots."""

from peerbook.infrastructure.memory_directory import InMemoryContactDirectory
from peerbook.infrastructure.persistence.neo4j_directory import (
    Neo4jContactDirectory,
    ensure_contact_constraint,
)
from peerbook.infrastructure.snapshot import (
    DirectorySnapshot,
    contact_from_record,
    get_snapshot_path,
    load_snapshot,
    parse_snapshot,
    parse_tags,
)

__all__ = [
    "DirectorySnapshot",
    "InMemoryContactDirectory",
    "Neo4jContactDirectory",
    "contact_from_record",
    "ensure_contact_constraint",
    "get_snapshot_path",
    "load_snapshot",
    "parse_snapshot",
    "parse_tags",
]
