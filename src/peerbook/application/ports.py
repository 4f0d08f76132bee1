"""Application ports (interfaces). Implemented by infrastructure adapters or callers."""

from collections.abc import Callable, Mapping
from typing import Protocol

from peerbook.domain import Contact, RelationshipTag


class ContactNaming(Protocol):
    """Derives the generated pseudonym and identicon for an identity."""

    def alias_for(self, identity: str) -> str:
        ...

    def identicon_for(self, identity: str) -> str:
        ...


class ContactDirectorySource(Protocol):
    """Storage side of the contact directory. The core only ever reads snapshots."""

    def snapshot(self) -> Mapping[str, Contact]:
        """Return a read-only identity -> Contact mapping."""
        ...

    def add_tag(self, identity: str, tag: RelationshipTag) -> None:
        """Set a relationship flag (called by the sync protocol)."""
        ...

    def remove_tag(self, identity: str, tag: RelationshipTag) -> None:
        """Clear a relationship flag (called by the sync protocol)."""
        ...


# Contact -> name shown in views.
NameResolver = Callable[[Contact], str]
