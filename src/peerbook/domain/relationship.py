"""
Relationship predicates derived from a contact's tag set.

Each predicate takes either a Contact (or None) or a directory plus an identity.
A missing contact behaves like a fresh default contact: no tags, so every
predicate except is_removed is False.
"""

from collections.abc import Mapping

from peerbook.domain.entities import Contact, RelationshipTag


def _tags(subject: Contact | Mapping[str, Contact] | None, identity: str | None) -> frozenset:
    if identity is not None:
        subject = subject.get(identity) if subject is not None else None
    if subject is None:
        return frozenset()
    return subject.tags


def is_added(subject, identity: str | None = None) -> bool:
    return RelationshipTag.ADDED in _tags(subject, identity)


def is_blocked(subject, identity: str | None = None) -> bool:
    return RelationshipTag.BLOCKED in _tags(subject, identity)


def is_request_received(subject, identity: str | None = None) -> bool:
    return RelationshipTag.REQUEST_RECEIVED in _tags(subject, identity)


def is_removed(subject, identity: str | None = None) -> bool:
    return not is_added(subject, identity)


def is_pending(subject, identity: str | None = None) -> bool:
    """One side sent a contact request and the other has not answered it yet."""
    tags = _tags(subject, identity)
    return (RelationshipTag.ADDED in tags) != (RelationshipTag.REQUEST_RECEIVED in tags)


def is_legacy_pending(subject, identity: str | None = None) -> bool:
    """Pending as understood by clients that only know inbound, unaccepted requests."""
    tags = _tags(subject, identity)
    return RelationshipTag.REQUEST_RECEIVED in tags and RelationshipTag.ADDED not in tags


def is_active(subject, identity: str | None = None) -> bool:
    """Added and not blocked."""
    tags = _tags(subject, identity)
    return RelationshipTag.ADDED in tags and RelationshipTag.BLOCKED not in tags
