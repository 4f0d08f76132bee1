"""Load a directory snapshot (contacts, own profile, groups, dapps) from YAML.

Document shape:

    self: {identity, name, preferred_name, identicon, images}
    contacts: [{identity, name, alias, identicon, address, tags, images}, ...]
    groups: {chat_id: {members: [...], admins: [...]}}
    dapps: [{name, url, developer}, ...]

Missing alias/identicon are generated from the identity. Unknown tags are dropped.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from peerbook.application.directory import new_contact
from peerbook.application.ports import ContactNaming
from peerbook.domain import (
    Contact,
    GroupDescriptor,
    ProfileImage,
    RelationshipTag,
    SelfProfile,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectorySnapshot:
    """Everything the core reads, as loaded at one point in time."""

    contacts: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    self_profile: SelfProfile | None = None
    groups: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    dapps: tuple = ()


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def get_snapshot_path() -> Path:
    """Return the snapshot path (PEERBOOK_SNAPSHOT_PATH env or data/directory.yaml)."""
    path = os.environ.get("PEERBOOK_SNAPSHOT_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return _repo_root() / "data" / "directory.yaml"


def parse_tags(raw) -> frozenset:
    """Known relationship tags from a raw list; anything unrecognized is dropped."""
    tags = set()
    for value in raw or ():
        tag = RelationshipTag.parse(value)
        if tag is None:
            logger.debug("Ignoring unknown relationship tag %r", value)
            continue
        tags.add(tag)
    return frozenset(tags)


def parse_images(raw) -> dict[str, ProfileImage] | None:
    """Images keyed by kind. Accepts {kind: uri} or {kind: {uri, width, height}}."""
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise ValueError("images must be a mapping of kind -> image")
    images = {}
    for kind, value in raw.items():
        if isinstance(value, str):
            images[str(kind)] = ProfileImage(kind=str(kind), uri=value)
        elif isinstance(value, dict) and value.get("uri"):
            images[str(kind)] = ProfileImage(
                kind=str(kind),
                uri=value["uri"],
                width=value.get("width"),
                height=value.get("height"),
            )
        else:
            raise ValueError(f"image '{kind}' must have a uri")
    return images


def contact_from_record(record: dict, naming: ContactNaming | None = None) -> Contact:
    """Build a Contact from a plain mapping (YAML entry or graph node properties)."""
    identity = str(record.get("identity") or "").strip()
    if not identity:
        raise ValueError("Every contact must have 'identity'")
    default = new_contact(identity, naming)
    return Contact(
        identity=identity,
        alias=(record.get("alias") or "").strip() or default.alias,
        identicon=(record.get("identicon") or "").strip() or default.identicon,
        name=(record.get("name") or "").strip() or None,
        images=parse_images(record.get("images")),
        tags=parse_tags(record.get("tags")),
        address=(record.get("address") or "").strip() or None,
        ens_verified_at=record.get("ens_verified_at"),
        ens_verification_retries=record.get("ens_verification_retries"),
    )


def _parse_self(raw) -> SelfProfile | None:
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise ValueError("'self' must be a mapping")
    return SelfProfile(
        identity=str(raw.get("identity") or "").strip(),
        name=(raw.get("name") or "").strip(),
        preferred_name=(raw.get("preferred_name") or "").strip() or None,
        identicon=(raw.get("identicon") or "").strip(),
        images=parse_images(raw.get("images")),
    )


def _parse_groups(raw) -> dict[str, GroupDescriptor]:
    if not raw:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("'groups' must be a mapping of chat id -> group")
    groups = {}
    for chat_id, group in raw.items():
        if not isinstance(group, dict):
            raise ValueError(f"Group '{chat_id}' must be a mapping")
        groups[str(chat_id)] = GroupDescriptor(
            members=tuple(str(m) for m in group.get("members") or ()),
            admins=frozenset(str(a) for a in group.get("admins") or ()),
        )
    return groups


def parse_snapshot(document, naming: ContactNaming | None = None) -> DirectorySnapshot:
    """Validate a loaded YAML document and turn it into a DirectorySnapshot."""
    if document is None:
        return DirectorySnapshot()
    if not isinstance(document, dict):
        raise ValueError("Snapshot YAML must be a dict")
    contacts: dict[str, Contact] = {}
    for record in document.get("contacts") or []:
        if not isinstance(record, dict):
            raise ValueError("Every contact must be a mapping")
        contact = contact_from_record(record, naming)
        if contact.identity in contacts:
            raise ValueError(f"Duplicate contact identity '{contact.identity}'")
        contacts[contact.identity] = contact
    dapps = document.get("dapps") or []
    if not isinstance(dapps, list):
        raise ValueError("'dapps' must be a list")
    return DirectorySnapshot(
        contacts=MappingProxyType(contacts),
        self_profile=_parse_self(document.get("self")),
        groups=MappingProxyType(_parse_groups(document.get("groups"))),
        dapps=tuple(dapps),
    )


def load_snapshot(path: Path | None = None, naming: ContactNaming | None = None) -> DirectorySnapshot:
    """Load a snapshot YAML file (default: get_snapshot_path())."""
    if path is None:
        path = get_snapshot_path()
    raw = path.read_text(encoding="utf-8")
    snapshot = parse_snapshot(yaml.safe_load(raw), naming)
    logger.info("Loaded %d contacts from %s", len(snapshot.contacts), path)
    return snapshot
