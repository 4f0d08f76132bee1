"""View models handed to presentation code."""

from collections.abc import Mapping
from dataclasses import dataclass

from peerbook.domain import ProfileImage


@dataclass(frozen=True)
class EnrichedContact:
    """A contact with its derived relationship flags and, policy permitting, its images."""

    identity: str
    alias: str
    identicon: str
    display_name: str
    added: bool
    pending: bool
    legacy_pending: bool
    blocked: bool
    active: bool
    name: str | None = None
    address: str | None = None
    images: Mapping[str, ProfileImage] | None = None
