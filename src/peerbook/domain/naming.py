"""Deterministic pseudonym and identicon generation from a contact identity.

Both are pure functions of the identity (SHA-256), so every device derives the
same alias for the same public key.
"""

import hashlib

_ADJECTIVES = (
    "Able", "Agile", "Amber", "Ample", "Azure", "Bold", "Brave", "Bright",
    "Brisk", "Calm", "Candid", "Clever", "Cosmic", "Crisp", "Dapper", "Daring",
    "Deft", "Eager", "Earnest", "Fair", "Fancy", "Fleet", "Frank", "Gentle",
    "Giddy", "Glad", "Golden", "Grand", "Hardy", "Hasty", "Honest", "Humble",
    "Icy", "Jolly", "Keen", "Kind", "Lively", "Lucky", "Merry", "Mild",
    "Modest", "Nimble", "Noble", "Plucky", "Polite", "Proud", "Quick", "Quiet",
    "Rapid", "Rustic", "Shy", "Silent", "Sleek", "Snappy", "Solid", "Spry",
    "Steady", "Sunny", "Swift", "Tidy", "Vivid", "Warm", "Wise", "Zesty",
)

_ANIMALS = (
    "Albatross", "Antelope", "Badger", "Beaver", "Bison", "Bobcat", "Buffalo",
    "Caracal", "Cheetah", "Condor", "Coyote", "Crane", "Dingo", "Dolphin",
    "Eagle", "Egret", "Falcon", "Ferret", "Finch", "Gazelle", "Gecko", "Gibbon",
    "Heron", "Hyena", "Ibis", "Impala", "Jackal", "Jaguar", "Kestrel", "Koala",
    "Lemur", "Lynx", "Magpie", "Marmot", "Mongoose", "Narwhal", "Ocelot",
    "Osprey", "Otter", "Panda", "Pelican", "Puffin", "Quail", "Raven",
    "Salmon", "Seal", "Sparrow", "Stork", "Tapir", "Toucan", "Walrus",
    "Weasel", "Wombat", "Yak", "Zebra",
)


def _digest(identity: str) -> bytes:
    return hashlib.sha256(identity.encode("utf-8")).digest()


def generate_alias(identity: str) -> str:
    """Return a three-word "Adjective Adjective Animal" pseudonym for the identity."""
    d = _digest(identity)
    first = _ADJECTIVES[int.from_bytes(d[0:4], "big") % len(_ADJECTIVES)]
    second = _ADJECTIVES[int.from_bytes(d[4:8], "big") % len(_ADJECTIVES)]
    animal = _ANIMALS[int.from_bytes(d[8:12], "big") % len(_ANIMALS)]
    return f"{first} {second} {animal}"


def generate_identicon(identity: str) -> str:
    """Return an opaque identicon descriptor for the identity."""
    return "identicon:" + _digest(identity)[12:28].hex()


class HashContactNaming:
    """Default naming collaborator backed by generate_alias / generate_identicon."""

    def alias_for(self, identity: str) -> str:
        return generate_alias(identity)

    def identicon_for(self, identity: str) -> str:
        return generate_identicon(identity)
