"""Wallet address normalization for comparison (checksum casing is not significant)."""

import string

ADDRESS_HEX_LENGTH = 40


def normalize_address(raw: str | None) -> str | None:
    """Return the lower-case 0x-prefixed form of the address, or None if empty.

    The 0x prefix is optional on input. Mixed-case (checksummed) addresses
    normalize to the same value as their lower-case form. No length or
    character checks are made here; see is_valid_address.
    """
    if not raw or not str(raw).strip():
        return None
    value = str(raw).strip()
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    return "0x" + value.lower()


def is_valid_address(raw: str | None) -> bool:
    """True for a 0x-optional string of exactly 40 hex digits."""
    value = normalize_address(raw)
    if value is None:
        return False
    digits = value[2:]
    return len(digits) == ADDRESS_HEX_LENGTH and all(c in string.hexdigits for c in digits)


def addresses_equal(a: str | None, b: str | None) -> bool:
    """True when both addresses are present and equal once normalized."""
    left = normalize_address(a)
    return left is not None and left == normalize_address(b)
