"""Checksum wrapper that detects insufficient or corrupted shares.

combine() cannot tell a wrong answer from a right one. Appending a short
SHA-256 digest to the secret before splitting lets the caller check the
result afterwards.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable

from shamir256.codec import hex_to_binary
from shamir256.errors import ChecksumMismatch, InvalidArgument
from shamir256.models import DEFAULT_PAD_LENGTH
from shamir256.shamir import combine, split

CHECKSUM_LENGTH = 8


def compute_checksum(hex_secret: str) -> str:
    """Last 8 hex digits of the SHA-256 of the lowercased hex text."""
    if not isinstance(hex_secret, str):
        raise InvalidArgument(f"Secret must be a string, got {type(hex_secret).__name__}")
    hex_to_binary(hex_secret)
    return hashlib.sha256(hex_secret.lower().encode("ascii")).hexdigest()[-CHECKSUM_LENGTH:]


def append_checksum(hex_secret: str) -> str:
    return hex_secret + compute_checksum(hex_secret)


def strip_checksum(checked_hex: str) -> str:
    """Verify and remove the trailing checksum, returning the bare secret."""
    if len(checked_hex) < CHECKSUM_LENGTH:
        raise ChecksumMismatch("Checksum did not match, likely invalid or not enough shares")
    hex_secret = checked_hex[:-CHECKSUM_LENGTH]
    stored = checked_hex[-CHECKSUM_LENGTH:].lower()
    if not hmac.compare_digest(stored, compute_checksum(hex_secret)):
        raise ChecksumMismatch("Checksum did not match, likely invalid or not enough shares")
    return hex_secret


def split_checked(
    hex_secret: str,
    total_shares: int,
    required_shares: int,
    pad_length: int = DEFAULT_PAD_LENGTH,
) -> list[str]:
    """split() with a checksum appended to the secret."""
    return split(append_checksum(hex_secret), total_shares, required_shares, pad_length)


def combine_checked(shares: Iterable[str]) -> str:
    """combine() followed by checksum verification."""
    return strip_checksum(combine(shares))
