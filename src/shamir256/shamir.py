"""Shamir's (n, t)-threshold secret sharing of hex secrets over GF(2^8).

A secret is prefixed with a single marker bit, zero-padded to a multiple of
pad_length bits and cut into bytes. Every byte gets its own random
polynomial; share i holds f(i) for all of them. t shares reconstruct the
secret; fewer reveal nothing.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Iterable

import numpy as np

from shamir256.codec import (
    MAX_PAD_LENGTH,
    binary_to_hex,
    hex_to_binary,
    join_bytes,
    split_to_bytes,
)
from shamir256.errors import InvalidArgument, InvalidInput, InvalidShare
from shamir256.interpolation import lagrange_columns
from shamir256.models import DEFAULT_PAD_LENGTH, Share, SplitConfig
from shamir256.polynomial import RandomBytes, generate_points
from shamir256.wire import format_share, parse_share

logger = logging.getLogger(__name__)

MARKER_BIT = "1"


class ShamirSecretSharing:
    """(n, t)-threshold secret sharing of hex strings over GF(2^8).

    Args:
        pad_length: Pad the marker-prefixed secret to a multiple of this many
            bits before splitting. Hides the length of short secrets.
        random_bytes: Source of coefficient entropy, called with a byte count.
    """

    def __init__(
        self,
        pad_length: int = DEFAULT_PAD_LENGTH,
        random_bytes: RandomBytes = secrets.token_bytes,
    ) -> None:
        if (
            not isinstance(pad_length, int)
            or isinstance(pad_length, bool)
            or not 0 <= pad_length <= MAX_PAD_LENGTH
        ):
            raise InvalidArgument(
                f"Pad length must be an integer in [0, {MAX_PAD_LENGTH}], got {pad_length!r}"
            )
        self.pad_length = pad_length
        self.random_bytes = random_bytes

    def split(self, secret: str, total_shares: int, required_shares: int) -> list[str]:
        """Split a hex secret into total_shares share strings, any required_shares of which rebuild it."""
        if not isinstance(secret, str):
            raise InvalidArgument(f"Secret must be a string, got {type(secret).__name__}")
        config = SplitConfig(total_shares, required_shares, self.pad_length)
        return [format_share(share) for share in self.split_to_shares(secret, config)]

    def split_to_shares(self, secret: str, config: SplitConfig) -> list[Share]:
        chunks = split_to_bytes(MARKER_BIT + hex_to_binary(secret), config.pad_length)
        logger.debug(
            "Splitting %d-byte padded secret into %d shares with threshold %d",
            len(chunks),
            config.total_shares,
            config.required_shares,
        )

        payloads: list[list[int]] = [[] for _ in range(config.total_shares)]
        # most significant chunk first, the order payloads are written in
        for chunk in reversed(chunks):
            points = generate_points(
                chunk, config.total_shares, config.required_shares, self.random_bytes
            )
            for x, y in points:
                payloads[x - 1].append(y)

        return [
            Share(id=x, payload=tuple(payload))
            for x, payload in enumerate(payloads, start=1)
        ]

    def combine(self, shares: Iterable[str]) -> str:
        """Rebuild the hex secret from share strings.

        With fewer than the threshold of distinct shares the result is
        garbage, not an error. Use the checksum helpers to detect that.
        """
        return self.reconstruct([parse_share(text) for text in shares])

    def reconstruct(self, shares: list[Share]) -> str:
        """Rebuild the hex secret from parsed shares. Repeated ids keep their first occurrence."""
        if not shares:
            raise InvalidArgument("Need at least one share to reconstruct")

        unique: dict[int, Share] = {}
        for share in shares:
            unique.setdefault(share.id, share)
        if len(unique) < len(shares):
            logger.info("Ignoring %d duplicate share(s)", len(shares) - len(unique))
        if len(unique) < 2:
            logger.warning(
                "Reconstructing from %d distinct share(s); the result is only "
                "correct if the threshold was that low",
                len(unique),
            )

        lengths = {len(share.payload) for share in unique.values()}
        if len(lengths) != 1:
            raise InvalidShare(
                f"Shares have different payload lengths: {sorted(lengths)}"
            )

        xs = list(unique)
        ys = np.array([share.chunks for share in unique.values()], dtype=np.int64)
        chunks = lagrange_columns(xs, ys)
        logger.debug("Interpolated %d chunks from %d shares", len(chunks), len(xs))

        bits = join_bytes(list(chunks))
        # zero padding ends at the marker bit; no marker means nothing to strip
        return binary_to_hex(bits[bits.find(MARKER_BIT) + 1 :])


def split(
    secret: str,
    total_shares: int,
    required_shares: int,
    pad_length: int = DEFAULT_PAD_LENGTH,
) -> list[str]:
    """Convenience: split a hex secret into share strings."""
    sss = ShamirSecretSharing(pad_length)
    return sss.split(secret, total_shares, required_shares)


def combine(shares: Iterable[str]) -> str:
    """Convenience: rebuild a hex secret from share strings."""
    return ShamirSecretSharing().combine(shares)


def split_bytes(
    data: bytes,
    total_shares: int,
    required_shares: int,
    pad_length: int = DEFAULT_PAD_LENGTH,
) -> list[str]:
    """Split raw bytes into share strings."""
    return split(bytes(data).hex(), total_shares, required_shares, pad_length)


def combine_bytes(shares: Iterable[str]) -> bytes:
    """Rebuild raw bytes from shares created by split_bytes."""
    secret = combine(shares)
    try:
        return bytes.fromhex(secret)
    except ValueError as exc:
        raise InvalidInput(
            f"Reconstructed secret has {len(secret)} hex digits, not whole bytes"
        ) from exc
