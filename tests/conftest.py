"""Shared test fixtures for the shamir256 test suite."""

from __future__ import annotations

import random

import pytest

from shamir256.shamir import ShamirSecretSharing


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so failures are reproducible."""
    return random.Random(20240611)


@pytest.fixture
def sss(rng: random.Random) -> ShamirSecretSharing:
    """Splitter drawing coefficients from the seeded RNG."""
    return ShamirSecretSharing(random_bytes=rng.randbytes)


@pytest.fixture
def secret_hex() -> str:
    """'shamir' in hex."""
    return "7368616d6972"


def _schoolbook_mul(a: int, b: int, poly: int = 0x11D) -> int:
    """Carry-less multiply with reduction, one bit at a time."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & 0x100:
            a ^= poly
    return result


@pytest.fixture
def schoolbook_mul():
    """Reference GF(2^8) multiplication that does not use the log tables."""
    return _schoolbook_mul
