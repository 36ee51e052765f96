"""Exception hierarchy for argument, input and share failures."""

from __future__ import annotations


class ShamirError(ValueError):
    """Base class for every rejected argument, string or share."""


class InvalidArgument(ShamirError):
    """Share counts, threshold or pad length out of range or wrong type."""


class InvalidConfiguration(InvalidArgument):
    """Padding width outside what a single configuration supports."""


class InvalidInput(ShamirError):
    """Malformed hex or binary string, or a value outside GF(2^8)."""


class InvalidShare(ShamirError):
    """Share string that cannot be parsed or does not fit with its peers."""


class ChecksumMismatch(ShamirError):
    """Reconstructed secret failed its checksum: insufficient or corrupted shares."""


class EntropyExhausted(RuntimeError):
    """The random source kept returning zero coefficients."""
