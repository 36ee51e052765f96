"""Value types for shares and split parameters."""

from __future__ import annotations

from dataclasses import dataclass

from shamir256.codec import MAX_PAD_LENGTH
from shamir256.errors import InvalidArgument, InvalidShare
from shamir256.field import FIELD_SIZE, MAX_SHARES

DEFAULT_PAD_LENGTH = 128


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Share:
    """One participant's fragment.

    Attributes:
        id: Share id, also the x-coordinate every chunk was evaluated at.
        payload: One y-value per secret chunk, most significant chunk first.
    """

    id: int
    payload: tuple[int, ...]

    def __post_init__(self) -> None:
        if not _is_int(self.id) or not 1 <= self.id <= MAX_SHARES:
            raise InvalidShare(
                f"Share id must be an integer in [1, {MAX_SHARES}], got {self.id!r}"
            )
        if not self.payload:
            raise InvalidShare("Share payload must not be empty")
        if any(not _is_int(y) or not 0 <= y < FIELD_SIZE for y in self.payload):
            raise InvalidShare(
                f"Share payload values must be integers in [0, {MAX_SHARES}]"
            )
        object.__setattr__(self, "payload", tuple(self.payload))

    @property
    def chunks(self) -> list[int]:
        """Payload in chunk order: index 0 is the least significant chunk."""
        return list(reversed(self.payload))


@dataclass(frozen=True)
class SplitConfig:
    """Validated parameters for one split.

    Attributes:
        total_shares: Number of shares to emit, n.
        required_shares: Threshold t needed to reconstruct.
        pad_length: Padded secret length is a multiple of this many bits.
    """

    total_shares: int
    required_shares: int
    pad_length: int = DEFAULT_PAD_LENGTH

    def __post_init__(self) -> None:
        if not _is_int(self.total_shares) or self.total_shares < 2:
            raise InvalidArgument(
                f"Number of shares must be an integer in [2, {MAX_SHARES}], "
                f"got {self.total_shares!r}"
            )
        if self.total_shares > MAX_SHARES:
            raise InvalidArgument(
                f"Number of shares must be an integer in [2, {MAX_SHARES}]. "
                f"To create {self.total_shares} shares, use at least "
                f"{self.total_shares.bit_length()} bits."
            )
        if not _is_int(self.required_shares) or self.required_shares < 2:
            raise InvalidArgument(
                f"Threshold must be an integer in [2, {MAX_SHARES}], "
                f"got {self.required_shares!r}"
            )
        if self.required_shares > MAX_SHARES:
            raise InvalidArgument(
                f"Threshold must be an integer in [2, {MAX_SHARES}]. "
                f"To use a threshold of {self.required_shares}, use at least "
                f"{self.required_shares.bit_length()} bits."
            )
        if self.required_shares > self.total_shares:
            raise InvalidArgument(
                f"Threshold {self.required_shares} must be <= the "
                f"{self.total_shares} shares to generate"
            )
        if not _is_int(self.pad_length) or not 0 <= self.pad_length <= MAX_PAD_LENGTH:
            raise InvalidArgument(
                f"Pad length must be an integer in [0, {MAX_PAD_LENGTH}], "
                f"got {self.pad_length!r}"
            )
