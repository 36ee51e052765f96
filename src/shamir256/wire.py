"""Text encoding of shares: two hex digits of id, then the hex payload."""

from __future__ import annotations

from dataclasses import dataclass

from shamir256.codec import HEX_DIGITS, hex_to_binary, split_to_bytes
from shamir256.errors import InvalidShare
from shamir256.field import MAX_SHARES
from shamir256.models import Share

ID_HEX_DIGITS = 2


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decode_share: exactly one of share and error is set."""

    share: Share | None = None
    error: InvalidShare | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_share(text: str) -> ParseResult:
    """Parse a share string without raising."""
    if not isinstance(text, str):
        return ParseResult(
            error=InvalidShare(f"Share must be a string, got {type(text).__name__}")
        )
    if len(text) <= ID_HEX_DIGITS or not HEX_DIGITS.issuperset(text):
        return ParseResult(error=InvalidShare(f"The share data provided is invalid: {text!r}"))

    share_id = int(text[:ID_HEX_DIGITS], 16)
    if not 1 <= share_id <= MAX_SHARES:
        return ParseResult(
            error=InvalidShare(
                f"Share id must be an integer in [1, {MAX_SHARES}], got {share_id}"
            )
        )

    chunks = split_to_bytes(hex_to_binary(text[ID_HEX_DIGITS:]))
    return ParseResult(share=Share(id=share_id, payload=tuple(reversed(chunks))))


def parse_share(text: str) -> Share:
    """Parse a share string, raising InvalidShare if it is malformed."""
    result = decode_share(text)
    if result.share is None:
        raise result.error or InvalidShare(f"The share data provided is invalid: {text!r}")
    return result.share


def format_share(share: Share) -> str:
    """Render a share as lowercase hex: id, then payload most significant chunk first."""
    return f"{share.id:02x}" + "".join(f"{y:02x}" for y in share.payload)
