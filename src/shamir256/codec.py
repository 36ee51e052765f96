"""Conversions between hex strings, bit strings and GF(2^8) byte chunks.

Bit strings are plain ``str`` objects of '0'/'1' characters, most
significant bit first. Chunk lists run the other way: index 0 holds the
last (least significant) 8 bits of the bit string.
"""

from __future__ import annotations

from shamir256.errors import InvalidConfiguration, InvalidInput
from shamir256.field import FIELD_BITS

MAX_PAD_LENGTH = 1024
NIBBLE_BITS = 4

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BINARY_DIGITS = frozenset("01")


def hex_to_binary(hex_string: str) -> str:
    """Expand every hex digit into 4 bits, keeping leading zeros."""
    bad = set(hex_string) - HEX_DIGITS
    if bad:
        raise InvalidInput(f"Invalid hex character(s): {''.join(sorted(bad))!r}")
    return "".join(format(int(digit, 16), "04b") for digit in hex_string)


def binary_to_hex(bit_string: str) -> str:
    """Left-pad to whole nibbles and render one lowercase hex digit per nibble."""
    bad = set(bit_string) - BINARY_DIGITS
    if bad:
        raise InvalidInput(f"Invalid binary character(s): {''.join(sorted(bad))!r}")
    bit_string = pad_left(bit_string, NIBBLE_BITS)
    return "".join(
        format(int(bit_string[i : i + NIBBLE_BITS], 2), "x")
        for i in range(0, len(bit_string), NIBBLE_BITS)
    )


def pad_left(bit_string: str, width: int = FIELD_BITS) -> str:
    """Zero-pad on the left up to the next multiple of width.

    ex. ('1001', 7) -> '0001001'
        ('11010', 4) -> '00011010'
        ('10', 10) -> '0000000010'

    Widths 0 and 1 leave the string untouched.
    """
    if width < 0 or width > MAX_PAD_LENGTH:
        raise InvalidConfiguration(
            f"Padding width must be in [0, {MAX_PAD_LENGTH}] bits, got {width}"
        )
    if width in (0, 1):
        return bit_string

    remainder = len(bit_string) % width
    if remainder:
        return "0" * (width - remainder) + bit_string
    return bit_string


def split_to_bytes(bit_string: str, pad_width: int | None = None) -> list[int]:
    """Cut a bit string into byte chunks, least significant chunk first.

    The string is optionally padded to a multiple of pad_width first. A
    leftover head shorter than 8 bits is read as a zero-extended byte, so
    the chunks always describe the byte-aligned string.
    """
    bad = set(bit_string) - BINARY_DIGITS
    if bad:
        raise InvalidInput(f"Invalid binary character(s): {''.join(sorted(bad))!r}")
    if pad_width:
        bit_string = pad_left(bit_string, pad_width)
    bit_string = pad_left(bit_string, FIELD_BITS)

    return [
        int(bit_string[i - FIELD_BITS : i], 2)
        for i in range(len(bit_string), 0, -FIELD_BITS)
    ]


def join_bytes(chunks: list[int]) -> str:
    """Inverse of split_to_bytes: 8 bits per chunk, most significant chunk first."""
    return "".join(format(int(chunk), "08b") for chunk in reversed(chunks))
