"""GF(2^8) arithmetic over the reduction polynomial x^8 + x^4 + x^3 + x^2 + 1.

Multiplication and division go through exponent/logarithm tables that are
built once at import. The tables are read-only numpy arrays, so every thread
can share them without locking.
"""

from __future__ import annotations

import numpy as np

from shamir256.errors import InvalidInput

FIELD_BITS = 8
FIELD_SIZE = 1 << FIELD_BITS
MAX_SHARES = FIELD_SIZE - 1  # also the order of the multiplicative group
PRIMITIVE_POLY = 0x11D


def _build_tables() -> tuple[np.ndarray, np.ndarray]:
    """Powers of the generator 2 and their discrete logarithms.

    EXP[i] = 2^i for i in [0, 255). LOG[EXP[i]] = i. LOG[0] has no meaning
    and is left at 0; callers must test for a zero operand first.
    """
    exp = np.zeros(MAX_SHARES, dtype=np.int64)
    log = np.zeros(FIELD_SIZE, dtype=np.int64)

    x = 1
    for i in range(MAX_SHARES):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x & FIELD_SIZE:
            x ^= PRIMITIVE_POLY

    exp.flags.writeable = False
    log.flags.writeable = False
    return exp, log


EXP, LOG = _build_tables()


def validate_element(value: int) -> int:
    """Return value as a plain int, or raise InvalidInput if it is not in GF(2^8)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInput(f"Field element must be an integer, got {value!r}")
    if not 0 <= value < FIELD_SIZE:
        raise InvalidInput(f"Field element must be in [0, {MAX_SHARES}], got {value}")
    return int(value)


def add(a: int, b: int) -> int:
    """a + b in GF(2^8)."""
    return a ^ b


def sub(a: int, b: int) -> int:
    """a - b in GF(2^8). Identical to addition in characteristic 2."""
    return a ^ b


def mul(a: int, b: int) -> int:
    """a * b in GF(2^8)."""
    if a == 0 or b == 0:
        return 0
    return int(EXP[(LOG[a] + LOG[b]) % MAX_SHARES])


def div(a: int, b: int) -> int:
    """a / b in GF(2^8)."""
    if b == 0:
        raise ZeroDivisionError("Cannot divide by zero in GF(2^8)")
    if a == 0:
        return 0
    return int(EXP[(LOG[a] - LOG[b]) % MAX_SHARES])


def mul_array(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Element-wise GF(2^8) product of two broadcastable integer arrays."""
    a = np.asarray(a, dtype=np.int64)
    b = np.asarray(b, dtype=np.int64)
    product = EXP[(LOG[a] + LOG[b]) % MAX_SHARES]
    return np.where((a == 0) | (b == 0), 0, product)
