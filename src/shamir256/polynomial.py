"""Random polynomials over GF(2^8) and their evaluation at share ids."""

from __future__ import annotations

import secrets
from collections.abc import Callable

import numpy as np

from shamir256.errors import EntropyExhausted
from shamir256.field import EXP, FIELD_BITS, LOG, MAX_SHARES, validate_element

RandomBytes = Callable[[int], bytes]

MAX_SAMPLING_ATTEMPTS = 64


def random_coefficient(
    random_bytes: RandomBytes = secrets.token_bytes,
    max_attempts: int = MAX_SAMPLING_ATTEMPTS,
) -> int:
    """Draw a uniform coefficient from [1, 255].

    Zero is rejected and redrawn. A source that yields only zeros for
    max_attempts draws raises EntropyExhausted instead of looping forever.
    """
    for _ in range(max_attempts):
        value = random_bytes(FIELD_BITS // 8)[0]
        if value != 0:
            return value
    raise EntropyExhausted(
        f"Random source returned zero {max_attempts} times in a row"
    )


def random_polynomial(
    constant: int,
    degree: int,
    random_bytes: RandomBytes = secrets.token_bytes,
) -> list[int]:
    """Coefficients [a_0, a_1, ..., a_degree] with a_0 = constant."""
    return [validate_element(constant)] + [
        random_coefficient(random_bytes) for _ in range(degree)
    ]


def evaluate(coefficients: list[int], x: int) -> int:
    """Evaluate a polynomial (lowest degree first) at x with Horner's scheme.

    Each step multiplies the accumulator by x in log space. A zero
    accumulator has no logarithm, so it just takes the next coefficient.
    """
    if x == 0:
        return coefficients[0]

    log_x = LOG[x]
    fx = 0
    for c in reversed(coefficients):
        if fx != 0:
            fx = int(EXP[(log_x + LOG[fx]) % MAX_SHARES]) ^ c
        else:
            fx = c
    return fx


def evaluate_many(coefficients: list[int], xs: np.ndarray) -> np.ndarray:
    """Vectorised evaluate() over an array of x values."""
    xs = np.asarray(xs, dtype=np.int64)
    log_x = LOG[xs]
    fx = np.zeros(xs.shape, dtype=np.int64)
    for c in reversed(coefficients):
        shifted = EXP[(log_x + LOG[fx]) % MAX_SHARES]
        fx = np.where(fx != 0, shifted, 0) ^ c
    return np.where(xs == 0, coefficients[0], fx)


def generate_points(
    secret_byte: int,
    total_shares: int,
    required_shares: int,
    random_bytes: RandomBytes = secrets.token_bytes,
) -> list[tuple[int, int]]:
    """Hide one byte in a fresh polynomial of degree required_shares - 1.

    Returns the points (x, f(x)) for x = 1..total_shares. Every call draws
    new coefficients, so no two chunks of a secret share a polynomial.
    """
    coefficients = random_polynomial(secret_byte, required_shares - 1, random_bytes)
    xs = np.arange(1, total_shares + 1, dtype=np.int64)
    ys = evaluate_many(coefficients, xs)
    return [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)]
