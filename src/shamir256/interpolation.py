"""Lagrange interpolation at x = 0 over GF(2^8).

For points (x_i, y_i) the value at zero is

    f(0) = sum_i y_i * prod_{j != i} x_j / (x_i - x_j)

and in characteristic 2 subtraction is XOR. Products and quotients are sums
and differences of logarithms mod 255.

Fewer points than the polynomial's degree + 1 still produce a byte, just
not the right one. Nothing here can tell the difference.
"""

from __future__ import annotations

import numpy as np

from shamir256.errors import InvalidArgument
from shamir256.field import EXP, LOG, MAX_SHARES


def _check_xs(xs: list[int]) -> None:
    if len(set(xs)) != len(xs):
        raise InvalidArgument("Duplicate x-coordinates in interpolation points")
    if any(not 1 <= x <= MAX_SHARES for x in xs):
        raise InvalidArgument(f"x-coordinates must be in [1, {MAX_SHARES}]")


def lagrange_at_zero(xs: list[int], ys: list[int]) -> int:
    """Recover f(0) from parallel lists of distinct x and matching y values."""
    if len(xs) != len(ys):
        raise InvalidArgument(
            f"xs and ys must have the same length, got {len(xs)} and {len(ys)}"
        )
    _check_xs(xs)

    total = 0
    for i, (xi, yi) in enumerate(zip(xs, ys, strict=True)):
        if yi == 0:
            continue
        product = LOG[yi]
        for j, xj in enumerate(xs):
            if i != j:
                product = (product + LOG[xj] - LOG[xi ^ xj] + MAX_SHARES) % MAX_SHARES
        total ^= int(EXP[product])
    return total


def lagrange_columns(xs: list[int], ys: np.ndarray) -> np.ndarray:
    """lagrange_at_zero for many polynomials sampled at the same xs.

    Args:
        xs: Distinct share ids, one per row of ys.
        ys: 2-D array, ys[i, c] = f_c(xs[i]).

    Returns:
        1-D array with f_c(0) for every column c.
    """
    ys = np.asarray(ys, dtype=np.int64)
    if ys.ndim != 2 or ys.shape[0] != len(xs):
        raise InvalidArgument(
            f"ys must be a 2-D array with one row per x, got shape {ys.shape}"
        )
    _check_xs(xs)

    x = np.asarray(xs, dtype=np.int64)
    # log of prod_{j != i} x_j / (x_i ^ x_j), one weight per row
    terms = LOG[x][np.newaxis, :] - LOG[x[:, np.newaxis] ^ x[np.newaxis, :]]
    np.fill_diagonal(terms, 0)
    weights = terms.sum(axis=1) % MAX_SHARES

    contributions = EXP[(LOG[ys] + weights[:, np.newaxis]) % MAX_SHARES]
    contributions = np.where(ys != 0, contributions, 0)
    return np.bitwise_xor.reduce(contributions, axis=0)
