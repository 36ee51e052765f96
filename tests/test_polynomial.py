"""Tests for shamir256.polynomial module."""

from __future__ import annotations

import itertools
import random

import numpy as np
import pytest

from shamir256.errors import EntropyExhausted, InvalidInput
from shamir256.field import mul
from shamir256.interpolation import lagrange_at_zero
from shamir256.polynomial import (
    MAX_SAMPLING_ATTEMPTS,
    evaluate,
    evaluate_many,
    generate_points,
    random_coefficient,
    random_polynomial,
)


def naive_evaluate(coefficients: list[int], x: int) -> int:
    result = 0
    power = 1
    for c in coefficients:
        result ^= mul(c, power)
        power = mul(power, x)
    return result


class CountingSource:
    """Byte source that replays a fixed sequence and counts calls."""

    def __init__(self, values: list[int]) -> None:
        self._values = iter(values)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        return bytes(next(self._values) for _ in range(n))


class TestRandomCoefficient:
    def test_skips_zero(self):
        source = CountingSource([0, 0, 42])
        assert random_coefficient(source) == 42
        assert source.calls == 3

    def test_never_zero(self, rng: random.Random):
        values = [random_coefficient(rng.randbytes) for _ in range(5000)]
        assert min(values) >= 1
        assert max(values) <= 255

    def test_gives_up_on_degenerate_source(self):
        with pytest.raises(EntropyExhausted):
            random_coefficient(lambda n: bytes(n))

    def test_attempt_cap(self):
        source = CountingSource([0] * 10 + [9])
        with pytest.raises(EntropyExhausted, match="3 times"):
            random_coefficient(source, max_attempts=3)
        assert source.calls == 3

    def test_default_cap_reachable(self):
        source = CountingSource([0] * (MAX_SAMPLING_ATTEMPTS - 1) + [1])
        assert random_coefficient(source) == 1


class TestRandomPolynomial:
    def test_shape(self, rng: random.Random):
        coeffs = random_polynomial(99, 4, rng.randbytes)
        assert len(coeffs) == 5
        assert coeffs[0] == 99
        assert all(1 <= c <= 255 for c in coeffs[1:])

    def test_invalid_constant(self, rng: random.Random):
        with pytest.raises(InvalidInput):
            random_polynomial(256, 2, rng.randbytes)


class TestEvaluate:
    def test_linear(self):
        # 5 + 3x at x = 2 -> 5 ^ 6
        assert evaluate([5, 3], 2) == 3

    def test_at_zero_is_constant(self):
        assert evaluate([17, 200, 3], 0) == 17

    def test_zero_accumulator(self):
        # leading coefficient 0 leaves the accumulator empty for one step
        assert evaluate([4, 7, 0], 9) == naive_evaluate([4, 7, 0], 9)

    def test_matches_naive(self, rng: random.Random):
        for degree in range(0, 8):
            coeffs = [rng.randrange(256) for _ in range(degree + 1)]
            for x in range(1, 256):
                assert evaluate(coeffs, x) == naive_evaluate(coeffs, x)

    def test_evaluate_many_matches_scalar(self, rng: random.Random):
        coeffs = [rng.randrange(256) for _ in range(6)]
        xs = np.arange(0, 256)
        expected = [evaluate(coeffs, int(x)) for x in xs]
        np.testing.assert_array_equal(evaluate_many(coeffs, xs), expected)


class TestGeneratePoints:
    def test_x_values(self, rng: random.Random):
        points = generate_points(200, 7, 3, rng.randbytes)
        assert [x for x, _ in points] == list(range(1, 8))
        assert all(0 <= y <= 255 for _, y in points)

    def test_any_threshold_subset_recovers_byte(self, rng: random.Random):
        points = generate_points(123, 6, 4, rng.randbytes)
        for subset in itertools.combinations(points, 4):
            xs, ys = zip(*subset)
            assert lagrange_at_zero(list(xs), list(ys)) == 123

    def test_fresh_coefficients_per_call(self):
        source = CountingSource(list(range(1, 200)))
        first = generate_points(0, 5, 3, source)
        second = generate_points(0, 5, 3, source)
        assert source.calls == 4
        assert first != second
