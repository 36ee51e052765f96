"""Monte Carlo check of the threshold property.

Splits random secrets, reconstructs from random share subsets of a chosen
size and compares the interpolated bytes with the padded secret. Subsets at
or above the threshold must always recover it. Smaller subsets should match
about as often as guessing (1/256 per byte); exactly one share short never
matches, since the top coefficient is never zero.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np
from scipy.stats import binomtest

from shamir256.codec import hex_to_binary, split_to_bytes
from shamir256.errors import InvalidArgument
from shamir256.field import FIELD_SIZE
from shamir256.interpolation import lagrange_columns
from shamir256.models import DEFAULT_PAD_LENGTH, SplitConfig
from shamir256.shamir import MARKER_BIT, ShamirSecretSharing

logger = logging.getLogger(__name__)

CHANCE_RATE = 1 / FIELD_SIZE


@dataclass
class SimulationResult:
    """Aggregated results from a Monte Carlo run.

    Attributes:
        n_trials: Number of trials.
        subset_size: Shares used per reconstruction.
        n_recovered: Trials where the exact secret came back.
        recovery_rate: Empirical P[exact recovery].
        byte_match_rate: Fraction of padded-secret bytes interpolated correctly.
        expected_byte_rate: Match rate expected from guessing, 1/256.
        p_value: Two-sided binomial test of byte matches against chance.
    """

    n_trials: int
    subset_size: int
    n_recovered: int
    recovery_rate: float
    byte_match_rate: float
    expected_byte_rate: float
    p_value: float


@dataclass
class TrialOutcome:
    """Outcome of a single trial."""

    secret: str
    reconstructed: str
    share_ids: list[int]
    matching_bytes: int
    total_bytes: int

    @property
    def recovered(self) -> bool:
        return self.reconstructed == self.secret


class ThresholdSimulator:
    """Monte Carlo engine for threshold recovery statistics.

    The seeded RNG drives secrets, subset choice and polynomial coefficients,
    so runs are reproducible. It is not a cryptographic source; never use
    this class to produce real shares.

    Args:
        total_shares: Shares per split, n.
        required_shares: Threshold t.
        secret_bytes: Length of the random secrets.
        pad_length: Padding passed to the splitter.
        seed: RNG seed for reproducibility.
    """

    def __init__(
        self,
        total_shares: int,
        required_shares: int,
        secret_bytes: int = 16,
        pad_length: int = DEFAULT_PAD_LENGTH,
        seed: int | None = None,
    ) -> None:
        self.config = SplitConfig(total_shares, required_shares, pad_length)
        self.secret_bytes = secret_bytes
        self.rng = random.Random(seed)
        self.sss = ShamirSecretSharing(pad_length, random_bytes=self.rng.randbytes)

    def simulate_trial(self, subset_size: int, secret: str | None = None) -> TrialOutcome:
        """Split one secret and reconstruct it from a random subset of shares.

        Args:
            subset_size: Number of distinct shares to reconstruct from.
            secret: Hex secret to split (random if None).
        """
        if not 1 <= subset_size <= self.config.total_shares:
            raise InvalidArgument(
                f"subset_size must be in [1, {self.config.total_shares}], got {subset_size}"
            )
        if secret is None:
            secret = self.rng.randbytes(self.secret_bytes).hex()
        secret = secret.lower()

        shares = self.sss.split_to_shares(secret, self.config)
        subset = self.rng.sample(shares, subset_size)

        expected = np.array(
            split_to_bytes(MARKER_BIT + hex_to_binary(secret), self.config.pad_length)
        )
        interpolated = lagrange_columns(
            [share.id for share in subset],
            np.array([share.chunks for share in subset]),
        )

        return TrialOutcome(
            secret=secret,
            reconstructed=self.sss.reconstruct(subset),
            share_ids=sorted(share.id for share in subset),
            matching_bytes=int(np.sum(interpolated == expected)),
            total_bytes=len(expected),
        )

    def run(self, subset_size: int, n_trials: int = 1000) -> SimulationResult:
        """Run n_trials trials and aggregate them."""
        n_recovered = 0
        matching = 0
        total = 0

        for _ in range(n_trials):
            outcome = self.simulate_trial(subset_size)
            if outcome.recovered:
                n_recovered += 1
            matching += outcome.matching_bytes
            total += outcome.total_bytes

        p_value = binomtest(matching, total, CHANCE_RATE).pvalue if total else 1.0
        logger.debug(
            "subset_size=%d: %d/%d recovered, %d/%d bytes matched",
            subset_size,
            n_recovered,
            n_trials,
            matching,
            total,
        )

        return SimulationResult(
            n_trials=n_trials,
            subset_size=subset_size,
            n_recovered=n_recovered,
            recovery_rate=n_recovered / n_trials,
            byte_match_rate=matching / total if total else 0.0,
            expected_byte_rate=CHANCE_RATE,
            p_value=float(p_value),
        )
