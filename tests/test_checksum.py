"""Tests for shamir256.checksum module."""

from __future__ import annotations

import hashlib

import pytest

from shamir256.checksum import (
    CHECKSUM_LENGTH,
    append_checksum,
    combine_checked,
    compute_checksum,
    split_checked,
    strip_checksum,
)
from shamir256.errors import ChecksumMismatch, InvalidArgument, InvalidInput


class TestChecksum:
    def test_matches_sha256_tail(self):
        expected = hashlib.sha256(b"68656c6c6f").hexdigest()[56:]
        assert compute_checksum("68656c6c6f") == expected
        assert len(expected) == CHECKSUM_LENGTH

    def test_case_insensitive(self):
        assert compute_checksum("ABCD") == compute_checksum("abcd")

    def test_append_and_strip(self):
        checked = append_checksum("cafe")
        assert checked.startswith("cafe")
        assert len(checked) == 4 + CHECKSUM_LENGTH
        assert strip_checksum(checked) == "cafe"

    def test_empty_secret(self):
        assert strip_checksum(append_checksum("")) == ""

    def test_tampered(self):
        checked = append_checksum("cafe")
        tampered = "cafd" + checked[4:]
        with pytest.raises(ChecksumMismatch, match="not enough shares"):
            strip_checksum(tampered)

    def test_too_short(self):
        with pytest.raises(ChecksumMismatch):
            strip_checksum("abc")


class TestCheckedSharing:
    def test_round_trip(self, secret_hex: str):
        shares = split_checked(secret_hex, 5, 3)
        assert combine_checked(shares[:3]) == secret_hex

    def test_insufficient_shares_detected(self, secret_hex: str):
        shares = split_checked(secret_hex, 5, 3)
        with pytest.raises(ChecksumMismatch):
            combine_checked(shares[:2])

    def test_uppercase_secret(self):
        shares = split_checked("CAFE", 3, 2)
        assert combine_checked(shares[:2]) == "cafe"

    @pytest.mark.parametrize("secret", ["é", "zz", "12 34"])
    def test_non_hex_secret(self, secret: str):
        with pytest.raises(InvalidInput):
            split_checked(secret, 3, 2)

    def test_non_string_secret(self):
        with pytest.raises(InvalidArgument, match="must be a string"):
            split_checked(1234, 3, 2)  # type: ignore[arg-type]
