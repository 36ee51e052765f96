"""Shamir (t, n) threshold secret sharing over GF(2^8).

Hex secrets are split into hex share strings; any t shares rebuild the
secret, fewer reveal nothing about it.
"""

__version__ = "0.1.0"
