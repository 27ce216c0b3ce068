"""
shamir256 — Shamir's Secret Sharing over GF(2^8)
Split a byte secret into N shares; any K of them reconstruct it exactly.

Each secret byte is shared with its own random polynomial over GF(2^8).
Field arithmetic runs on log/exp tables, with the zero cases masked in
constant time so secret-derived values never drive a branch.

Usage:
    from shamir256 import split, reconstruct
    shares = split(b"my secret", parts=5, threshold=3)
    assert reconstruct(shares[:3]) == b"my secret"
"""

from shamir256.shamir import split, reconstruct, verify_shares
from shamir256.errors import (
    ShamirError,
    InvalidArgumentError,
    InvariantViolation,
    FieldDivisionByZero,
    DuplicateShareError,
    UndefinedBehaviorError,
    RandomSourceError,
)

__version__ = "0.1.0"
__all__ = [
    "split",
    "reconstruct",
    "verify_shares",
    "ShamirError",
    "InvalidArgumentError",
    "InvariantViolation",
    "FieldDivisionByZero",
    "DuplicateShareError",
    "UndefinedBehaviorError",
    "RandomSourceError",
]
