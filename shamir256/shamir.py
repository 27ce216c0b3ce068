"""
Shamir's Secret Sharing
Split a secret into N shares where any K can reconstruct it.

Works byte by byte over GF(2^8): each secret byte is the intercept of its
own random polynomial of degree K-1. A share is the list of evaluations
of those polynomials at one x-coordinate, with that x-coordinate appended
as a trailing tag byte:

    [y_0, y_1, ..., y_{n-1}, x]

Fewer than K shares reveal nothing about the secret.
"""

import logging

from cryptography.hazmat.primitives import constant_time

from shamir256.entropy import perm
from shamir256.errors import (
    DuplicateShareError,
    InvalidArgumentError,
    RandomSourceError,
    ShamirError,
)
from shamir256.polynomial import (
    evaluate_polynomial,
    interpolate_polynomial,
    make_polynomial,
)

logger = logging.getLogger(__name__)

MIN_THRESHOLD = 2
# Both the threshold and the share count must fit in the single tag byte
MAX_SHARES = 255
# Accepted input types; bytes(n) on an int is n zero bytes, never a secret
_BYTES_LIKE = (bytes, bytearray, memoryview)


def split(secret: bytes, parts: int, threshold: int, rng=None) -> list[bytes]:
    """
    Split a secret into shares using Shamir's Secret Sharing.

    Args:
        secret: The secret bytes to split. Must not be empty.
        parts: Total shares to generate (N), threshold..255.
        threshold: Minimum shares needed to reconstruct (K), 2..255.
        rng: Optional random.Random instance for deterministic tests.

    Returns:
        List of N shares, each one byte longer than the secret.
        Any K of them reconstruct it.

    Raises:
        InvalidArgumentError: If parameters are invalid.
        RandomSourceError: If the random source fails.
    """
    if threshold < MIN_THRESHOLD:
        raise InvalidArgumentError("Threshold must be at least 2")
    if threshold > MAX_SHARES:
        raise InvalidArgumentError("Threshold cannot exceed 255")
    if parts < threshold:
        raise InvalidArgumentError("Parts cannot be less than threshold")
    if parts > MAX_SHARES:
        raise InvalidArgumentError("Parts cannot exceed 255")

    if not isinstance(secret, _BYTES_LIKE):
        raise InvalidArgumentError("Secret must be bytes")
    secret = bytes(secret)
    if not secret:
        raise InvalidArgumentError("Cannot split an empty secret")

    # Distinct x-coordinates in 1..255; zero is where the secret lives
    x_coordinates = [x + 1 for x in perm(MAX_SHARES, rng)[:parts]]

    # One row per share: {y_0, ..., y_{n-1}, x}
    secret_len = len(secret)
    out = [bytearray(secret_len + 1) for _ in range(parts)]
    for row, x in zip(out, x_coordinates):
        row[secret_len] = x

    for idx, byte in enumerate(secret):
        try:
            coefficients = make_polynomial(byte, threshold - 1, rng)
        except Exception as e:
            raise RandomSourceError(f"Failed to generate polynomial: {e}") from e

        for row, x in zip(out, x_coordinates):
            row[idx] = evaluate_polynomial(coefficients, x)

    logger.debug(
        f"Split {secret_len}-byte secret into {parts} shares (threshold {threshold})"
    )
    return [bytes(row) for row in out]


def reconstruct(shares: list[bytes]) -> bytes:
    """
    Reconstruct a secret from K or more shares using Lagrange interpolation.

    Shares may be given in any order. Passing fewer than K shares does not
    fail; it yields unrelated bytes.

    Args:
        shares: Shares produced by a single split call.

    Returns:
        The reconstructed secret bytes.

    Raises:
        InvalidArgumentError: If the shares are too few or malformed.
        DuplicateShareError: If two shares carry the same x-coordinate.
    """
    if len(shares) < 2:
        raise InvalidArgumentError(
            "Less than two parts cannot be used to reconstruct the secret"
        )

    for share in shares:
        if not isinstance(share, _BYTES_LIKE):
            raise InvalidArgumentError("Parts must be bytes")

    share_len = len(shares[0])
    if share_len < 2:
        raise InvalidArgumentError("Parts must be at least two bytes")

    rows = []
    for share in shares:
        row = bytes(share)
        if len(row) != share_len:
            raise InvalidArgumentError("All parts must be the same length")
        rows.append(row)

    # Duplicate x samples would make div() divide by zero
    x_samples = []
    seen = set()
    for row in rows:
        x = row[share_len - 1]
        if x in seen:
            raise DuplicateShareError("Duplicate part detected")
        seen.add(x)
        x_samples.append(x)

    secret = bytearray(share_len - 1)
    for idx in range(share_len - 1):
        y_samples = [row[idx] for row in rows]
        secret[idx] = interpolate_polynomial(x_samples, y_samples, 0)

    logger.debug(f"Reconstructed {len(secret)}-byte secret from {len(rows)} shares")
    return bytes(secret)


def verify_shares(shares: list[bytes], secret: bytes) -> bool:
    """Verify that a set of shares correctly reconstructs the secret."""
    if not isinstance(secret, _BYTES_LIKE):
        raise InvalidArgumentError("Secret must be bytes")
    try:
        reconstructed = reconstruct(shares)
    except ShamirError:
        return False
    return constant_time.bytes_eq(reconstructed, bytes(secret))
