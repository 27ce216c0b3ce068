"""
shamir256 — Basic Usage Example

Splits a secret into 5 shares with a threshold of 3, prints them
base64-encoded, then recovers the secret from 3 shares picked at random.
How shares are encoded for storage or transport is up to the caller.
"""

import base64
import random
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir256 import split, reconstruct


def main():
    secret = b"Some super secret"
    parts = 5
    threshold = 3

    print("=" * 50)
    print(f"  Shamir's Secret Sharing ({threshold}-of-{parts})")
    print("=" * 50)

    shares = split(secret, parts, threshold)

    print("\nBase64 encoded shares:")
    for idx, share in enumerate(shares):
        print(f"  {idx}: {base64.b64encode(share).decode()}")

    # Order carries no meaning; each share is tagged with its own x-coordinate
    random.shuffle(shares)
    recovered = reconstruct(shares[:threshold])

    print(f"\nRecovered: {recovered.decode()}")
    assert recovered == secret


if __name__ == "__main__":
    main()
