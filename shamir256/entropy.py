"""
Secure Randomness
Uniform bytes, bounded integers and random permutations from the OS CSPRNG.

Every function takes an optional rng with the random.Random interface so
tests can inject a seeded generator. Production callers leave it as None.
"""

import secrets

_SYSTEM_RANDOM = secrets.SystemRandom()


def rand_byte(rng=None) -> int:
    """Uniform random integer in [0, 255]."""
    return (rng or _SYSTEM_RANDOM).getrandbits(8)


def rand_int(n: int, rng=None) -> int:
    """Uniform random integer in [0, n]."""
    return (rng or _SYSTEM_RANDOM).randint(0, n)


def perm(n: int, rng=None) -> list[int]:
    """
    Random permutation of range(n) using inside-out Fisher-Yates.

    Split uses the first entries, plus one, as distinct non-zero
    x-coordinates for the shares.

    Args:
        n: Length of the permutation.
        rng: Optional random.Random instance for deterministic tests.

    Returns:
        List of n ints containing each of 0..n-1 exactly once.
    """
    m = [0] * n
    for i in range(n):
        j = rand_int(i, rng)
        m[i] = m[j]
        m[j] = i
    return m
