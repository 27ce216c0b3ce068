"""
Tests for the secure random helpers and the permutation generator.
"""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir256.entropy import perm, rand_byte, rand_int


def test_rand_byte_in_range():
    for _ in range(200):
        assert 0 <= rand_byte() <= 255


def test_rand_int_inclusive_bounds():
    rng = random.Random(42)
    values = {rand_int(3, rng) for _ in range(200)}
    assert values == {0, 1, 2, 3}
    assert rand_int(0) == 0


def test_perm_is_permutation():
    for n in (0, 1, 2, 10, 255):
        assert sorted(perm(n)) == list(range(n))


def test_perm_seeded_reproducible():
    assert perm(255, random.Random(5)) == perm(255, random.Random(5))


def test_perm_not_constant():
    """Different calls produce different orders (with high probability)."""
    orders = {tuple(perm(255)) for _ in range(5)}
    assert len(orders) > 1


def test_perm_first_position_roughly_uniform():
    """Each value of perm(4) lands in slot 0 about a quarter of the time."""
    rng = random.Random(1234)
    counts = [0] * 4
    trials = 4000
    for _ in range(trials):
        counts[perm(4, rng)[0]] += 1
    for count in counts:
        assert 800 < count < 1200
