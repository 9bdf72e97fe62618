"""Deterministic PRNG for reproducible corruption patterns.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses OS randomness.
"""

import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses OS randomness."""

    def __init__(self, seed=None):
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = _random.SystemRandom()

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)

    def sample(self, population, k: int) -> list:
        return self._rng.sample(list(population), k)


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = OS randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def sample(population, k: int) -> list:
    """k distinct items drawn from population."""
    return _global_rng.sample(population, k)
