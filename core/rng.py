"""Seedable PRNG behind the random coefficient generators.

Call set_seed(n) before generating benchmark operands or randomized test data
to make runs reproducible. Default (no seed) draws from os.urandom.
"""

import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses the OS entropy source."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = _random.SystemRandom()

    @property
    def seed(self):
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def random(self) -> float:
        return self._rng.random()


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = OS randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def get_seed() -> int | None:
    return _global_rng.seed


def uniform(a: float, b: float) -> float:
    return _global_rng.uniform(a, b)


def random() -> float:
    return _global_rng.random()
