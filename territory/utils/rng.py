"""Seedable RNG wrapper for reproducible simulations."""

import random


class GameRNG:
    """Wrapper around Python's random.Random owned by a single game.

    All randomness in a simulation goes through its GameRNG so that two
    games built with the same seed replay identically and games running
    side by side never share a generator.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed, or None to seed from the operating system
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def jitter(self, bound: int) -> int:
        """Return a symmetric perturbation in [-bound, bound].

        Args:
            bound: Maximum absolute value of the perturbation

        Returns:
            Random integer between -bound and bound
        """
        return self.rng.randint(-bound, bound)

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def get_state(self):
        """Get the current state of the RNG."""
        return self.rng.getstate()

    def set_state(self, state):
        """Restore a state previously returned by get_state."""
        self.rng.setstate(state)
