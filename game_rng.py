from __future__ import annotations

"""GameRNG: the random source used by layout generation.

A thin wrapper over ``numpy.random.default_rng`` exposing the handful of
helpers the generator needs.  When no seed is given one is drawn from the
process-wide :mod:`random` state, so every unseeded instance produces a
different stream.
"""

import random
from typing import Any, List, Optional, Union

import numpy as np


class GameRNG:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.initial_seed = seed if seed is not None else random.randint(0, 2**32 - 1)
        self.rng = np.random.default_rng(self.initial_seed)

    # ------------------------------------------------------------------
    # basic random helpers
    # ------------------------------------------------------------------
    def get_int(self, a: int, b: int) -> int:
        """Return an integer in ``[a, b]`` (both ends inclusive)."""
        if a > b:
            raise ValueError("a <= b")
        return int(self.rng.integers(a, b + 1))

    def get_float(self, a: float = 0.0, b: float = 1.0) -> float:
        if a > b:
            raise ValueError("a <= b")
        return a + (b - a) * float(self.rng.random())

    # ------------------------------------------------------------------
    # sequence utilities
    # ------------------------------------------------------------------
    def shuffle(self, seq: List[Any]) -> None:
        self.rng.shuffle(seq)

    def coin_flip(
        self, num_flips: int = 1, heads_probability: float = 0.5
    ) -> Union[str, List[str]]:
        if not 0.0 <= heads_probability <= 1.0:
            raise ValueError("probability out of range")
        results = [
            "heads" if self.get_float() < heads_probability else "tails"
            for _ in range(num_flips)
        ]
        return results[0] if num_flips == 1 else results


__all__ = ["GameRNG"]
