"""Base generator class with seeded RNG."""

import random
from typing import Any

import numpy as np


class BaseGenerator:
    def __init__(self, config: dict[str, Any] | None = None, seed: int = 42):
        self.config = config or {}
        self.seed = seed
        self._rng = random.Random(seed)
        self._np_rng = np.random.default_rng(seed)

    def _digits(self, count: int) -> str:
        """Random decimal digit string of the given length."""
        return "".join(str(self._rng.randrange(10)) for _ in range(count))

    def _choice(self, options: list[str]) -> str:
        return self._rng.choice(options)
