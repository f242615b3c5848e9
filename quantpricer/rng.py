"""Seedable source of normal, uniform, Poisson and gamma variates."""

from __future__ import annotations

import numpy as np


class RNG:
    """Pseudo-random generator with a fixed seed or an OS-provided one."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def randn(self) -> float:
        """Draw from the standard normal distribution N(0, 1)."""
        return float(self._gen.standard_normal())

    def randu(self) -> float:
        """Draw from the uniform distribution on [0, 1)."""
        return float(self._gen.random())

    def poisson(self, lam: float) -> int:
        """Draw from a Poisson distribution with mean ``lam``."""
        if lam < 0:
            raise ValueError(f"Poisson mean must be non-negative, got {lam}")
        return int(self._gen.poisson(lam))

    def gamma(self, shape: float, scale: float) -> float:
        """Draw from a gamma distribution with the given shape and scale."""
        if shape < 0:
            raise ValueError(f"gamma shape must be non-negative, got {shape}")
        if scale < 0:
            raise ValueError(f"gamma scale must be non-negative, got {scale}")
        return float(self._gen.gamma(shape, scale))