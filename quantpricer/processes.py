"""Stochastic processes with path simulation, drift and diffusion."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from .rng import RNG


def _simulate(
    x0: float, maturity: float, steps: int, step: Callable[[float, float], float]
) -> list[float]:
    """Build a path of ``steps + 1`` points, advancing with ``step(x, dt)``."""
    if steps < 0:
        raise ValueError(f"number of steps must be non-negative, got {steps}")
    path = [x0]
    if steps == 0:
        return path
    dt = maturity / steps
    x = x0
    for _ in range(steps):
        x = step(x, dt)
        path.append(x)
    return path


class StochasticProcess(ABC):
    """A one-dimensional diffusion dX = drift(t, X) dt + diffusion(t, X) dW."""

    @abstractmethod
    def simulate_path(
        self, x0: float, maturity: float, steps: int, rng: RNG | None = None
    ) -> list[float]:
        """Simulate ``steps`` equal steps over ``[0, maturity]`` starting at ``x0``."""

    @abstractmethod
    def drift(self, t: float, x: float) -> float:
        """Drift coefficient at time ``t`` and state ``x``."""

    @abstractmethod
    def diffusion(self, t: float, x: float) -> float:
        """Diffusion coefficient at time ``t`` and state ``x``."""


@dataclass(frozen=True)
class GeometricBrownianMotion(StochasticProcess):
    """dS = mu S dt + sigma S dW, simulated exactly in log space."""

    mu: float
    sigma: float

    def simulate_path(self, x0, maturity, steps, rng=None):
        rng = rng or RNG()

        def step(s: float, dt: float) -> float:
            z = rng.randn()
            drift = (self.mu - 0.5 * self.sigma**2) * dt
            return s * math.exp(drift + self.sigma * math.sqrt(dt) * z)

        return _simulate(x0, maturity, steps, step)

    def drift(self, t, x):
        return self.mu * x

    def diffusion(self, t, x):
        return self.sigma * x


def _mean_reverting_step(
    kappa: float, theta: float, sigma: float, rng: RNG
) -> Callable[[float, float], float]:
    """Exact Gaussian transition of dX = kappa (theta - X) dt + sigma dW."""

    def step(x: float, dt: float) -> float:
        z = rng.randn()
        mean = theta + (x - theta) * math.exp(-kappa * dt)
        variance = sigma**2 * (1.0 - math.exp(-2.0 * kappa * dt)) / (2.0 * kappa)
        return mean + math.sqrt(variance) * z

    return step


@dataclass(frozen=True)
class Vasicek(StochasticProcess):
    """Vasicek short rate: dr = kappa (theta - r) dt + sigma dW."""

    kappa: float
    theta: float
    sigma: float

    def simulate_path(self, x0, maturity, steps, rng=None):
        step = _mean_reverting_step(self.kappa, self.theta, self.sigma, rng or RNG())
        return _simulate(x0, maturity, steps, step)

    def drift(self, t, x):
        return self.kappa * (self.theta - x)

    def diffusion(self, t, x):
        return self.sigma


@dataclass(frozen=True)
class OrnsteinUhlenbeck(StochasticProcess):
    """Ornstein-Uhlenbeck process: dX = kappa (theta - X) dt + sigma dW."""

    kappa: float
    theta: float
    sigma: float

    def simulate_path(self, x0, maturity, steps, rng=None):
        step = _mean_reverting_step(self.kappa, self.theta, self.sigma, rng or RNG())
        return _simulate(x0, maturity, steps, step)

    def drift(self, t, x):
        return self.kappa * (self.theta - x)

    def diffusion(self, t, x):
        return self.sigma


@dataclass(frozen=True)
class CIR(StochasticProcess):
    """Cox-Ingersoll-Ross short rate: dr = kappa (theta - r) dt + sigma sqrt(r) dW."""

    kappa: float
    theta: float
    sigma: float

    def simulate_path(self, x0, maturity, steps, rng=None):
        """Exact simulation via the Poisson mixture of the noncentral chi-square."""
        rng = rng or RNG()
        sigma2 = self.sigma**2
        nu = 4.0 * self.kappa * self.theta / sigma2

        def step(r: float, dt: float) -> float:
            decay = math.exp(-self.kappa * dt)
            c = sigma2 * (1.0 - decay) / (4.0 * self.kappa)
            lam = 4.0 * self.kappa * decay * r / (sigma2 * (1.0 - decay))
            k = rng.poisson(lam / 2.0)
            chi2 = rng.gamma(nu / 2.0 + k, 2.0)
            return c * chi2

        return _simulate(x0, maturity, steps, step)

    def simulate_path_euler(self, x0, maturity, steps, rng=None):
        """Euler scheme with full truncation at zero."""
        rng = rng or RNG()

        def step(r: float, dt: float) -> float:
            z = rng.randn()
            rp = max(r, 0.0)
            nxt = (
                r
                + self.kappa * (self.theta - rp) * dt
                + self.sigma * math.sqrt(rp * dt) * z
            )
            return max(nxt, 0.0)

        return _simulate(x0, maturity, steps, step)

    def drift(self, t, x):
        return self.kappa * (self.theta - x)

    def diffusion(self, t, x):
        return self.sigma * math.sqrt(max(x, 0.0))