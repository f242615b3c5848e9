"""Pricing results and the interfaces for pricers and hedgers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .options import Option
from .processes import StochasticProcess


@dataclass(frozen=True)
class PricingResult:
    """Price of an option together with its sensitivities."""

    price: float
    delta: float
    gamma: float
    vega: float
    rho: float


class Pricer(ABC):
    """Something that values an option under a stochastic process."""

    @abstractmethod
    def price(
        self, option: Option, process: StochasticProcess, spot: float
    ) -> PricingResult:
        """Value ``option`` for the current ``spot`` under ``process``."""


class Hedger(ABC):
    """Something that simulates hedging an option position over its life."""

    @abstractmethod
    def simulate_hedging(
        self,
        option: Option,
        process: StochasticProcess,
        pricer: Pricer,
        spot: float,
        risk_free: float,
        volatility: float,
        maturity: float,
        steps: int,
    ) -> float:
        """Run one hedging simulation and return the final hedging profit or loss."""