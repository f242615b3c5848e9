"""Option contracts and their payoffs."""

from __future__ import annotations

import statistics
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class OptionType(Enum):
    CALL = "call"
    PUT = "put"


class BarrierType(Enum):
    UP_AND_OUT = "up-and-out"
    DOWN_AND_OUT = "down-and-out"
    UP_AND_IN = "up-and-in"
    DOWN_AND_IN = "down-and-in"

    @property
    def is_up(self) -> bool:
        return self in (BarrierType.UP_AND_OUT, BarrierType.UP_AND_IN)

    @property
    def is_knock_out(self) -> bool:
        return self in (BarrierType.UP_AND_OUT, BarrierType.DOWN_AND_OUT)


def _vanilla(option_type: OptionType, strike: float, spot: float) -> float:
    if option_type is OptionType.CALL:
        return max(spot - strike, 0.0)
    return max(strike - spot, 0.0)


@dataclass(frozen=True)
class Option(ABC):
    """An option with strike, maturity and call/put type."""

    strike: float
    maturity: float
    option_type: OptionType

    @abstractmethod
    def payoff(self, spot):
        """Payoff at expiry."""

    @abstractmethod
    def name(self) -> str:
        """Name of the contract kind."""


@dataclass(frozen=True)
class EuropeanOption(Option):
    def payoff(self, spot: float) -> float:
        return _vanilla(self.option_type, self.strike, spot)

    def name(self) -> str:
        return "EuropeanOption"


@dataclass(frozen=True)
class AmericanOption(Option):
    def payoff(self, spot: float) -> float:
        """Intrinsic value of immediate exercise at ``spot``."""
        return _vanilla(self.option_type, self.strike, spot)

    def name(self) -> str:
        return "AmericanOption"


@dataclass(frozen=True)
class DigitalOption(Option):
    """Pays a fixed amount when the spot finishes strictly in the money."""

    payout: float

    def payoff(self, spot: float) -> float:
        if self.option_type is OptionType.CALL:
            return self.payout if spot > self.strike else 0.0
        return self.payout if spot < self.strike else 0.0

    def name(self) -> str:
        return "DigitalOption"


@dataclass(frozen=True)
class AsianOption(Option):
    """Arithmetic-average option, paid on the mean of the path."""

    def payoff(self, path: Sequence[float]) -> float:
        if not path:
            return 0.0
        return _vanilla(self.option_type, self.strike, statistics.fmean(path))

    def name(self) -> str:
        return "AsianOption"


@dataclass(frozen=True)
class BarrierOption(Option):
    """Knock-in or knock-out option monitored at every point of the path."""

    barrier: float
    barrier_type: BarrierType

    def payoff(self, path: Sequence[float]) -> float:
        if not path:
            return 0.0
        value = _vanilla(self.option_type, self.strike, path[-1])
        if self.barrier_type.is_up:
            hit = any(s >= self.barrier for s in path)
        else:
            hit = any(s <= self.barrier for s in path)
        if self.barrier_type.is_knock_out:
            return 0.0 if hit else value
        return value if hit else 0.0

    def name(self) -> str:
        return "BarrierOption"