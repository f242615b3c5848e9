import dataclasses

import pytest

from quantpricer.options import EuropeanOption, OptionType
from quantpricer.pricing import Hedger, Pricer, PricingResult
from quantpricer.processes import GeometricBrownianMotion
from quantpricer.rng import RNG


class _IntrinsicPricer(Pricer):
    def price(self, option, process, spot):
        return PricingResult(option.payoff(spot), 0.0, 0.0, 0.0, 0.0)


class _TerminalHedger(Hedger):
    def simulate_hedging(
        self, option, process, pricer, spot, risk_free, volatility, maturity, steps
    ):
        path = process.simulate_path(spot, maturity, steps, RNG(7))
        return pricer.price(option, process, path[-1]).price


def test_pricer_is_abstract():
    with pytest.raises(TypeError):
        Pricer()


def test_hedger_is_abstract():
    with pytest.raises(TypeError):
        Hedger()


def test_concrete_pricer_out_of_the_money_put():
    option = EuropeanOption(100.0, 1.0, OptionType.PUT)
    result = _IntrinsicPricer().price(option, GeometricBrownianMotion(0.05, 0.2), 120.0)
    assert result.price == 0.0
    assert dataclasses.astuple(result) == (0.0, 0.0, 0.0, 0.0, 0.0)


def test_pricing_result_is_frozen():
    result = PricingResult(1.0, 0.5, 0.1, 0.2, 0.3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.price = 2.0
    assert result.price == 1.0


def test_pricing_result_field_order():
    result = PricingResult(1.0, 0.5, 0.1, 0.2, 0.3)
    assert dataclasses.astuple(result) == (1.0, 0.5, 0.1, 0.2, 0.3)
    assert [f.name for f in dataclasses.fields(PricingResult)] == [
        "price",
        "delta",
        "gamma",
        "vega",
        "rho",
    ]


def test_pricing_result_equality():
    first = PricingResult(1.0, 2.0, 3.0, 4.0, 5.0)
    second = PricingResult(1.0, 2.0, 3.0, 4.0, 5.0)
    assert first == second
    assert first.rho == 5.0
    assert (first == PricingResult(1.0, 2.0, 3.0, 4.0, 6.0)) is False


def test_concrete_pricer_through_interface():
    option = EuropeanOption(100.0, 1.0, OptionType.CALL)
    pricer: Pricer = _IntrinsicPricer()
    result = pricer.price(option, GeometricBrownianMotion(0.05, 0.2), 110.0)
    assert result.price == option.payoff(110.0)
    assert result.delta == 0.0


def test_concrete_hedger_is_reproducible():
    option = EuropeanOption(100.0, 1.0, OptionType.PUT)
    process = GeometricBrownianMotion(0.05, 0.2)
    hedger: Hedger = _TerminalHedger()
    first = hedger.simulate_hedging(
        option, process, _IntrinsicPricer(), 100.0, 0.01, 0.2, 1.0, 50
    )
    second = hedger.simulate_hedging(
        option, process, _IntrinsicPricer(), 100.0, 0.01, 0.2, 1.0, 50
    )
    assert first == second
    assert first >= 0.0