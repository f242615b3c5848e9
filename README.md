# quantpricer

Simulators for common stochastic processes used in quantitative finance,
together with payoff definitions for vanilla and exotic options.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
quantpricer
quantpricer --seed 42
```

The command simulates one year of daily steps (252 steps) for four processes
and prints the results:

- Geometric Brownian motion (S0 = 100, mu = 5%, sigma = 20%): the first ten
  points of the path and the final value, to 4 decimals.
- Vasicek short rate (r0 = 3%, kappa = 0.3, theta = 5%, sigma = 2%): the first
  ten points and the final value, to 6 decimals.
- CIR short rate (r0 = 3%, kappa = 0.5, theta = 4%, sigma = 10%): the final
  value from the full-truncation Euler scheme and from exact sampling.
- Ornstein–Uhlenbeck (X0 = 2%, kappa = 1, theta = 5%, sigma = 3%): the first
  ten points and the final value, to 6 decimals.

Without `--seed` every run draws fresh random numbers. With `--seed N` each of
the four simulations starts from its own generator seeded with `N`, so the
output is reproducible.

The functions behind each section, `run_gbm`, `run_vasicek`, `run_cir` and
`run_ornstein_uhlenbeck` in `quantpricer.cli`, can also be called directly
with an `RNG` and a text stream; each returns the simulated path (`run_cir`
returns the Euler and exact paths as a pair).

## Library use

### Random numbers

`quantpricer.rng.RNG(seed=None)` wraps a NumPy generator. It draws standard
normals (`randn`), uniforms on [0, 1) (`randu`), Poisson counts
(`poisson(lam)`) and gamma variates (`gamma(shape, scale)`). A negative Poisson
mean, gamma shape or gamma scale raises `ValueError`.

### Processes

Every process in `quantpricer.processes` is a `StochasticProcess` with
`simulate_path(x0, maturity, steps, rng=None)`, `drift(t, x)` and
`diffusion(t, x)`. A path is a list of `steps + 1` floats starting at `x0`;
`steps = 0` gives `[x0]` and a negative number of steps raises `ValueError`.
When no `rng` is given, a freshly seeded `RNG` is used.

- `GeometricBrownianMotion(mu, sigma)`: exact log-normal steps.
- `Vasicek(kappa, theta, sigma)` and `OrnsteinUhlenbeck(kappa, theta, sigma)`:
  exact Gaussian transitions.
- `CIR(kappa, theta, sigma)`: `simulate_path` samples exactly from the
  non-central chi-squared transition law (as a Poisson mixture of gamma
  draws); `simulate_path_euler` uses an Euler scheme with full truncation at
  zero.

```python
from quantpricer.rng import RNG
from quantpricer.processes import GeometricBrownianMotion, CIR

rng = RNG(42)
gbm = GeometricBrownianMotion(0.05, 0.2)
path = gbm.simulate_path(100.0, 1.0, 252, rng)

cir = CIR(0.5, 0.04, 0.1)
exact = cir.simulate_path(0.03, 1.0, 252, rng)
euler = cir.simulate_path_euler(0.03, 1.0, 252, rng)
```

### Options

`quantpricer.options` defines `OptionType` (`CALL`, `PUT`), `BarrierType`
(`UP_AND_OUT`, `DOWN_AND_OUT`, `UP_AND_IN`, `DOWN_AND_IN`) and immutable option
classes built from `strike`, `maturity` and `option_type`:

- `EuropeanOption` and `AmericanOption`: `payoff(spot)` is the intrinsic value.
- `DigitalOption(strike, maturity, option_type, payout)`: pays `payout` when
  the spot is strictly above (call) or below (put) the strike.
- `AsianOption`: `payoff(path)` applies the vanilla payoff to the arithmetic
  mean of the path.
- `BarrierOption(strike, maturity, option_type, barrier, barrier_type)`:
  `payoff(path)` is the vanilla payoff on the last point, cancelled (knock-out)
  or activated (knock-in) when any point reaches the barrier (`>=` for up
  barriers, `<=` for down barriers).

Path-based payoffs of an empty path are zero. Each class reports its kind
through `name()`.

```python
from quantpricer.options import BarrierOption, BarrierType, OptionType

option = BarrierOption(100.0, 1.0, OptionType.CALL, 120.0, BarrierType.UP_AND_OUT)
value = option.payoff(path)
```

### Pricing and hedging interfaces

`quantpricer.pricing` holds `PricingResult` (`price`, `delta`, `gamma`,
`vega`, `rho`), the abstract `Pricer` with `price(option, process, spot)`, and
the abstract `Hedger` with
`simulate_hedging(option, process, pricer, spot, risk_free, volatility, maturity, steps)`.

## What the package does not do

The package computes no option prices or Greeks: `Pricer` and `Hedger` are
interfaces only, and no analytic, Monte Carlo, finite-difference or
least-squares pricer and no delta-hedging simulator come with it. Processes
such as Heston, Hull–White, Merton jump diffusion and SABR are not provided.