"""Command that simulates a few stochastic processes and prints their paths."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .processes import CIR, GeometricBrownianMotion, OrnsteinUhlenbeck, Vasicek
from .rng import RNG

_RULE = "============================="
_SHOWN_STEPS = 10


def _banner(title: str, out: TextIO) -> None:
    out.write(f"\n{_RULE}\n{title}\n{_RULE}\n")


def _print_steps(path: list[float], symbol: str, decimals: int, out: TextIO) -> None:
    for i, value in enumerate(path[:_SHOWN_STEPS]):
        out.write(f"Step {i} : {symbol} = {value:.{decimals}f}\n")


def run_gbm(rng: RNG | None = None, out: TextIO | None = None) -> list[float]:
    """Simulate one year of daily geometric Brownian motion and print it."""
    out = out or sys.stdout
    _banner("🌐 Simulation : Geometric Brownian Motion (GBM)", out)
    gbm = GeometricBrownianMotion(mu=0.05, sigma=0.2)
    path = gbm.simulate_path(100.0, 1.0, 252, rng or RNG())
    _print_steps(path, "S", 4, out)
    out.write(f"Valeur finale S(T) = {path[-1]:.4f}\n")
    return path


def run_vasicek(rng: RNG | None = None, out: TextIO | None = None) -> list[float]:
    """Simulate one year of a daily Vasicek short rate and print it."""
    out = out or sys.stdout
    _banner("🏦 Simulation : Vasicek Interest Rate Process", out)
    vasicek = Vasicek(kappa=0.3, theta=0.05, sigma=0.02)
    path = vasicek.simulate_path(0.03, 1.0, 252, rng or RNG())
    _print_steps(path, "r", 6, out)
    out.write(f"Valeur finale r(T) = {path[-1]:.6f}\n")
    return path


def run_cir(
    rng: RNG | None = None, out: TextIO | None = None
) -> tuple[list[float], list[float]]:
    """Simulate a CIR rate with both schemes and print the final values."""
    out = out or sys.stdout
    rng = rng or RNG()
    _banner("💠 Simulation : CIR Process", out)
    cir = CIR(kappa=0.5, theta=0.04, sigma=0.1)
    euler = cir.simulate_path_euler(0.03, 1.0, 252, rng)
    out.write(f"Euler: Final r(T) = {euler[-1]:.6f}\n")
    exact = cir.simulate_path(0.03, 1.0, 252, rng)
    out.write(f"Exact (approx): Final r(T) = {exact[-1]:.6f}\n")
    return euler, exact


def run_ornstein_uhlenbeck(
    rng: RNG | None = None, out: TextIO | None = None
) -> list[float]:
    """Simulate one year of a daily Ornstein-Uhlenbeck process and print it."""
    out = out or sys.stdout
    _banner("🌿 Simulation : Ornstein–Uhlenbeck Process", out)
    ou = OrnsteinUhlenbeck(kappa=1.0, theta=0.05, sigma=0.03)
    path = ou.simulate_path(0.02, 1.0, 252, rng or RNG())
    _print_steps(path, "X", 6, out)
    out.write(f"Final X(T) = {path[-1]:.6f}\n")
    return path


def main(argv: list[str] | None = None) -> int:
    """Run every simulation in turn and print the results."""
    parser = argparse.ArgumentParser(
        prog="quantpricer", description="Stochastic process simulator."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for reproducible paths"
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("=== QuantPricer: Stochastic Process Simulator ===\n")
    for run in (run_gbm, run_vasicek, run_cir, run_ornstein_uhlenbeck):
        rng = RNG(None if args.seed is None else args.seed)
        run(rng, out)
    out.write("\nSimulation terminée ✅\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())