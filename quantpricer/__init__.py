"""Stochastic process simulation, option payoffs and pricing interfaces."""

__version__ = "0.1.0"
__all__ = ["cli", "options", "pricing", "processes", "rng"]