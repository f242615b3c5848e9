[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quantpricer"
version = "0.1.0"
description = "Stochastic process simulators and option payoffs for quantitative finance"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "quantitative finance",
    "stochastic processes",
    "simulation",
    "options",
    "payoff",
    "vasicek",
    "cir",
    "ornstein-uhlenbeck",
    "geometric brownian motion",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quantpricer = "quantpricer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quantpricer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
