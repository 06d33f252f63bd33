[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exchangesim"
version = "0.1.0"
description = "A small order-matching exchange simulator with CSV execution reports, a market-data reader and a trading wallet"
requires-python = ">=3.10"
dependencies = []
keywords = ["exchange", "order book", "matching engine", "trading", "simulation", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exchangesim = "exchangesim.execution:main"

[tool.hatch.build.targets.wheel]
packages = ["exchangesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
