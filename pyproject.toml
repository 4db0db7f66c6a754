[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dcfvalue"
version = "0.1.0"
description = "Estimate the intrinsic value of a stock with a two-stage discounted cash flow model"
requires-python = ">=3.10"
dependencies = []
keywords = ["dcf", "discounted cash flow", "valuation", "intrinsic value", "investing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dcfvalue = "dcfvalue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dcfvalue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
