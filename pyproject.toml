[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libbdd"
version = "0.1.0"
description = "Variable sets, Boolean expressions and valuations for binary decision diagrams"
requires-python = ">=3.10"
dependencies = []
keywords = ["bdd", "binary decision diagram", "boolean", "logic", "valuation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libbdd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
