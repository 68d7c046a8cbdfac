[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optarith"
version = "0.1.0"
description = "Fixed-width integer arithmetic, binary extended GCDs, big-integer helpers, a group interface and a max-heap"
requires-python = ">=3.10"
dependencies = []
keywords = ["arithmetic", "gcd", "xgcd", "binary gcd", "stein", "lehmer", "number theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["optarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
