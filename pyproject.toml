[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crumble"
version = "0.1.0"
description = "Small utilities: leveled timestamped logging, integer limits and a xoshiro256++ pseudo-random generator."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "prng", "xoshiro256", "splitmix64", "random", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crumble"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
