[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barustenberg"
version = "0.1.0"
description = "Building blocks for a PLONK proving system: bit operations, BN254 point tables and circuit composer bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["plonk", "zero-knowledge", "bn254", "cryptography", "circuits"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barustenberg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
