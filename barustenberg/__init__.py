"""PLONK building blocks over BN254: bit operations, thread count, point tables and composer bookkeeping."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "bitop",
    "threads",
    "scalar_multiplication",
    "composer_types",
    "composer",
]