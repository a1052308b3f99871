"""Small integer helpers exposed at the top level of the library."""


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def mult(a: int, b: int) -> int:
    """Return the product of two integers."""
    return a * b