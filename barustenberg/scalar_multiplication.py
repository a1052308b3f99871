"""BN254 G1 point helpers used by Pippenger multi-scalar multiplication."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

FQ_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583


@dataclass(frozen=True)
class AffinePoint:
    """A point (x, y) with coordinates in the BN254 base field."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % FQ_MODULUS)
        object.__setattr__(self, "y", self.y % FQ_MODULUS)


@dataclass(frozen=True)
class ProjectivePoint:
    """A point (x, y, z) in projective coordinates over the BN254 base field."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % FQ_MODULUS)
        object.__setattr__(self, "y", self.y % FQ_MODULUS)
        object.__setattr__(self, "z", self.z % FQ_MODULUS)


def _sqrt(value: int) -> int:
    # The modulus is 3 mod 4, so a square root is value^((p + 1) / 4).
    value %= FQ_MODULUS
    root = pow(value, (FQ_MODULUS + 1) // 4, FQ_MODULUS)
    if root * root % FQ_MODULUS != value:
        raise ValueError("value is not a quadratic residue")
    return root


@lru_cache(maxsize=None)
def cube_root_of_unity() -> int:
    """A non-trivial cube root of unity in the base field: (sqrt(-3) - 1) / 2."""
    two_inv = pow(2, -1, FQ_MODULUS)
    numerator = (_sqrt(-3) - 1) % FQ_MODULUS
    return two_inv * numerator % FQ_MODULUS


def is_point_at_infinity(point: ProjectivePoint) -> bool:
    """True when z is zero and (x, y) is not the all-zero pair."""
    return not (point.x == 0 and point.y == 0) and point.z == 0


def generate_pippenger_point_table(points: Iterable[AffinePoint]) -> list[AffinePoint]:
    """Interleave each point P with its endomorphism image (beta * x, -y)."""
    beta = cube_root_of_unity()
    table: list[AffinePoint] = []
    for point in points:
        table.append(point)
        table.append(AffinePoint(beta * point.x, -point.y))
    return table