"""Basic types shared by circuit composers: wires, copy-cycle nodes and selectors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U32_MAX = (1 << 32) - 1

DUMMY_TAG = 0
"""Tag given to every variable that has not been assigned one."""

REAL_VARIABLE = _U32_MAX - 1
"""Marks the last (the "real") variable of an equivalence class."""

FIRST_VARIABLE_IN_CLASS = _U32_MAX - 2
"""Marks the first variable of an equivalence class."""

NUM_RESERVED_GATES = 4
"""Gates kept free at the end of a circuit."""


class WireType(enum.IntEnum):
    """Column of a gate that a wire belongs to, encoded in the top two bits."""

    LEFT = 0
    RIGHT = 1 << 30
    OUTPUT = 1 << 31
    FOURTH = 0xC0000000


class ComposerType(enum.Enum):
    """Kind of arithmetisation a composer builds."""

    STANDARD = enum.auto()
    TURBO = enum.auto()
    PLOOKUP = enum.auto()
    STANDARD_HONK = enum.auto()


@dataclass(frozen=True)
class CycleNode:
    """One wire in a copy cycle: the gate it sits in and its column."""

    gate_index: int
    wire_type: WireType

    def __post_init__(self) -> None:
        if not 0 <= self.gate_index <= _U32_MAX:
            raise ValueError(f"gate index out of 32-bit range: {self.gate_index}")
        object.__setattr__(self, "wire_type", WireType(self.wire_type))


@dataclass
class SelectorProperties:
    """Name of a selector and whether it needs its Lagrange-base polynomial kept."""

    name: str
    requires_lagrange_base_polynomial: bool = False