"""Bookkeeping shared by circuit composers: variables, public inputs and copy classes."""

from __future__ import annotations

from typing import Iterable

from .composer_types import (
    DUMMY_TAG,
    FIRST_VARIABLE_IN_CLASS,
    REAL_VARIABLE,
    CycleNode,
    SelectorProperties,
)

FR_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""Order of the BN254 scalar field, in which witness values live."""


class ComposerBase:
    """Witness store and equivalence-class tracking for a circuit under construction.

    Each variable starts in a copy class of its own. A class is a doubly linked
    list through ``prev_var_index`` and ``next_var_index``; its last member is the
    "real" variable whose value every member reads.
    """

    def __init__(
        self,
        num_selectors: int = 0,
        size_hint: int = 0,
        selector_properties: Iterable[SelectorProperties] = (),
    ) -> None:
        if num_selectors < 0:
            raise ValueError(f"number of selectors must not be negative: {num_selectors}")
        if size_hint < 0:
            raise ValueError(f"size hint must not be negative: {size_hint}")
        self.num_gates = 0
        self.num_selectors = num_selectors
        self.size_hint = size_hint
        self.selectors: list[list[int]] = [[] for _ in range(num_selectors)]
        self.selector_properties: list[SelectorProperties] = list(selector_properties)
        self.w_l: list[int] = []
        self.w_r: list[int] = []
        self.w_o: list[int] = []
        self.w_4: list[int] = []
        self.failed = False
        self.err: str | None = None
        self.zero_idx = 0
        self.public_inputs: list[int] = []
        self.variables: list[int] = []
        self.next_var_index: list[int] = []
        self.prev_var_index: list[int] = []
        self.real_variable_index: list[int] = []
        self.real_variable_tags: list[int] = []
        self.current_tag = DUMMY_TAG
        self.tau: dict[int, int] = {}
        self.wire_copy_cycles: list[list[CycleNode]] = []
        self.computed_witness = False

    def get_first_variable_in_class(self, index: int) -> int:
        """Index of the first variable in the copy class holding ``index``."""
        idx = index
        while self.prev_var_index[idx] != FIRST_VARIABLE_IN_CLASS:
            idx = self.prev_var_index[idx]
        return idx

    def update_real_variable_indices(self, index: int, new_real_index: int) -> None:
        """Point every variable from ``index`` to the end of its class at ``new_real_index``."""
        cur_index = index
        while True:
            self.real_variable_index[cur_index] = new_real_index
            cur_index = self.next_var_index[cur_index]
            if cur_index == REAL_VARIABLE:
                break

    def get_variable(self, index: int) -> int:
        """Value of variable ``index``, read through its real variable."""
        if not 0 <= index < len(self.variables):
            raise IndexError(f"variable index out of range: {index}")
        return self.variables[self.real_variable_index[index]]

    def get_public_input(self, index: int) -> int:
        """Value of the public input at position ``index``."""
        if not 0 <= index < len(self.public_inputs):
            raise IndexError(f"public input index out of range: {index}")
        return self.get_variable(self.public_inputs[index])

    def get_public_inputs(self) -> list[int]:
        """Values of all public inputs, in order."""
        return [self.get_variable(witness) for witness in self.public_inputs]

    def add_variable(self, value: int) -> int:
        """Store a new witness value in a class of its own and return its index."""
        self.variables.append(value % FR_MODULUS)
        index = len(self.variables) - 1
        self.real_variable_index.append(index)
        self.next_var_index.append(REAL_VARIABLE)
        self.prev_var_index.append(FIRST_VARIABLE_IN_CLASS)
        self.real_variable_tags.append(DUMMY_TAG)
        self.wire_copy_cycles.append([])
        return index

    def add_public_variable(self, value: int) -> int:
        """Store a new witness value and make it a public input."""
        index = self.add_variable(value)
        self.public_inputs.append(index)
        return index

    def set_public_input(self, witness_index: int) -> None:
        """Make an existing witness public; it must not be public already."""
        if witness_index in self.public_inputs:
            raise ValueError("Attempted to set a public input that is already public!")
        self.public_inputs.append(witness_index)

    def get_circuit_subgroup_size(self, num_gates: int) -> int:
        """Smallest power of two not below ``num_gates`` (1 for zero gates)."""
        if num_gates < 0:
            raise ValueError(f"number of gates must not be negative: {num_gates}")
        if num_gates <= 1:
            return 1
        return 1 << (num_gates - 1).bit_length()

    def num_public_inputs(self) -> int:
        """Number of public inputs."""
        return len(self.public_inputs)

    def assert_valid_variables(self, variable_indices: Iterable[int]) -> None:
        """Raise ``ValueError`` if any index does not name a stored variable."""
        for variable_index in variable_indices:
            if not self.is_valid_variable(variable_index):
                raise ValueError(f"invalid variable index: {variable_index}")

    def is_valid_variable(self, variable_index: int) -> bool:
        """True when ``variable_index`` names a stored variable."""
        return 0 <= variable_index < len(self.variables)