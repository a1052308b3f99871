# barustenberg

This package holds building blocks for a PLONK proving system over the BN254
curve. It is pure Python and has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `barustenberg.arith` provides `add(a, b)` and `mult(a, b)`, which return the
  sum and the product of two integers.
- `barustenberg.bitop` returns the index of the most significant set bit,
  computed by de Bruijn multiplication:
  - `get_msb32(value)` treats `value` as a 32-bit word.
  - `get_msb64(value)` treats `value` as a 64-bit word.
  - `get_msb(value, bits=64)` works for either word size. It raises
    `ValueError` for any size other than 32 or 64.
  - The result for 0 is 0.
- `barustenberg.threads` provides `compute_num_threads(multithreading=True)`.
  It returns `os.cpu_count()` rounded down to a power of two, or 1 when
  `multithreading` is false. It raises `RuntimeError` if the CPU count cannot
  be determined.
- `barustenberg.scalar_multiplication` covers BN254 G1 points:
  - `FQ_MODULUS` is the base field modulus.
  - The frozen `AffinePoint(x, y)` and `ProjectivePoint(x, y, z)` reduce their
    coordinates modulo `FQ_MODULUS`.
  - `cube_root_of_unity()` returns `(sqrt(-3) - 1) / 2` in the base field.
  - `is_point_at_infinity(point)` is true when `z == 0` and `(x, y)` is not
    `(0, 0)`.
  - `generate_pippenger_point_table(points)` returns a list in which each point
    `P` is followed by its endomorphism image `(beta * x, -y)`.
- `barustenberg.composer_types` defines the basic composer types:
  - `WireType` is an `IntEnum` with `LEFT`, `RIGHT`, `OUTPUT` and `FOURTH`,
    encoded in the top two bits of a 32-bit word.
  - `ComposerType` has the members `STANDARD`, `TURBO`, `PLOOKUP` and
    `STANDARD_HONK`.
  - `CycleNode(gate_index, wire_type)` is frozen. It raises `ValueError` if the
    gate index is outside the 32-bit range.
  - `SelectorProperties(name, requires_lagrange_base_polynomial=False)` holds
    one selector's settings.
  - The module also defines the constants `DUMMY_TAG`, `REAL_VARIABLE`,
    `FIRST_VARIABLE_IN_CLASS` and `NUM_RESERVED_GATES`.
- `barustenberg.composer` provides `ComposerBase` and `FR_MODULUS`, the scalar
  field order. `ComposerBase` stores witness values reduced modulo
  `FR_MODULUS`, together with public inputs and copy-class links:
  - `add_variable` and `add_public_variable` store a new witness value.
  - `set_public_input` makes an existing witness public.
  - `get_variable`, `get_public_input` and `get_public_inputs` read values back.
  - `num_public_inputs` returns the number of public inputs.
  - `get_first_variable_in_class` and `update_real_variable_indices` work on
    the copy-class links.
  - `get_circuit_subgroup_size` returns the smallest power of two that is not
    below the number of gates.
  - `is_valid_variable` and `assert_valid_variables` check variable indices.

## Example

```python
from barustenberg.bitop import get_msb
from barustenberg.composer import ComposerBase
from barustenberg.composer_types import SelectorProperties

assert get_msb(0x80, 64) == 7

composer = ComposerBase(2, 16, [SelectorProperties("q_m"),
                                SelectorProperties("q_c")])
zero = composer.add_variable(0)
x = composer.add_public_variable(25)
assert composer.get_public_inputs() == [25]
assert composer.num_public_inputs() == 1
assert composer.get_circuit_subgroup_size(5) == 8
```

The composer raises exceptions in these cases:

- `set_public_input` raises `ValueError` if the witness is already public.
- `get_variable` and `get_public_input` raise `IndexError` for an index that
  does not exist.
- `assert_valid_variables` raises `ValueError` for any index that does not
  name a stored variable.

## What it does not do

This package is not a prover or a verifier. It builds no proofs and no proving
or verification keys, and it does not load a structured reference string.

Some parts of a complete system are also missing:

- There is no multi-scalar multiplication.
- There is no pairing.
- There are no gates.
- `ComposerBase` has no way to merge two variables into one copy class. It
  records classes but never creates them.