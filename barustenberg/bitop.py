"""Index of the most significant set bit, via de Bruijn multiplication."""

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

_DE_BRUIJN_32 = 0x07C4ACDD
_DE_BRUIJN_64 = 0x03F79D71B4CB0A89

_MULTIPLY_DE_BRUIJN_BIT_POSITION = (
    0, 9, 1, 10, 13, 21, 2, 29, 11, 14, 16, 18, 22, 25, 3, 30,
    8, 12, 20, 28, 15, 17, 24, 7, 19, 27, 23, 6, 26, 5, 4, 31,
)

_DE_BRUIJN_SEQUENCE = (
    0, 47, 1, 56, 48, 27, 2, 60, 57, 49, 41, 37, 28, 16, 3, 61,
    54, 58, 35, 52, 50, 42, 21, 44, 38, 32, 29, 23, 17, 11, 4, 62,
    46, 55, 26, 59, 40, 36, 15, 53, 34, 51, 20, 43, 31, 22, 10, 45,
    25, 39, 14, 33, 19, 30, 9, 24, 13, 18, 8, 12, 7, 6, 5, 63,
)


def _smear(value: int, shifts: tuple[int, ...]) -> int:
    for shift in shifts:
        value |= value >> shift
    return value


def get_msb32(value: int) -> int:
    """Index of the highest set bit of ``value`` taken as a 32-bit word (0 for 0)."""
    v = _smear(value & _MASK32, (1, 2, 4, 8, 16))
    return _MULTIPLY_DE_BRUIJN_BIT_POSITION[((v * _DE_BRUIJN_32) & _MASK32) >> 27]


def get_msb64(value: int) -> int:
    """Index of the highest set bit of ``value`` taken as a 64-bit word (0 for 0)."""
    t = _smear(value & _MASK64, (1, 2, 4, 8, 16, 32))
    return _DE_BRUIJN_SEQUENCE[((t * _DE_BRUIJN_64) & _MASK64) >> 58]


def get_msb(value: int, bits: int = 64) -> int:
    """Index of the highest set bit of ``value`` for a word of 32 or 64 bits."""
    if bits == 32:
        return get_msb32(value)
    if bits == 64:
        return get_msb64(value)
    raise ValueError(f"unsupported word size: {bits} bits")