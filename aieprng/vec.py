"""Lane-wise operations on vectors of four 32-bit integer lanes.

Lane 0 is the least significant 32 bits.  Lanes hold signed 32-bit
values.  A right shift of a lane is arithmetic, so it copies the sign bit.
Pairs of lanes (0, 1) and (2, 3) form the low and high halves of two
64-bit words.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Iterator

Vector = tuple[int, ...]

LANES = 4
_MASK32 = 0xFFFFFFFF
_F0F0 = (-1, 0, -1, 0)
_0F0F = (0, -1, 0, -1)
_ZEROS = (0, 0, 0, 0)


def _wrap(value: int) -> int:
    """Reduce an integer to a signed 32-bit value."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _vector(v: Iterable[int]) -> Vector:
    lanes = tuple(_wrap(int(x)) for x in v)
    if len(lanes) != LANES:
        raise ValueError(f"expected {LANES} lanes, got {len(lanes)}")
    return lanes


def _upshift(v: Vector, n: int) -> Vector:
    return tuple(_wrap(x << n) for x in v)


def _downshift(v: Vector, n: int) -> Vector:
    return tuple(x >> n for x in v)


def _and(a: Vector, b: Vector) -> Vector:
    return tuple(x & y for x, y in zip(a, b))


def _or(a: Vector, b: Vector) -> Vector:
    return tuple(_wrap(x | y) for x, y in zip(a, b))


def _xor(a: Vector, b: Vector) -> Vector:
    return tuple(_wrap(x ^ y) for x, y in zip(a, b))


def _add(a: Vector, b: Vector) -> Vector:
    return tuple(_wrap(x + y) for x, y in zip(a, b))


def _toward_high(v: Vector, fill: int | None = None) -> Vector:
    """Move every lane one place up; lane 0 takes the last lane or ``fill``."""
    first = v[-1] if fill is None else fill
    return (first,) + v[:-1]


def _toward_low(v: Vector, fill: int | None = None) -> Vector:
    """Move every lane one place down; the last lane takes lane 0 or ``fill``."""
    last = v[0] if fill is None else fill
    return v[1:] + (last,)


def _check_64bit_shift(k: int) -> None:
    if not 0 < k < 64:
        raise ValueError(f"shift must be between 1 and 63, got {k}")


def _check_128bit_shift(shift: int) -> None:
    if not 0 < shift < 32:
        raise ValueError(f"shift must be between 1 and 31, got {shift}")


def swap_low_per64bit_in128(x: Iterable[int]) -> Vector:
    """Move each low half into the high half of its 64-bit word: {0, lo0, 0, lo1}."""
    return _and(_toward_high(_vector(x)), _0F0F)


def swap_high_per64bit_in128(x: Iterable[int]) -> Vector:
    """Move each high half into the low half of its 64-bit word: {hi0, 0, hi1, 0}."""
    return _and(_toward_low(_vector(x)), _F0F0)


def swap_high_low_per64bit(x: Iterable[int]) -> Vector:
    """Exchange the two 32-bit halves of each 64-bit word."""
    return _or(swap_high_per64bit_in128(x), swap_low_per64bit_in128(x))


def rotl_every64_in128(x: Iterable[int], k: int) -> Vector:
    """Rotate each 64-bit word left by ``k`` bits."""
    _check_64bit_shift(k)
    v = _vector(x)
    if k < 32:
        v1 = _upshift(v, k)
        v2 = _downshift(v, 32 - k)
    else:
        v2 = _upshift(v, k - 32)
        v1 = _downshift(v, 64 - k)
    return _or(v1, swap_high_low_per64bit(v2))


def shl_every64_in128(x: Iterable[int], k: int) -> Vector:
    """Shift each 64-bit word left by ``k`` bits."""
    _check_64bit_shift(k)
    v = _vector(x)
    if k < 32:
        v1 = _upshift(v, k)
        v2 = _downshift(v, 32 - k)
    else:
        v2 = _upshift(v, k - 32)
        v1 = _ZEROS
    return _or(v1, swap_low_per64bit_in128(v2))


def shr_every64_in128(x: Iterable[int], k: int) -> Vector:
    """Shift each 64-bit word right by ``k`` bits."""
    _check_64bit_shift(k)
    v = _vector(x)
    if k < 32:
        v1 = _downshift(v, k)
        v2 = _upshift(v, 32 - k)
    else:
        v2 = _downshift(v, k - 32)
        v1 = _ZEROS
    return _or(v1, swap_high_per64bit_in128(v2))


def shl_128bit(v: Iterable[int], shift: int) -> Vector:
    """Shift the whole 128-bit vector left by ``shift`` bits."""
    _check_128bit_shift(shift)
    v0 = _vector(v)
    carried = _downshift(_toward_high(v0, fill=0), 32 - shift)
    return _or(_upshift(v0, shift), carried)


def shr_128bit(v: Iterable[int], shift: int) -> Vector:
    """Shift the whole 128-bit vector right by ``shift`` bits."""
    _check_128bit_shift(shift)
    r1 = _vector(v)
    carried = _upshift(_toward_low(r1, fill=0), 32 - shift)
    return _or(_downshift(r1, shift), carried)


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _to_float(x: int, shift: int) -> float:
    """Convert a fixed-point integer with ``shift`` fraction bits to float32."""
    return _float32(math.ldexp(float(x), -shift))


def negative_to_float(v: Iterable[int], shift: int = 0) -> tuple[float, ...]:
    """Convert lanes from the upper 23 bits of their unsigned value."""
    lanes = tuple(_wrap(int(x)) for x in v)
    return tuple(_to_float(0x007FFFFF & (x >> 9), shift - 8) for x in lanes)


def unsigned_to_float(v: Iterable[int], shift: int = 0) -> tuple[float, ...]:
    """Convert lanes to float as if they were unsigned 32-bit integers."""
    lanes = tuple(_wrap(int(x)) for x in v)
    negatives = negative_to_float(lanes, shift)
    return tuple(
        neg if x < 0 else _to_float(x, shift) for x, neg in zip(lanes, negatives)
    )


def _read_word(words: Iterator[int]) -> int:
    try:
        return _wrap(int(next(words)))
    except StopIteration:
        raise ValueError("input stream ended before the state was complete") from None


def _read_vector(words: Iterator[int]) -> Vector:
    return tuple(_read_word(words) for _ in range(LANES))


def _loop_bound(length: int) -> int:
    """Number of 4-lane vectors needed to hold ``length`` words (C division)."""
    quotient = -((-length) // 4) if length < 0 else length // 4
    return quotient if length - 4 * quotient == 0 else quotient + 1