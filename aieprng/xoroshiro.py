"""Four-lane xoroshiro128++ generator working on two 64-bit words per vector."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aieprng.vec import (
    Vector,
    _add,
    _loop_bound,
    _read_vector,
    _read_word,
    _xor,
    rotl_every64_in128,
    shl_every64_in128,
)


def xoroshiro128ppmvect(states: Iterable[int]) -> Iterator[int]:
    """Generate words from an input stream of length and two state vectors.

    The stream holds the number of words wanted followed by 8 state words.
    The returned iterator yields the vector count first, then four words
    per vector.  A stream too short for the state raises ValueError.
    """
    words = iter(states)
    length = _read_word(words)
    s0 = _read_vector(words)
    s1 = _read_vector(words)
    return _generate(_loop_bound(length), s0, s1)


def _generate(bound: int, s0: Vector, s1: Vector) -> Iterator[int]:
    yield bound
    for _ in range(bound):
        yield from _add(rotl_every64_in128(_add(s0, s1), 17), s0)
        tmp = _xor(s0, s1)
        s0 = _xor(_xor(rotl_every64_in128(s0, 49), tmp), shl_every64_in128(tmp, 21))
        s1 = rotl_every64_in128(tmp, 28)