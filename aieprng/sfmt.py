"""Four-lane SIMD-oriented Fast Mersenne Twister (SFMT19937 recursion)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aieprng.vec import (
    Vector,
    _and,
    _downshift,
    _loop_bound,
    _read_vector,
    _read_word,
    _upshift,
    _vector,
    _xor,
    shl_128bit,
    shr_128bit,
)

N = 156
M = 122
SHIFT_L = 8
SHIFT_R = 11
MASK = _vector((0xDFFFFFEF, 0xDDFECB7F, 0xBFFAFFFF, 0xBFFFFFF6))


def sfmt(states: Iterable[int]) -> Iterator[int]:
    """Generate words from an input stream of length and a 624-word state.

    The returned iterator yields the vector count first, then four words
    per vector.  A stream too short for the state raises ValueError.
    """
    words = iter(states)
    length = _read_word(words)
    state = [_read_vector(words) for _ in range(N)]
    return _generate(_loop_bound(length), state)


def _wrapped_index(index: int) -> int:
    index &= 0xFF
    return index - N if index >= N else index


def _generate(bound: int, state: list[Vector]) -> Iterator[int]:
    yield bound
    r1 = state[N - 2]
    r2 = state[N - 1]
    for ii in range(bound):
        i = _wrapped_index(ii)
        v0 = state[i]
        vm = state[_wrapped_index(i + M)]

        a = _xor(shl_128bit(v0, SHIFT_L), v0)
        b = _and(MASK, _downshift(vm, SHIFT_R))
        c = shr_128bit(r1, SHIFT_L)
        d = _upshift(r2, 18)

        r1 = r2
        r2 = _xor(a, _xor(b, _xor(c, d)))
        yield from r2
        state[ii % N] = r2