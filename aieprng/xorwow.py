"""Four-lane xorwow generator: xorshift over five vectors plus a Weyl counter."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aieprng.vec import (
    Vector,
    _add,
    _downshift,
    _loop_bound,
    _read_vector,
    _read_word,
    _upshift,
    _wrap,
    _xor,
)

WEYL_INCREMENT = 362437
STATE_VECTORS = 5


def xorwow(states: Iterable[int]) -> Iterator[int]:
    """Generate words from an input stream of length and five state vectors.

    The stream holds the number of words wanted followed by 20 state words.
    The returned iterator yields the vector count first, then four words
    per vector.  A stream too short for the state raises ValueError.
    """
    words = iter(states)
    length = _read_word(words)
    state = [_read_vector(words) for _ in range(STATE_VECTORS)]
    return _generate(_loop_bound(length), state)


def _generate(bound: int, state: list[Vector]) -> Iterator[int]:
    yield bound
    counter = 0
    for _ in range(bound):
        counter = _wrap(counter + WEYL_INCREMENT)
        value = state[4]
        value = _xor(value, _downshift(value, 2))
        value = _xor(value, _upshift(value, 1))
        value = _xor(value, _xor(state[0], _upshift(state[0], 4)))
        value = _add((counter,) * len(value), value)
        yield from value
        state = [value] + state[:-1]