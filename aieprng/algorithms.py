"""The generators a compute unit can run, with the seed layout each expects."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator

from aieprng.sfmt import sfmt
from aieprng.xoroshiro import xoroshiro128ppmvect
from aieprng.xorwow import xorwow

VECTOR_SIZE = 4

_KERNELS: dict[str, tuple[int, Callable[[Iterable[int]], Iterator[int]]]] = {
    "sfmt": (156, sfmt),
    "xoroshiro128": (2, xoroshiro128ppmvect),
    "xorwow": (5, xorwow),
}


class Algorithm(enum.Enum):
    """A pseudorandom generator kernel."""

    SFMT = "sfmt"
    XOROSHIRO128 = "xoroshiro128"
    XORWOW = "xorwow"

    def seed_words(self) -> int:
        """Number of 32-bit seed words that follow the length word."""
        state_vectors, _ = _KERNELS[self.value]
        return state_vectors * VECTOR_SIZE

    def generate(self, states: Iterable[int]) -> Iterator[int]:
        """Run the generator on a stream of length word then seed words.

        Yields the vector count first, then four words per vector.
        """
        _, kernel = _KERNELS[self.value]
        return kernel(states)