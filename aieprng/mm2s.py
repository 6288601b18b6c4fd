"""Memory-to-stream transfer: words from a buffer become stream beats."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_DATA_BITS = 32
_DATA_MASK = (1 << _DATA_BITS) - 1
_KEEP_ALL = (1 << (_DATA_BITS // 8)) - 1


@dataclass(frozen=True)
class AxiWord:
    """One beat of a 32-bit stream: data, byte-enable mask and end flag."""

    data: int
    keep: int = _KEEP_ALL
    last: bool = False


def mm2s(memory: Sequence[int], size: int) -> Iterator[AxiWord]:
    """Stream the first ``size`` words of ``memory`` as unsigned 32-bit beats.

    Every beat keeps all bytes; only the final beat carries ``last``.
    A non-positive size streams nothing.  Raises ValueError if memory
    holds fewer than ``size`` words.
    """
    if size > len(memory):
        raise ValueError(f"memory holds {len(memory)} words, {size} requested")
    return _beats(memory, size)


def _beats(memory: Sequence[int], size: int) -> Iterator[AxiWord]:
    for i in range(size):
        yield AxiWord(
            data=int(memory[i]) & _DATA_MASK,
            keep=_KEEP_ALL,
            last=i == size - 1,
        )