"""Stream-to-memory transfer: stream beats become signed words in a buffer."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from aieprng.mm2s import AxiWord

_MASK32 = 0xFFFFFFFF


def _signed(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _payload(beat: AxiWord | int) -> int:
    return beat.data if isinstance(beat, AxiWord) else int(beat)


def s2mm(stream: Iterable[AxiWord | int], size: int) -> list[int]:
    """Read ``size`` beats from ``stream`` and return their data as signed words.

    Beats may be ``AxiWord`` values or plain integers.  Only ``size`` beats
    are taken, so the rest of an iterator stays unread.  A non-positive size
    reads nothing.  Raises ValueError if the stream ends early.
    """
    if size <= 0:
        return []
    memory = [_signed(_payload(beat)) for beat in islice(stream, size)]
    if len(memory) < size:
        raise ValueError(f"stream ended after {len(memory)} of {size} words")
    return memory