"""Host side of a generation run: seed every compute unit, stream, collect."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from aieprng.algorithms import Algorithm
from aieprng.graph import COLS, CU_PER_COL
from aieprng.mm2s import mm2s
from aieprng.s2mm import s2mm

DEFAULT_SIZE_OUT = 1000
SEED_BASE = 1234
BLOCKS = CU_PER_COL
UNITS_PER_BLOCK = COLS
WORD_BYTES = 4

_MASK32 = 0xFFFFFFFF


def _signed(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass(frozen=True)
class HostRun:
    """Words collected from every compute unit, keyed by ``(block, cu)``."""

    algorithm: Algorithm
    size_out: int
    results: dict[tuple[int, int], list[int]] = field(repr=False)
    duration: float = 0.0

    def __getitem__(self, key: tuple[int, int]) -> list[int]:
        return self.results[key]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


def seed_buffer(
    algorithm: Algorithm, block: int, cu: int, size_out: int
) -> list[int]:
    """Build the input buffer of one unit: output length, then its seed words.

    Raises ValueError if ``block`` or ``cu`` lies outside the array.
    """
    algorithm = Algorithm(algorithm)
    if not 0 <= block < BLOCKS:
        raise ValueError(f"block must be between 0 and {BLOCKS - 1}, got {block}")
    if not 0 <= cu < UNITS_PER_BLOCK:
        raise ValueError(
            f"cu must be between 0 and {UNITS_PER_BLOCK - 1}, got {cu}"
        )
    size_seeds = algorithm.seed_words()
    first = SEED_BASE + block + cu + size_seeds + 1
    return [_signed(size_out)] + [_signed(first + i) for i in range(size_seeds)]


def _run_unit(algorithm: Algorithm, buffer: Sequence[int], size_out: int) -> list[int]:
    beats = mm2s(buffer, len(buffer))
    generated = algorithm.generate(beat.data for beat in beats)
    next(generated)  # vector count, consumed by the follow-up kernel
    return s2mm(generated, size_out)


def run(algorithm: Algorithm, size_out: int = DEFAULT_SIZE_OUT) -> HostRun:
    """Seed every unit of every block, run the generators and gather the output.

    Raises ValueError for a negative ``size_out``.
    """
    algorithm = Algorithm(algorithm)
    if size_out < 0:
        raise ValueError(f"size_out must not be negative, got {size_out}")
    buffers = {
        (block, cu): seed_buffer(algorithm, block, cu, size_out)
        for block in range(BLOCKS)
        for cu in range(UNITS_PER_BLOCK)
    }
    begin = time.perf_counter()
    results = {
        key: _run_unit(algorithm, buffer, size_out) for key, buffer in buffers.items()
    }
    duration = time.perf_counter() - begin
    return HostRun(algorithm, size_out, results, duration)


def _parser(prog: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog=prog, description="Generate random numbers on every compute unit."
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<ALGORITHM> [RNs = 1000]``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "aieprng"
    usage = f"Usage: {prog} <ALGORITHM> [RNs = {DEFAULT_SIZE_OUT}]"
    choices = ", ".join(a.value for a in Algorithm)

    if not 1 <= len(args) <= 2:
        print(usage)
        return 1
    try:
        algorithm = Algorithm(args[0].lower())
    except ValueError:
        print(usage)
        print(f"Unknown algorithm {args[0]!r}; choose one of: {choices}")
        return 1
    try:
        size_out = int(args[1]) if len(args) == 2 else DEFAULT_SIZE_OUT
    except ValueError:
        print(f"Invalid number of random numbers: {args[1]!r}")
        return 1
    if size_out < 0:
        print(f"Invalid number of random numbers: {size_out}")
        return 1

    size_seeds = algorithm.seed_words()
    print(f"Launching the accelerator for generating {size_out} random numbers")
    print(
        "Creating host buffers of the following sizes: "
        f"{(size_seeds + 1) * WORD_BYTES} , {size_out * WORD_BYTES}"
    )
    result = run(algorithm, size_out)
    print(f"Done! in {result.duration} s ")
    print(f"Exec time on cold : {result.duration} s ")
    return 0