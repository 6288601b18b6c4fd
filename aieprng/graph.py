"""Layout of the compute array: one generator and one follow-up kernel per unit."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from aieprng.algorithms import Algorithm

COLS = 40
ROWS = 8
CU_PER_COL = 4
ROWS_PER_CU = 2
ARRAY_COLUMNS = 50
FIRST_COLUMN = (ARRAY_COLUMNS - COLS) // 2
PLIO_BITS = 32

SUBSEQUENT_KERNEL = "subsequent"
SEED_FILE = "../../data/in_seeds.txt"

_RAND_KERNELS = {
    Algorithm.SFMT: "sfmt",
    Algorithm.XOROSHIRO128: "xoroshiro128ppmvect",
    Algorithm.XORWOW: "xorwow",
}


@dataclass(frozen=True)
class ComputeUnit:
    """One generator kernel feeding one follow-up kernel, with its stream ports."""

    col: int
    cu: int
    rand_kernel: str
    icdf_kernel: str
    rand_tile: tuple[int, int]
    icdf_tile: tuple[int, int]
    input_plio: str
    output_plio: str
    input_file: str
    output_file: str
    plio_bits: int = PLIO_BITS


class GraphOverlay:
    """All compute units of the array, placed column by column."""

    def __init__(self, algorithm: Algorithm) -> None:
        self.algorithm = Algorithm(algorithm)
        rand_kernel = _RAND_KERNELS[self.algorithm]
        self._units = {
            (col, cu): _make_unit(col, cu, rand_kernel)
            for col in range(COLS)
            for cu in range(CU_PER_COL)
        }

    def find(self, col: int, cu: int) -> ComputeUnit:
        """Return the unit in column ``col`` at position ``cu``; IndexError if absent."""
        try:
            return self._units[(col, cu)]
        except KeyError:
            raise IndexError(f"no compute unit at column {col}, unit {cu}") from None

    def __iter__(self) -> Iterator[ComputeUnit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)


def _make_unit(col: int, cu: int, rand_kernel: str) -> ComputeUnit:
    column = FIRST_COLUMN + col
    suffix = f"{col}_{cu}"
    return ComputeUnit(
        col=col,
        cu=cu,
        rand_kernel=rand_kernel,
        icdf_kernel=SUBSEQUENT_KERNEL,
        rand_tile=(column, ROWS_PER_CU * cu),
        icdf_tile=(column, ROWS_PER_CU * cu + 1),
        input_plio=f"in_seeds{suffix}",
        output_plio=f"out_rand{suffix}",
        input_file=SEED_FILE,
        output_file=f"./data/out_rand{suffix}.txt",
    )