# aieprng

Software models of three pseudorandom number generators that work on
vectors of four signed 32-bit lanes, together with the stream transfers
that feed them seeds and collect their output:

- **SFMT** – the SIMD-oriented Fast Mersenne Twister recursion, 156 state
  vectors of 128 bits each.
- **xoroshiro128++** – each vector holds two 64-bit words; two state vectors.
- **XORWOW** – xorshift over five state vectors plus a Weyl counter
  (increment 362437).

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stream format

Each generator reads one stream of 32-bit words:

1. the number of random numbers wanted (`len`),
2. the seed words, four per state vector.

It returns an iterator that yields the loop bound, `ceil(len / 4)`, first,
and then four words for every vector. Words are signed 32-bit integers.
A stream that ends before the seed state is complete raises `ValueError`.

## Generators

```python
from aieprng.xorwow import xorwow

out = xorwow([8] + list(range(1, 21)))  # len = 8, then 5 vectors of seed words
bound = next(out)                        # 2
words = list(out)                        # 8 words
```

- `aieprng.xorwow.xorwow(states)` – 20 seed words after the length.
- `aieprng.xoroshiro.xoroshiro128ppmvect(states)` – 8 seed words.
- `aieprng.sfmt.sfmt(states)` – 624 seed words.

`aieprng.algorithms.Algorithm` is an enum with members `SFMT`,
`XOROSHIRO128` and `XORWOW` (values `"sfmt"`, `"xoroshiro128"`, `"xorwow"`).
`Algorithm.seed_words()` gives the number of seed words a generator takes
and `Algorithm.generate(states)` runs it.

## Vector helpers

`aieprng.vec` holds the lane-wise operations the generators are built from.
Lane 0 is the least significant; lanes (0, 1) and (2, 3) are the low and
high halves of two 64-bit words.

- `rotl_every64_in128(x, k)`, `shl_every64_in128(x, k)`,
  `shr_every64_in128(x, k)` – rotate or shift each 64-bit word by `k`
  (1 to 63).
- `shl_128bit(v, shift)`, `shr_128bit(v, shift)` – shift the whole 128-bit
  vector by `shift` (1 to 31).
- `swap_low_per64bit_in128`, `swap_high_per64bit_in128`,
  `swap_high_low_per64bit` – the half-word moves the shifts rely on.
- `negative_to_float(v, shift)`, `unsigned_to_float(v, shift)` – convert
  lanes read as unsigned 32-bit fixed-point values (with `shift` fraction
  bits) to single-precision floats.

Out-of-range shifts and vectors that do not have four lanes raise
`ValueError`.

## Data movement and layout

- `aieprng.mm2s.mm2s(memory, size)` yields the first `size` words of
  `memory` as `AxiWord` beats (`data` as unsigned 32-bit, `keep`, and
  `last` set on the final beat). It raises `ValueError` if memory is
  shorter than `size`.
- `aieprng.s2mm.s2mm(stream, size)` reads `size` beats (`AxiWord`s or plain
  integers) and returns their data as signed words; it raises `ValueError`
  if the stream ends early.
- `aieprng.graph.GraphOverlay(algorithm)` lays out 160 `ComputeUnit`s –
  40 columns of 4 units, each a generator kernel feeding a follow-up kernel
  – with their tile positions and stream port names. It is iterable, has a
  length, and `find(col, cu)` returns one unit or raises `IndexError`.

## Running the whole array

`aieprng.host` seeds every unit of the four blocks of 40 units:
`seed_buffer(algorithm, block, cu, size_out)` builds one unit's input (the
output length followed by consecutive seed words), and
`run(algorithm, size_out=1000)` pushes each buffer through `mm2s`, the
generator and `s2mm`. It returns a `HostRun` whose results are keyed by
`(block, cu)` and which records the elapsed time in `duration`.

From the command line:

```
aieprng xorwow 1000
```

The first argument is `sfmt`, `xoroshiro128` or `xorwow`; the second, the
number of random numbers per unit, defaults to 1000. Invalid arguments
print a usage line and exit with status 1.

## What the package does not do

- The follow-up stage of each compute unit is only named in the layout; it
  performs no computation, and `run` returns the generator words as they
  are.
- The command prints progress and timing only; it does not print or save
  the generated numbers. Use `run` to obtain them.