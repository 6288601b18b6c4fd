import pytest

from aieprng.algorithms import Algorithm
from aieprng.sfmt import sfmt
from aieprng.xoroshiro import xoroshiro128ppmvect
from aieprng.xorwow import xorwow


def _stream(algorithm, length):
    return [length] + [1234 + i for i in range(algorithm.seed_words())]


@pytest.mark.parametrize(
    "algorithm, states",
    [(Algorithm.SFMT, 156), (Algorithm.XOROSHIRO128, 2), (Algorithm.XORWOW, 5)],
)
def test_seed_words_match_state_vectors(algorithm, states):
    assert algorithm.seed_words() == states * 4


@pytest.mark.parametrize(
    "algorithm, kernel",
    [
        (Algorithm.SFMT, sfmt),
        (Algorithm.XOROSHIRO128, xoroshiro128ppmvect),
        (Algorithm.XORWOW, xorwow),
    ],
)
def test_generate_matches_kernel(algorithm, kernel):
    stream = _stream(algorithm, 40)
    assert list(algorithm.generate(stream)) == list(kernel(stream))


@pytest.mark.parametrize("name", ["SFMT", "XOROSHIRO128", "XORWOW"])
def test_generate_yields_bound_then_vectors(name):
    algorithm = Algorithm[name]
    stream = [10] + [1234 + i for i in range(Algorithm[name].seed_words())]
    out = list(Algorithm[name].generate(stream))
    assert algorithm is Algorithm[name]
    assert out[0] == 3
    assert len(out) == 1 + 3 * 4


@pytest.mark.parametrize("name", ["SFMT", "XOROSHIRO128", "XORWOW"])
def test_short_stream_raises(name):
    stream = [8] + [1234 + i for i in range(Algorithm[name].seed_words() - 1)]
    with pytest.raises(ValueError):
        list(Algorithm[name].generate(stream))


def test_lookup_by_value():
    assert Algorithm("xorwow") is Algorithm.XORWOW
    with pytest.raises(ValueError):
        Algorithm("mt19937")