import pytest

from aieprng.algorithms import Algorithm
from aieprng.host import HostRun, main, run, seed_buffer


def test_seed_buffer_layout():
    buf = seed_buffer(Algorithm.XOROSHIRO128, 0, 0, 10)
    assert len(buf) == Algorithm.XOROSHIRO128.seed_words() + 1
    assert buf[0] == 10
    assert buf[1] == 1243
    assert [b - a for a, b in zip(buf[1:], buf[2:])] == [1] * (len(buf) - 2)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_seed_buffer_offsets_by_block_and_unit(algorithm):
    base = seed_buffer(algorithm, 0, 0, 7)
    next_block = seed_buffer(algorithm, 1, 0, 7)
    next_unit = seed_buffer(algorithm, 0, 1, 7)
    assert [b - a for a, b in zip(base[1:], next_block[1:])] == [1] * (len(base) - 1)
    assert next_unit[1:] == next_block[1:]
    assert len(base) == algorithm.seed_words() + 1


@pytest.mark.parametrize("block, cu", [(-1, 0), (4, 0), (0, 40), (0, -1)])
def test_seed_buffer_rejects_out_of_range(block, cu):
    with pytest.raises(ValueError):
        seed_buffer(Algorithm.XORWOW, block, cu, 4)


def test_run_collects_every_unit():
    result = run(Algorithm.XORWOW, 6)
    assert isinstance(result, HostRun)
    assert len(result) == 160
    assert all(len(result[key]) == 6 for key in result)
    assert result.duration >= 0


def test_run_matches_generator_output():
    size_out = 5
    result = run(Algorithm.XOROSHIRO128, size_out)
    stream = Algorithm.XOROSHIRO128.generate(
        seed_buffer(Algorithm.XOROSHIRO128, 2, 7, size_out)
    )
    assert next(stream) == 2
    expected = [next(stream) for _ in range(size_out)]
    assert result[(2, 7)] == expected


def test_run_sfmt_is_deterministic():
    first = run(Algorithm.SFMT, 4)
    second = run(Algorithm.SFMT, 4)
    assert first.results == second.results
    assert first[(0, 0)] != first[(1, 0)]


def test_run_zero_size_gives_empty_results():
    result = run(Algorithm.XORWOW, 0)
    assert all(result[key] == [] for key in result)


def test_run_rejects_negative_size():
    with pytest.raises(ValueError):
        run(Algorithm.XORWOW, -1)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_with_too_many_arguments(capsys):
    assert main(["xorwow", "4", "extra"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_unknown_algorithm(capsys):
    assert main(["bogus"]) == 1
    assert "bogus" in capsys.readouterr().out


def test_main_invalid_count(capsys):
    assert main(["xorwow", "abc"]) == 1
    assert "abc" in capsys.readouterr().out


def test_main_runs_generation(capsys):
    assert main(["xorwow", "8"]) == 0
    out = capsys.readouterr().out
    assert "generating 8 random numbers" in out
    assert "Exec time on cold" in out
    assert "84 , 32" in out