import pytest

from aieprng.mm2s import AxiWord, mm2s


def test_data_round_trip():
    memory = [5, 17, 1000, 42]
    beats = list(mm2s(memory, len(memory)))
    assert [b.data for b in beats] == memory


def test_only_final_beat_is_last():
    beats = list(mm2s([1, 2, 3, 4, 5], 5))
    assert [b.last for b in beats] == [False, False, False, False, True]


def test_all_bytes_kept():
    beats = list(mm2s([9, 8, 7], 3))
    assert {b.keep for b in beats} == {0xF}


def test_negative_words_become_unsigned():
    beats = list(mm2s([-1], 1))
    assert beats == [AxiWord(data=0xFFFFFFFF, keep=0xF, last=True)]


def test_size_limits_stream():
    beats = list(mm2s([10, 20, 30, 40], 2))
    assert [b.data for b in beats] == [10, 20]
    assert beats[-1].last is True


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_empty(size):
    assert list(mm2s([1, 2, 3], size)) == []


def test_short_memory_raises():
    with pytest.raises(ValueError):
        mm2s([1, 2], 3)