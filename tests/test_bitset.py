import pytest

from vecindex.bitset import BitsetView


def test_default_view_is_empty():
    view = BitsetView()
    assert view.empty()
    assert len(view) == 0
    assert view.byte_size() == 0
    assert view.to_string(0, 10) == ""


def test_byte_size_rounds_up():
    view = BitsetView(bytes(2), 9)
    assert view.byte_size() == 2
    assert BitsetView(bytes(1), 8).byte_size() == 1


def test_test_reads_little_endian_bits():
    view = BitsetView(bytes([0b00000101]), 8)
    assert view.test(0)
    assert not view.test(1)
    assert view.test(2)
    assert not view.test(7)


def test_index_past_end_counts_as_set():
    view = BitsetView(bytes([0]), 4)
    assert view.test(4)
    assert view.test(100)


def test_negative_index_raises():
    with pytest.raises(IndexError):
        BitsetView(bytes([0]), 8).test(-1)


def test_count_matches_number_of_set_bits():
    data = bytes([0xFF, 0x00, 0x0F] * 5)
    view = BitsetView(data, len(data) * 8)
    assert view.count() == sum(view.test(i) for i in range(len(view)))


def test_to_string_matches_test():
    view = BitsetView(bytes([0b10100001, 0b1]), 10)
    text = view.to_string(0, 10)
    assert len(text) == 10
    assert text == "".join("1" if view.test(i) else "0" for i in range(10))


def test_to_string_clamps_stop():
    view = BitsetView(bytes([0xFF]), 3)
    assert view.to_string(0, 100) == "111"


def test_to_string_from_offset():
    view = BitsetView(bytes([0b00000010]), 4)
    assert view.to_string(1, 3) == view.to_string(0, 4)[1:3]


def test_short_data_rejected():
    with pytest.raises(ValueError):
        BitsetView(bytes(1), 9)