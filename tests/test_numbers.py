import pytest

from ftkit.numbers import int_len, long_len, signed_number_len, unsigned_number_len


def test_zero_is_one_position():
    assert int_len(0) == 1
    assert long_len(0) == 1
    assert signed_number_len(0) == 1
    assert unsigned_number_len(0) == 1


def test_single_digits_share_length():
    for n in range(1, 10):
        assert int_len(n) == int_len(0)
        assert long_len(n) == long_len(0)
        assert signed_number_len(n) == signed_number_len(0)
        assert unsigned_number_len(n) == unsigned_number_len(0)


def test_times_ten_adds_one():
    for n in (1, 7, 42, 999, 12345):
        assert int_len(n * 10) == int_len(n) + 1
        assert long_len(n * 10) == long_len(n) + 1
        assert signed_number_len(n * 10) == signed_number_len(n) + 1
        assert unsigned_number_len(n * 10) == unsigned_number_len(n) + 1


def test_negative_counts_as_one():
    for value in (-5, -123456):
        assert int_len(value) == 1
        assert long_len(value) == 1
        assert signed_number_len(value) == 1


def test_int_max_matches_min_text():
    assert int_len(2**31 - 1) == len("-2147483648") - 1


def test_unsigned_max():
    assert unsigned_number_len(2**64 - 1) == 20


def test_long_widths_agree():
    for n in (3, 81, 2**40, 2**63 - 1):
        assert long_len(n) == signed_number_len(n)


def test_int_len_out_of_range():
    with pytest.raises(OverflowError):
        int_len(2**31)
    with pytest.raises(OverflowError):
        int_len(-(2**31) - 1)


def test_long_len_out_of_range():
    with pytest.raises(OverflowError):
        long_len(2**63)


def test_signed_number_len_out_of_range():
    with pytest.raises(OverflowError):
        signed_number_len(-(2**63) - 1)


def test_unsigned_number_len_out_of_range():
    with pytest.raises(OverflowError):
        unsigned_number_len(-1)
    with pytest.raises(OverflowError):
        unsigned_number_len(2**64)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        int_len(1.5)