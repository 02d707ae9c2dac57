import pytest

from ftformat.digits import itoa, to_decimal_unsigned, to_hex, to_unsigned


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, 123, -123, 2**31 - 1, -(2**31)])
def test_itoa_round_trips_within_int_range(n):
    assert int(itoa(n)) == n


def test_itoa_wraps_like_a_32_bit_int():
    assert itoa(2**31) == itoa(-(2**31))
    assert itoa(2**32 + 5) == itoa(5)
    assert itoa(-(2**31) - 1) == itoa(2**31 - 1)


@pytest.mark.parametrize("bad", ["5", 1.5, None])
def test_itoa_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        itoa(bad)


def test_to_unsigned_of_minus_one_is_max_uint():
    assert to_unsigned(-1) == 4294967295


@pytest.mark.parametrize("n", [0, 1, 255, 2**31, 2**32 - 1])
def test_to_unsigned_keeps_values_in_range(n):
    assert to_unsigned(n) == n


def test_to_unsigned_wraps_modulo_word():
    assert to_unsigned(2**32) == to_unsigned(0)
    assert to_unsigned(2**32 + 17) == to_unsigned(17)


def test_to_hex_pins_known_values():
    assert to_hex(255) == "ff"
    assert to_hex(255, True) == "FF"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**32 - 1, 2**64 - 1])
def test_to_hex_round_trips(n):
    assert int(to_hex(n), 16) == n
    assert int(to_hex(n, True), 16) == n


@pytest.mark.parametrize("n", [10, 171, 3054, 2**40 + 12345])
def test_to_hex_upper_matches_lower(n):
    assert to_hex(n, True) == to_hex(n).upper()
    assert set(to_hex(n)) <= set("0123456789abcdef")
    assert set(to_hex(n, True)) <= set("0123456789ABCDEF")


def test_to_hex_has_no_leading_zeros():
    for n in (1, 16, 256, 4095):
        assert not to_hex(n).startswith("0")


def test_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        to_hex(-1)


def test_to_hex_rejects_non_integer():
    with pytest.raises(TypeError):
        to_hex("ff")


@pytest.mark.parametrize("n", [-1, 0, 7, 123, -(2**31), 2**32 + 3])
def test_to_decimal_unsigned_matches_to_unsigned(n):
    assert int(to_decimal_unsigned(n)) == to_unsigned(n)
    assert to_decimal_unsigned(n) == str(to_unsigned(n))