from tinybencode.utils import decode_int_digits


def test_decode_small():
    assert decode_int_digits(b"0") == 0
    assert decode_int_digits(b"7") == 7
    assert decode_int_digits(b"-12") == -12
    assert decode_int_digits(b"18446744073709551616") == 2**64


def test_decode_long():
    assert decode_int_digits(b"1" + b"0" * 4000) == 10**4000
    assert decode_int_digits(b"1" + b"0" * 12345) == 10**12345
    assert decode_int_digits(b"-1" + b"0" * 8000) == -(10**8000)


def test_decode_long_with_inner_zeros():
    digits = b"9" + b"0" * 7999 + b"1"
    assert decode_int_digits(digits) == 9 * 10**8000 + 1
