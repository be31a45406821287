from pytest import raises

from tinybencode import (
    ERR_KEY_ORDER,
    BDecodeError,
    DecodeOptions,
    bdecode,
    bencode,
)

TORRENT = (
    b"d8:announce35:http://tracker.example.org/announce"
    b"13:creation datei1700000000e"
    b"4:infod6:lengthi1048576e4:name8:test.iso"
    b"12:piece lengthi262144e6:pieces20:\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09"
    b"\x0a\x0b\x0c\x0d\x0e\x0f\x10\x11\x12\x13ee"
)


def test_roundtrip_torrent_bytes():
    assert bencode(bdecode(TORRENT)) == TORRENT


def test_roundtrip_random_values(random_value):
    for seed in range(200):
        value = random_value(seed)
        encoded = bencode(value)
        decoded = bdecode(encoded)
        assert decoded == value, seed
        assert bencode(decoded) == encoded, seed


def test_roundtrip_preserves_dict_order(random_value):
    for seed in range(50):
        encoded = bencode(random_value(seed))
        stack = [bdecode(encoded)]
        while stack:
            value = stack.pop()
            if isinstance(value, dict):
                assert list(value) == sorted(value)
                stack.extend(value.values())
            elif isinstance(value, list):
                stack.extend(value)


def test_canonicalization():
    unordered = b"d4:spam4:eggs3:cow3:mooe"
    with raises(BDecodeError) as exc_info:
        bdecode(unordered)
    assert exc_info.value.code == ERR_KEY_ORDER

    value = bdecode(unordered, DecodeOptions(allow_unordered_keys=True))
    canonical = bencode(value)
    assert canonical == b"d3:cow3:moo4:spam4:eggse"
    assert bdecode(canonical) == {b"cow": b"moo", b"spam": b"eggs"}


def test_idempotence():
    value = {b"z": [1, -2, b"x"], b"a": {b"nested": [[], {}]}}
    first = bencode(value)
    second = bencode(bdecode(first))
    assert first == second
    assert bdecode(second) == bdecode(first) == value


def test_deterministic():
    assert bdecode(TORRENT) == bdecode(TORRENT)
    assert bencode(bdecode(TORRENT)) == bencode(bdecode(TORRENT))
