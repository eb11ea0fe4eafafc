"""Tests for the randomized base-62 encoder and the share token codec."""

import os
import sys
import time
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ssss import base62
from ssss.codec import decode_share, encode_share
from ssss.errors import BadCharacter, IndexOutOfRange, InvalidShareFormat
from conftest import ScriptedRandomSource, SeededRandomSource


def test_base62_round_trip():
    for data in [b"", b"\x00", b"\x00\x00\x01", b"a", os.urandom(1), os.urandom(64)]:
        assert base62.decode(base62.encode(data)) == data


def test_base62_preserves_leading_zero_bytes():
    data = b"\x00\x00\x00hello"
    assert base62.decode(base62.encode(data)) == data


def test_base62_is_randomized():
    """Same input, different nonce, different text."""
    data = b"correct horse battery staple"
    encoded = {base62.encode(data) for _ in range(20)}
    assert len(encoded) == 20
    for text in encoded:
        assert base62.decode(text) == data


def test_base62_uses_alphabet_only():
    text = base62.encode(os.urandom(256))
    assert set(text) <= set(base62.ALPHABET)


def test_base62_marker_forced():
    """The first nonce byte is replaced by the marker, whatever the source says."""
    rng = ScriptedRandomSource([[0xFF] * 10])
    text = base62.encode(b"\x2a", rng)
    value = 0
    for c in reversed(text):
        value = value * 62 + base62.ALPHABET.index(c)
    assert value.to_bytes(11, "big") == bytes([1] + [0xFF] * 9 + [0x2A])


def test_base62_least_significant_digit_first():
    """With an all-zero nonce the value is 2^72 + payload."""
    rng = ScriptedRandomSource([[0] * 10])
    text = base62.encode(b"", rng)
    value = 1 << 72
    expected = []
    while value:
        value, r = divmod(value, 62)
        expected.append(base62.ALPHABET[r])
    assert text == "".join(expected)


def test_base62_empty_string_decodes_to_empty():
    assert base62.decode("") == b""


def test_base62_bad_character():
    with pytest.raises(BadCharacter) as exc_info:
        base62.decode("abc-def")
    assert exc_info.value.c == "-"


def test_base62_missing_prefix():
    """Short values can't carry the nonce prefix."""
    with pytest.raises(InvalidShareFormat):
        base62.decode("Z")


def test_encode_share_format():
    token = encode_share(3, b"payload", SeededRandomSource(seed=3))
    assert token.count(":") == 1
    index_part, payload_part = token.split(":")
    assert base62.decode(index_part) == b"\x03"
    assert base62.decode(payload_part) == b"payload"


def test_share_round_trip():
    for index in (1, 2, 128, 255):
        payload = os.urandom(32)
        assert decode_share(encode_share(index, payload)) == (index, payload)


def test_share_round_trip_empty_payload():
    assert decode_share(encode_share(9, b"")) == (9, b"")


def test_share_tokens_differ_each_time():
    first = encode_share(1, b"same")
    second = encode_share(1, b"same")
    assert first != second
    assert decode_share(first) == decode_share(second)


def test_encode_share_index_out_of_range():
    for index in (0, 256, -1):
        with pytest.raises(IndexOutOfRange) as exc_info:
            encode_share(index, b"x")
        assert exc_info.value.index == index


def test_decode_share_without_separator():
    with pytest.raises(InvalidShareFormat):
        decode_share("not-a-valid-token")


def test_decode_share_too_many_separators():
    token = encode_share(1, b"abc")
    with pytest.raises(InvalidShareFormat):
        decode_share(token + ":" + token)


def test_decode_share_bad_character():
    index_part, payload_part = encode_share(1, b"abc").split(":")
    with pytest.raises(BadCharacter):
        decode_share(f"{index_part}:{payload_part}!")


def test_decode_share_index_must_be_one_byte():
    wide_index = base62.encode(b"\x01\x02")
    with pytest.raises(InvalidShareFormat):
        decode_share(f"{wide_index}:{base62.encode(b'abc')}")

    with pytest.raises(InvalidShareFormat):
        decode_share(f":{base62.encode(b'abc')}")


def test_decode_share_rejects_zero_index():
    zero_index = base62.encode(b"\x00")
    with pytest.raises(InvalidShareFormat):
        decode_share(f"{zero_index}:{base62.encode(b'abc')}")


def _reference_encode(raw: bytes) -> str:
    """One digit per division, the plain definition of the format."""
    value = int.from_bytes(raw, "big")
    digits = []
    while value:
        value, r = divmod(value, 62)
        digits.append(base62.ALPHABET[r])
    return "".join(digits)


def test_base62_matches_digit_by_digit_conversion():
    """Split conversion produces the same text as peeling one digit at a time."""
    for size in (0, 1, 7, 31, 100, 1000):
        data = os.urandom(size)
        nonce = [0x55] * 10
        text = base62.encode(data, ScriptedRandomSource([nonce]))
        assert text == _reference_encode(bytes([1] + nonce[1:]) + data)
        assert base62.decode(text) == data


def test_base62_zero_digits_inside_value():
    """Runs of zero bytes produce interior '0' digits that must survive."""
    data = b"\xff" + b"\x00" * 500 + b"\x01"
    text = base62.encode(data, ScriptedRandomSource([[0] * 10]))
    assert text == _reference_encode(bytes([1] + [0] * 9) + data)
    assert base62.decode(text) == data


def test_base62_max_secret_size_is_fast():
    """A payload at the 65535-byte limit round-trips in a few seconds at most."""
    data = os.urandom(65535)
    start = time.perf_counter()
    text = base62.encode(data)
    assert base62.decode(text) == data
    elapsed = time.perf_counter() - start
    assert elapsed < 5.0, f"round trip took {elapsed:.1f}s"
