"""
Randomized Base-62
Turn raw bytes into an opaque alphanumeric string and back.

Before encoding, the bytes are prefixed with a 10-byte random nonce whose
first byte is forced to a fixed marker. The whole buffer is read as one big
unsigned integer and written out in base 62, least significant digit first.
Encoding the same bytes twice therefore gives two different strings. This
is obfuscation, not compression or authentication.

Conversion splits the integer in halves by powers of 62 rather than peeling
one digit per full-width division, so large payloads stay fast.
"""

import math

from ssss.entropy import RandomSource, default_source
from ssss.errors import BadCharacter, InvalidShareFormat

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
PREFIX_SIZE = 10
MARKER = 1

# Below this many digits, convert one digit at a time
_LEAF_WIDTH = 8
_BITS_PER_DIGIT = math.log2(BASE)


def _power(width: int, powers: dict[int, int]) -> int:
    p = powers.get(width)
    if p is None:
        p = powers[width] = BASE ** width
    return p


def _emit(value: int, width: int, powers: dict[int, int], digits: list[str]) -> None:
    """Append exactly ``width`` digits of ``value`` (< 62**width), least significant first."""
    if width <= _LEAF_WIDTH:
        for _ in range(width):
            value, remainder = divmod(value, BASE)
            digits.append(ALPHABET[remainder])
        return

    half = width // 2
    high, low = divmod(value, _power(half, powers))
    _emit(low, half, powers, digits)
    _emit(high, width - half, powers, digits)


def _fold(values: list[int], powers: dict[int, int]) -> int:
    """Combine digit values, least significant first, into one integer."""
    if len(values) <= _LEAF_WIDTH:
        result = 0
        for v in reversed(values):
            result = result * BASE + v
        return result

    half = len(values) // 2
    high = _fold(values[half:], powers)
    low = _fold(values[:half], powers)
    return high * _power(half, powers) + low


def encode(data: bytes, rng: RandomSource | None = None) -> str:
    """
    Encode bytes as a nonce-randomized base-62 string.

    Args:
        data: The bytes to encode. May be empty.
        rng: Random source for the nonce. Defaults to the system CSPRNG.

    Returns:
        A string over ``ALPHABET``. Never empty, since the marker byte
        keeps the integer above zero.
    """
    nonce = bytearray(default_source(rng).random_bytes(PREFIX_SIZE))
    nonce[0] = MARKER
    value = int.from_bytes(bytes(nonce) + bytes(data), "big")

    # Over-estimate the width; surplus high digits are zeros and get trimmed
    width = int(value.bit_length() / _BITS_PER_DIGIT) + 2
    digits: list[str] = []
    _emit(value, width, {}, digits)
    return "".join(digits).rstrip(ALPHABET[0])


def _digit(c: str) -> int:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 36
    raise BadCharacter(c)


def decode(text: str) -> bytes:
    """
    Decode a string produced by :func:`encode` and strip the nonce.

    Args:
        text: Base-62 string, least significant digit first.

    Returns:
        The original bytes. An empty string decodes to ``b""``.

    Raises:
        BadCharacter: If ``text`` contains a character outside ``ALPHABET``.
        InvalidShareFormat: If the decoded value does not carry the nonce prefix.
    """
    if not text:
        return b""

    value = _fold([_digit(c) for c in text], {})

    raw = value.to_bytes((value.bit_length() + 7) // 8, "big")
    if len(raw) < PREFIX_SIZE or raw[0] != MARKER:
        raise InvalidShareFormat("missing nonce prefix")
    return raw[PREFIX_SIZE:]
