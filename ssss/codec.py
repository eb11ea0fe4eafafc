"""
Share Codec
Serialize one share to a portable text token and back.

Token format is ``<base62 index>:<base62 payload>``. Both fields are
encoded independently with their own random nonce, so tokens for the same
share differ every time they are produced.
"""

from ssss import base62
from ssss.entropy import RandomSource
from ssss.errors import IndexOutOfRange, InvalidShareFormat

SEPARATOR = ":"
MIN_INDEX = 1
MAX_INDEX = 255


def encode_share(index: int, payload: bytes, rng: RandomSource | None = None) -> str:
    """
    Encode a share as a text token.

    Args:
        index: The share's x-coordinate, 1 through 255.
        payload: The share's y-values, one byte per secret byte.
        rng: Random source for the nonces. Defaults to the system CSPRNG.

    Returns:
        The token string.

    Raises:
        IndexOutOfRange: If ``index`` does not fit a single non-zero byte.
    """
    if not MIN_INDEX <= index <= MAX_INDEX:
        raise IndexOutOfRange(index)

    index_field = base62.encode(bytes([index]), rng)
    payload_field = base62.encode(payload, rng)
    return f"{index_field}{SEPARATOR}{payload_field}"


def decode_share(token: str) -> tuple[int, bytes]:
    """
    Decode a text token into ``(index, payload)``.

    Raises:
        InvalidShareFormat: If the token does not have exactly two fields,
            or the index field is not a single byte in 1..255.
        BadCharacter: If either field contains a non base-62 character.
    """
    parts = token.split(SEPARATOR)
    if len(parts) != 2:
        raise InvalidShareFormat(f"expected 2 fields, found {len(parts)}")

    index_bytes = base62.decode(parts[0])
    if len(index_bytes) != 1:
        raise InvalidShareFormat("index must decode to a single byte")
    index = index_bytes[0]
    if index < MIN_INDEX:
        raise InvalidShareFormat("index must be non-zero")

    payload = base62.decode(parts[1])
    return index, payload
