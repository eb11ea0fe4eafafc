"""
ssss — Shamir's Secret Sharing over GF(2^8)
Split a secret into N shares so that any K of them rebuild it exactly and
fewer than K reveal nothing.

Shares travel as opaque text tokens: two nonce-randomized base-62 fields
joined by ``:``. Encoding the same share twice gives different tokens.

Usage:
    from ssss import SsssConfig, generate_shares, reconstruct
    tokens = generate_shares(SsssConfig(num_shares=5, threshold=3), b"s3cr37")
    assert reconstruct(tokens[:3]) == b"s3cr37"
"""

from ssss.config import SsssConfig, DEFAULT_NUM_SHARES, DEFAULT_THRESHOLD, DEFAULT_MAX_SECRET_SIZE
from ssss.codec import encode_share, decode_share
from ssss.entropy import RandomSource, SystemRandomSource
from ssss.errors import (
    SsssError,
    ConfigError,
    SecretError,
    SharesError,
    CodecError,
    SharesZero,
    ThresholdZero,
    ThresholdTooLow,
    TooManyShares,
    EmptySecret,
    SecretLength,
    EmptySharesMap,
    EmptyShare,
    ShareLengthMismatch,
    InvalidShareFormat,
    BadCharacter,
    IndexOutOfRange,
)
from ssss.logging import configure_logging
from ssss.shamir import (
    Share,
    Reconstruction,
    RejectedToken,
    split,
    combine,
    generate_shares,
    reconstruct,
    reconstruct_with_report,
    verify_shares,
)

__version__ = "0.1.0"
__all__ = [
    "SsssConfig",
    "DEFAULT_NUM_SHARES",
    "DEFAULT_THRESHOLD",
    "DEFAULT_MAX_SECRET_SIZE",
    "encode_share",
    "decode_share",
    "RandomSource",
    "SystemRandomSource",
    "SsssError",
    "ConfigError",
    "SecretError",
    "SharesError",
    "CodecError",
    "SharesZero",
    "ThresholdZero",
    "ThresholdTooLow",
    "TooManyShares",
    "EmptySecret",
    "SecretLength",
    "EmptySharesMap",
    "EmptyShare",
    "ShareLengthMismatch",
    "InvalidShareFormat",
    "BadCharacter",
    "IndexOutOfRange",
    "configure_logging",
    "Share",
    "Reconstruction",
    "RejectedToken",
    "split",
    "combine",
    "generate_shares",
    "reconstruct",
    "reconstruct_with_report",
    "verify_shares",
]
