"""
Error Taxonomy
Every failure the library raises is one of the kinds below.

All of them are terminal: nothing inside the library retries or recovers.
Catch ``SsssError`` to handle any of them, or one of the group bases
(``ConfigError``, ``SecretError``, ``SharesError``, ``CodecError``) to
handle a family.
"""


class SsssError(Exception):
    """Base exception for all secret sharing failures."""


class ConfigError(SsssError):
    """Raised when a configuration cannot drive share generation."""


class SecretError(SsssError):
    """Raised when a secret cannot be split."""


class SharesError(SsssError):
    """Raised when a set of shares cannot be reconstructed."""


class CodecError(SsssError):
    """Raised when a share token cannot be encoded or decoded."""


class SharesZero(ConfigError):
    def __init__(self):
        super().__init__("The number of shares must be greater than 0")


class ThresholdZero(ConfigError):
    def __init__(self):
        super().__init__("The threshold must be greater than 0")


class ThresholdTooLow(ConfigError):
    """The threshold is larger than the number of shares."""

    def __init__(self, threshold: int, shares: int):
        self.threshold = threshold
        self.shares = shares
        super().__init__(
            "You have specified an invalid threshold. It must be less than or "
            f"equal to the number of shares. ({threshold} is not <= {shares})"
        )


class TooManyShares(ConfigError):
    """Share indices are single field elements, so at most 255 exist."""

    def __init__(self, shares: int, max: int):
        self.shares = shares
        self.max = max
        super().__init__(
            f"The number of shares '{shares}' is larger than the maximum allowed '{max}'"
        )


class EmptySecret(SecretError):
    def __init__(self):
        super().__init__("The secret cannot be empty")


class SecretLength(SecretError):
    def __init__(self, length: int, max: int):
        self.length = length
        self.max = max
        super().__init__(
            f"The secret length '{length}' is longer than the maximum allowed '{max}'"
        )


class EmptySharesMap(SharesError):
    def __init__(self):
        super().__init__("The shares map cannot be empty")


class EmptyShare(SharesError):
    def __init__(self):
        super().__init__("A share cannot be empty")


class ShareLengthMismatch(SharesError):
    def __init__(self):
        super().__init__("The shares must be the same length")


class InvalidShareFormat(CodecError):
    def __init__(self, reason: str = ""):
        self.reason = reason
        message = "The share is not in a valid format"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BadCharacter(CodecError):
    """A character outside the base-62 alphabet was found in a token."""

    def __init__(self, c: str):
        self.c = c
        super().__init__(f"Invalid character '{c}' found in share")


class IndexOutOfRange(CodecError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"The share index '{index}' does not fit in a single byte (1-255)")


__all__ = [
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
]
