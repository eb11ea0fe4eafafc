"""
Sharing configuration: how many shares to produce, how many unlock the
secret, and how large a secret may be.
"""

from dataclasses import asdict, dataclass, replace

from ssss.errors import (
    EmptySecret,
    SecretLength,
    SharesZero,
    ThresholdTooLow,
    ThresholdZero,
    TooManyShares,
)

MAX_SHARES = 255
DEFAULT_NUM_SHARES = 5
DEFAULT_THRESHOLD = 3
DEFAULT_MAX_SECRET_SIZE = 65535


@dataclass(frozen=True)
class SsssConfig:
    """
    Parameters for share generation.

    The defaults produce 5 shares, any 3 of which unlock a secret of up to
    65535 bytes. Instances are never validated on construction; call
    :meth:`validate` (``generate_shares`` does it for you).
    """
    num_shares: int = DEFAULT_NUM_SHARES   # N, total shares to generate
    threshold: int = DEFAULT_THRESHOLD     # K, shares needed to unlock
    max_secret_size: int = DEFAULT_MAX_SECRET_SIZE

    def validate(self) -> None:
        """
        Check ``1 <= threshold <= num_shares <= 255``.

        Raises:
            SharesZero, ThresholdZero, TooManyShares, ThresholdTooLow:
                Checked in that order.
        """
        if self.num_shares < 1:
            raise SharesZero()
        if self.threshold < 1:
            raise ThresholdZero()
        if self.num_shares > MAX_SHARES:
            raise TooManyShares(self.num_shares, MAX_SHARES)
        if self.threshold > self.num_shares:
            raise ThresholdTooLow(self.threshold, self.num_shares)

    def validate_secret(self, secret: bytes) -> None:
        """Raise ``EmptySecret`` or ``SecretLength`` if ``secret`` can't be split."""
        if len(secret) == 0:
            raise EmptySecret()
        if len(secret) > self.max_secret_size:
            raise SecretLength(len(secret), self.max_secret_size)

    def with_num_shares(self, num_shares: int) -> "SsssConfig":
        return replace(self, num_shares=num_shares)

    def with_threshold(self, threshold: int) -> "SsssConfig":
        return replace(self, threshold=threshold)

    def with_max_secret_size(self, max_secret_size: int) -> "SsssConfig":
        return replace(self, max_secret_size=max_secret_size)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SsssConfig":
        """Build a config from a mapping. Missing keys take their defaults."""
        return cls(
            num_shares=int(data.get("num_shares", DEFAULT_NUM_SHARES)),
            threshold=int(data.get("threshold", DEFAULT_THRESHOLD)),
            max_secret_size=int(data.get("max_secret_size", DEFAULT_MAX_SECRET_SIZE)),
        )
