"""
Shamir's Secret Sharing
Split a secret into N shares where any K can reconstruct it.

Each byte of the secret becomes the constant term of its own random
polynomial of degree K-1 over GF(2^8). Share i holds the value of every
one of those polynomials at x=i. Any K shares pin down each polynomial
and recover its constant term by Lagrange interpolation. Fewer than K
shares are consistent with every possible secret byte.

Reconstruction cannot tell a right answer from a wrong one: too few
shares, forged shares or shares from another split all produce a
well-formed but incorrect secret of the right length.
"""

import hmac
from dataclasses import dataclass, field

from ssss.codec import decode_share, encode_share
from ssss.config import SsssConfig
from ssss.entropy import RandomSource
from ssss.errors import (
    CodecError,
    EmptyShare,
    EmptySharesMap,
    IndexOutOfRange,
    ShareLengthMismatch,
    SsssError,
)
from ssss.gf256 import eval_poly, generate_coefficients, interpolate
from ssss.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Share:
    """A single share of a split secret."""
    index: int      # The x-coordinate (1-255, never 0)
    payload: bytes  # One y-value per secret byte

    def to_token(self, rng: RandomSource | None = None) -> str:
        """Serialize to a portable, nonce-randomized text token."""
        return encode_share(self.index, self.payload, rng)

    @classmethod
    def from_token(cls, token: str) -> "Share":
        """Deserialize from a text token."""
        index, payload = decode_share(token)
        return cls(index=index, payload=payload)


@dataclass
class RejectedToken:
    """A token that could not be decoded during reconstruction."""
    position: int       # Position in the caller's token list
    error: CodecError


@dataclass
class Reconstruction:
    """Result of reconstructing a secret, with any tokens that were skipped."""
    secret: bytes
    rejected: list[RejectedToken] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True if every supplied token was decoded and used."""
        return not self.rejected


def split(config: SsssConfig, secret: bytes, rng: RandomSource | None = None) -> list[Share]:
    """
    Split a secret into shares using Shamir's Secret Sharing.

    Args:
        config: Share count, threshold and size limit.
        secret: The secret bytes to split.
        rng: Random source for the polynomials. Defaults to the system CSPRNG.

    Returns:
        List of ``config.num_shares`` shares with indices 1..N.

    Raises:
        EmptySecret, SecretLength: If the secret is empty or too long.
        ConfigError: If the configuration is invalid.
    """
    secret = bytes(secret)
    config.validate_secret(secret)
    config.validate()

    # One polynomial per secret byte: f(x) = byte + a1*x + ... + a(k-1)*x^(k-1)
    polynomials = [generate_coefficients(config.threshold, b, rng) for b in secret]

    shares = []
    for x in range(1, config.num_shares + 1):
        payload = bytes(eval_poly(poly, x) for poly in polynomials)
        shares.append(Share(index=x, payload=payload))
    return shares


def _validate_shares(shares: dict[int, bytes]) -> int:
    """Check the decoded share set and return the common payload length."""
    if not shares:
        raise EmptySharesMap()

    lengths = [len(payload) for payload in shares.values()]
    length = lengths[0]
    if length == 0:
        raise EmptyShare()
    if any(other != length for other in lengths):
        raise ShareLengthMismatch()
    return length


def combine(shares) -> bytes:
    """
    Reconstruct a secret from shares using Lagrange interpolation.

    Shares with the same index collapse to one; the last one wins.

    Args:
        shares: Iterable of ``Share``. K or more are needed for a correct result.

    Returns:
        The reconstructed secret bytes.

    Raises:
        EmptySharesMap, EmptyShare, ShareLengthMismatch: If the share set is unusable.
    """
    by_index = {share.index: share.payload for share in shares}
    length = _validate_shares(by_index)

    points = list(by_index.items())
    return bytes(
        interpolate([(x, payload[position]) for x, payload in points])
        for position in range(length)
    )


def generate_shares(
    config: SsssConfig, secret: bytes, rng: RandomSource | None = None
) -> list[str]:
    """
    Split a secret and encode every share as a text token.

    Args:
        config: Share count, threshold and size limit.
        secret: The secret bytes to split.
        rng: Random source for polynomials and token nonces.

    Returns:
        One token per share, in index order.

    Raises:
        SsssError: On an invalid secret or configuration.
    """
    shares = split(config, secret, rng)

    tokens = []
    for share in shares:
        try:
            tokens.append(share.to_token(rng))
        except IndexOutOfRange as e:
            logger.warning("shares.token_dropped", index=e.index)

    logger.debug(
        "shares.generated",
        num_shares=len(tokens),
        threshold=config.threshold,
        secret_length=len(shares[0].payload),
    )
    return tokens


def reconstruct_with_report(tokens) -> Reconstruction:
    """
    Reconstruct a secret from tokens and report the ones that were skipped.

    Tokens that fail to decode are left out of the interpolation and listed
    in ``Reconstruction.rejected`` with their position and error.

    Raises:
        EmptySharesMap: If no token could be decoded.
        EmptyShare, ShareLengthMismatch: If the decoded shares are unusable.
    """
    shares = []
    rejected = []
    for position, token in enumerate(tokens):
        try:
            shares.append(Share.from_token(token))
        except CodecError as e:
            logger.warning(
                "shares.token_rejected", position=position, error=type(e).__name__
            )
            rejected.append(RejectedToken(position=position, error=e))

    secret = combine(shares)
    logger.debug("shares.reconstructed", used=len(shares), rejected=len(rejected))
    return Reconstruction(secret=secret, rejected=rejected)


def reconstruct(tokens) -> bytes:
    """
    Reconstruct a secret from share tokens.

    Undecodable tokens are skipped (and logged). Use
    :func:`reconstruct_with_report` to find out which ones.

    Args:
        tokens: Share tokens from :func:`generate_shares`.

    Returns:
        The reconstructed secret bytes.
    """
    return reconstruct_with_report(tokens).secret


def verify_shares(shares: list[Share], secret: bytes) -> bool:
    """Verify that a set of shares correctly reconstructs the secret."""
    try:
        reconstructed = combine(shares)
    except SsssError:
        return False
    return hmac.compare_digest(reconstructed, bytes(secret))
