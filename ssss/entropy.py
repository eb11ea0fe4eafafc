"""
Randomness sources.

Coefficient generation and the share codec's nonce padding both need
unpredictable bytes. They take a ``RandomSource`` so tests can inject a
deterministic one; production code paths always fall back to the
operating system CSPRNG.
"""

import os
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Abstract provider of uniformly random bytes."""

    @abstractmethod
    def random_bytes(self, n: int) -> bytes:
        """
        Return ``n`` random bytes.

        Args:
            n: Number of bytes to draw. Zero returns ``b""``.

        Returns:
            Exactly ``n`` bytes.
        """


class SystemRandomSource(RandomSource):
    """Cryptographically secure bytes from ``os.urandom``."""

    def random_bytes(self, n: int) -> bytes:
        return os.urandom(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


_SYSTEM_SOURCE = SystemRandomSource()


def default_source(rng: RandomSource | None = None) -> RandomSource:
    """Return ``rng`` if given, otherwise the shared system source."""
    return rng if rng is not None else _SYSTEM_SOURCE
