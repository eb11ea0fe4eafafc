"""Shared fixtures: deterministic random sources for reproducible tests."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ssss.entropy import RandomSource


class SeededRandomSource(RandomSource):
    """Reproducible bytes from a seeded PRNG. Never use outside tests."""

    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)

    def random_bytes(self, n: int) -> bytes:
        return bytes(self._random.getrandbits(8) for _ in range(n))


class ScriptedRandomSource(RandomSource):
    """Returns pre-recorded chunks in order, one per call."""

    def __init__(self, chunks):
        self._chunks = [bytes(c) for c in chunks]
        self.calls = 0

    def random_bytes(self, n: int) -> bytes:
        chunk = self._chunks[self.calls]
        self.calls += 1
        assert len(chunk) == n, f"scripted chunk has {len(chunk)} bytes, {n} requested"
        return chunk


@pytest.fixture
def seeded_rng():
    return SeededRandomSource(seed=1234)
