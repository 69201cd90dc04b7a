"""Seedable random source used for target selection.

A single ``RandomSource`` is not safe for concurrent use; the simulation is
single-threaded and each battle owns its own source.
"""

from __future__ import annotations

import hashlib
from random import Random


def derive_seed(base_seed: int, *, stream: str, purpose: str) -> int:
    payload = f"{base_seed}|{stream}|{purpose}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "big")


class RandomSource:
    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    @classmethod
    def derived(cls, base_seed: int, stream: str, purpose: str) -> "RandomSource":
        return cls(derive_seed(base_seed, stream=stream, purpose=purpose))

    def pick_index(self, count: int) -> int:
        """Uniform index in ``[0, count)``."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return self._random.randrange(count)

    def between(self, low: int, high: int) -> int:
        """Uniform integer in the half-open range ``[low, high)``."""
        if high <= low:
            raise ValueError(f"high ({high}) must be greater than low ({low})")
        return self._random.randrange(low, high)

    def between_inclusive(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"high ({high}) must not be less than low ({low})")
        return self._random.randint(low, high)
