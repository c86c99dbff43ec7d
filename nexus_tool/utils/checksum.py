"""
Checksum helpers for verifying downloaded assets.
"""

import hashlib
from typing import Optional


class StreamingHasher:
    """
    Incrementally hashes bytes as they are written to disk.

    A hasher created without an algorithm accepts updates and does nothing,
    so the download loop does not need to branch on whether verification is on.
    """

    def __init__(self, algorithm: Optional[str] = None) -> None:
        self.algorithm = algorithm
        self._hash = hashlib.new(algorithm) if algorithm else None

    def update(self, chunk: bytes) -> None:
        if self._hash is not None:
            self._hash.update(chunk)

    def hexdigest(self) -> Optional[str]:
        """Digest of everything seen so far, or None when not hashing."""
        if self._hash is None:
            return None
        return self._hash.hexdigest()

    def matches(self, expected: str) -> bool:
        """Compare against a published digest (case-insensitive)."""
        return self.hexdigest() == expected.lower()


__all__ = ["StreamingHasher"]
