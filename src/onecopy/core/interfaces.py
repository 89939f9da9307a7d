"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate-detection engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hashers, walkers and groupers can be swapped in tests without subclassing.

Key Components:
---------------
- DigestAccumulator: incremental digest object (hashlib / xxhash shape).
- HashAlgorithm: factory for digest accumulators (SHA-256, BLAKE2b, xxHash128).
- Hasher: computes a full-content fingerprint for one file.
- FileScanner: lazily enumerates regular files under a root directory.
- FileGrouper: builds the DuplicateIndex from a stream of paths.
"""

from typing import Protocol, Iterable, Iterator, Optional, Callable
from onecopy.core.models import ContentFingerprint, DuplicateIndex


ProgressCallback = Callable[[str, int, Optional[str]], None]
StoppedFlag = Callable[[], bool]


# ===== Interfaces =====

class DigestAccumulator(Protocol):
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, BLAKE2b, or xxHash
    without affecting the rest of the duplicate-detection logic.
    """
    name: str

    def new(self) -> DigestAccumulator:
        """Returns a fresh incremental digest."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting the full content of a file."""
    def compute_fingerprint(self, path: str) -> ContentFingerprint: ...


class FileScanner(Protocol):
    """
    Interface for enumerating regular files under a root directory.
    """
    def walk(self, stopped_flag: Optional[StoppedFlag] = None) -> Iterator[str]:
        """
        Lazily yield the path of every regular file under the root.

        Args:
            stopped_flag: Function that returns True if the walk should end early.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by content fingerprint.
    """
    def build_index(
        self,
        paths: Iterable[str],
        progress_callback: Optional[ProgressCallback] = None,
        stopped_flag: Optional[StoppedFlag] = None
    ) -> DuplicateIndex:
        """
        Hash every path and index it under its fingerprint.

        Args:
            paths: Paths in discovery order.
            progress_callback: (stage, current, path) called before each file is hashed.
            stopped_flag: Function that returns True if indexing should stop.

        Returns:
            A frozen DuplicateIndex.
        """
        ...
