"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming full-content fingerprinting.

This implementation ensures predictable behavior:
- Files are read in fixed-size chunks, so memory use does not depend on file size
- Exactly the bytes read are fed to the digest (the last chunk may be short)
- Read failures surface as FileReadError; the caller decides whether to skip
"""

import hashlib
import logging
from typing import Dict, Optional

import xxhash

from onecopy.core.interfaces import HashAlgorithm, DigestAccumulator
from onecopy.core.models import (
    ContentFingerprint,
    FileReadError,
    HashAlgorithmName,
    ScanConfig,
)

logger = logging.getLogger(__name__)


class Sha256AlgorithmImpl:
    """SHA-256 via hashlib. Default fingerprint function."""
    name = HashAlgorithmName.SHA256.value

    def new(self) -> DigestAccumulator:
        return hashlib.sha256()


class Blake2bAlgorithmImpl:
    """BLAKE2b (64-byte digest) via hashlib."""
    name = HashAlgorithmName.BLAKE2B.value

    def new(self) -> DigestAccumulator:
        return hashlib.blake2b()


class XXHashAlgorithmImpl:
    """
    xxHash128 via the xxhash library.
    Much faster than the cryptographic options but not collision resistant
    against crafted input.
    """
    name = HashAlgorithmName.XXH128.value

    def new(self) -> DigestAccumulator:
        return xxhash.xxh128()


_ALGORITHMS: Dict[HashAlgorithmName, type] = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.BLAKE2B: Blake2bAlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns the algorithm implementation registered for an enum value."""
    try:
        return _ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from None


class HasherImpl:
    """
    Concrete Hasher that streams a file through an incremental digest.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None,
                 chunk_size: int = ScanConfig.DEFAULT_CHUNK_SIZE):
        if not isinstance(chunk_size, int) or chunk_size <= 0:
            raise ValueError("Chunk size must be a positive integer")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size
        self.bytes_hashed = 0

    def compute_fingerprint(self, path: str) -> ContentFingerprint:
        """
        Computes the hex digest of the entire file.

        Args:
            path: Path to the file

        Returns:
            str: Hex digest of the file content

        Raises:
            FileReadError: If the file cannot be opened or a read fails
        """
        digest = self.algorithm.new()
        read_total = 0
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    digest.update(chunk)
                    read_total += len(chunk)
        except OSError as e:
            raise FileReadError(f"Failed to read {path}: {e}", path=path) from e

        self.bytes_hashed += read_total
        fingerprint = digest.hexdigest()
        logger.debug(f"{self.algorithm.name} {fingerprint} {path} ({read_total} bytes)")
        return fingerprint
