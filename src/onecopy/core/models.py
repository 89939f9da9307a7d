"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and domain logic for content scanning and duplicate removal.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Iterator, Tuple
from enum import Enum


# =============================
# Exceptions
# =============================

class OneCopyError(RuntimeError):
    """Base error for all failures raised by the duplicate-detection engine."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class FileReadError(OneCopyError):
    """A file could not be opened or read while computing its fingerprint."""


class FilesystemError(OneCopyError):
    """Root validation, enumeration, size query or deletion failed."""


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Digest function used to fingerprint file content.
    """
    SHA256 = "sha256"
    BLAKE2B = "blake2b"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for report output."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.BLAKE2B: "BLAKE2b",
            HashAlgorithmName.XXH128: "xxHash128",
        }
        return mapping.get(self, self.value)

    @property
    def is_cryptographic(self) -> bool:
        return self is not HashAlgorithmName.XXH128

    def __repr__(self) -> str:
        return self.value


class DeletionStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


# ======================
#  Core Data Models
# ======================

ContentFingerprint = str


@dataclass
class FileRecord:
    """
    A path plus its on-disk size.
    Size is filled in lazily by the sizing pass; None means unknown.
    """
    path: str
    size: Optional[int] = None

    @property
    def size_known(self) -> bool:
        return self.size is not None

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


class DuplicateIndex:
    """
    Insertion-ordered mapping of content fingerprint to the paths sharing it.

    Paths under one fingerprint keep the order in which they were added, which
    is the walker's discovery order. A path may be indexed only once.
    The index is built by a single pass and frozen afterwards.
    """

    def __init__(self):
        self._entries: Dict[ContentFingerprint, List[str]] = {}
        self._paths = set()
        self._frozen = False

    def add(self, fingerprint: ContentFingerprint, path: str) -> None:
        if self._frozen:
            raise RuntimeError("DuplicateIndex is frozen and cannot be modified")
        if path in self._paths:
            raise ValueError(f"Path already indexed: {path}")
        self._entries.setdefault(fingerprint, []).append(path)
        self._paths.add(path)

    def freeze(self) -> "DuplicateIndex":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def paths_for(self, fingerprint: ContentFingerprint) -> List[str]:
        """Copy of the paths stored under a fingerprint (empty if absent)."""
        return list(self._entries.get(fingerprint, []))

    def entries(self) -> Iterator[Tuple[ContentFingerprint, List[str]]]:
        """Yields (fingerprint, paths) pairs in key insertion order."""
        for fingerprint, paths in self._entries.items():
            yield fingerprint, list(paths)

    def duplicate_entries(self) -> Iterator[Tuple[ContentFingerprint, List[str]]]:
        """Only the entries holding two or more paths."""
        for fingerprint, paths in self.entries():
            if len(paths) > 1:
                yield fingerprint, paths

    def all_paths(self) -> List[str]:
        return [path for paths in self._entries.values() for path in paths]

    @property
    def file_count(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        """Number of distinct fingerprints."""
        return len(self._entries)

    def __repr__(self):
        return f"<DuplicateIndex fingerprints={len(self._entries)}, files={len(self._paths)}>"


@dataclass
class DuplicateGroup:
    """
    Two or more files sharing one fingerprint.
    The keeper is the first file seen during the scan and is never deleted;
    every other file is a deletion candidate.
    """
    fingerprint: ContentFingerprint
    keeper: FileRecord
    candidates: List[FileRecord] = field(default_factory=list)

    def __post_init__(self):
        if not self.candidates:
            raise ValueError("A duplicate group needs at least one candidate")
        if any(c.path == self.keeper.path for c in self.candidates):
            raise ValueError(f"Keeper cannot be a deletion candidate: {self.keeper.path}")

    @property
    def size(self) -> int:
        """How many files are in this group, keeper included."""
        return len(self.candidates) + 1

    @property
    def reclaimable(self) -> int:
        """Sum of known candidate sizes."""
        return sum(c.size for c in self.candidates if c.size is not None)

    @property
    def paths(self) -> List[str]:
        return [self.keeper.path] + [c.path for c in self.candidates]

    def __repr__(self):
        return f"<DuplicateGroup keeper={self.keeper.path}, count={self.size}>"


@dataclass
class SkippedFile:
    """A file or directory left out of the scan, with the reason why."""
    path: str
    reason: str


@dataclass
class DeletionPlan:
    """
    Every deletion candidate across all groups plus their total known size.
    Built once from a frozen index and consumed by a single confirm/execute step.
    """
    groups: List[DuplicateGroup] = field(default_factory=list)
    total_reclaimable: int = 0
    size_errors: List[SkippedFile] = field(default_factory=list)

    @property
    def candidates(self) -> List[str]:
        return [c.path for group in self.groups for c in group.candidates]

    @property
    def candidate_count(self) -> int:
        return sum(len(group.candidates) for group in self.groups)

    @property
    def is_empty(self) -> bool:
        return not self.groups


@dataclass
class DeletionOutcome:
    path: str
    status: DeletionStatus
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is DeletionStatus.SUCCESS


@dataclass
class DeletionResult:
    """Per-file results of a best-effort batch deletion."""
    outcomes: List[DeletionOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> List[DeletionOutcome]:
        return [o for o in self.outcomes if not o.ok]


@dataclass
class ScanStats:
    """
    Counters collected while walking and hashing one tree.
    """
    files_found: int = 0
    files_hashed: int = 0
    files_skipped: int = 0
    bytes_hashed: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files found: {self.files_found}",
            f"Files hashed: {self.files_hashed}",
            f"Files skipped: {self.files_skipped}",
            f"Bytes hashed: {self.bytes_hashed}",
        ]
        return "\n".join(lines)


@dataclass
class ScanResult:
    """Everything a single scan produced: the index, the plan and what was left out."""
    index: DuplicateIndex
    plan: DeletionPlan
    skipped: List[SkippedFile] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)


# =============================
# Configuration
# =============================


class ScanConfig:
    # 128 KiB balances syscall overhead against memory footprint
    DEFAULT_CHUNK_SIZE = 128 * 1024


@dataclass
class ScanParams:
    """Parameters for one scan and its optional deletion step."""
    root_dir: str
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    chunk_size: int = ScanConfig.DEFAULT_CHUNK_SIZE
    use_trash: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise ValueError("Chunk size must be a positive integer")

        if isinstance(self.algorithm, str):
            self.algorithm = HashAlgorithmName(self.algorithm)
