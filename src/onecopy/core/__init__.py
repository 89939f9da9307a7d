"""
Core duplicate-detection engine — walker, hasher, index builder and planner.

This package contains the foundation of onecopy:
- FileScannerImpl: lazy recursive traversal yielding regular files in sorted order
- HasherImpl + algorithm implementations: streaming SHA-256 / BLAKE2b / xxHash128
- FileGrouperImpl: fingerprint → paths indexing with per-file failure tolerance
- PlanBuilder: keeper selection and reclaimable-size accounting
- Models: FileRecord, DuplicateIndex, DuplicateGroup, DeletionPlan and friends

All components are pure Python with no console I/O — suitable for CLI and embedding.
"""

from .models import (
    FileRecord, DuplicateIndex, DuplicateGroup, DeletionPlan, DeletionOutcome,
    DeletionResult, DeletionStatus, HashAlgorithmName, ScanParams, ScanResult,
    ScanStats, SkippedFile, OneCopyError, FileReadError, FilesystemError)
from .scanner import FileScannerImpl
from .hasher import (
    HasherImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl, XXHashAlgorithmImpl, get_algorithm)
from .grouper import FileGrouperImpl
from .planner import PlanBuilder

__all__ = [
    "FileScannerImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "Blake2bAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "FileGrouperImpl",
    "PlanBuilder",
    "FileRecord",
    "DuplicateIndex",
    "DuplicateGroup",
    "DeletionPlan",
    "DeletionOutcome",
    "DeletionResult",
    "DeletionStatus",
    "HashAlgorithmName",
    "ScanParams",
    "ScanResult",
    "ScanStats",
    "SkippedFile",
    "OneCopyError",
    "FileReadError",
    "FilesystemError",
]
