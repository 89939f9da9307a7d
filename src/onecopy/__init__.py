"""
onecopy — find files with identical content and keep only one copy.

Core features:
- Streaming full-content hashing (SHA-256 by default) with bounded memory
- First-seen copy is kept, every other copy becomes a deletion candidate
- Single batch confirmation before anything is deleted
- Optional move to system trash (via send2trash) instead of permanent deletion
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("onecopy")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API — only what users should import directly
from onecopy.commands import DeduplicationCommand
from onecopy.core import (
    ScanParams, ScanResult, HashAlgorithmName, DuplicateIndex, DuplicateGroup,
    DeletionPlan, DeletionResult, FileRecord)
from onecopy.utils.convert_utils import ConvertUtils
from onecopy.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "ScanParams",
    "ScanResult",
    "HashAlgorithmName",
    "DuplicateIndex",
    "DuplicateGroup",
    "DeletionPlan",
    "DeletionResult",
    "FileRecord",
    "ConvertUtils",
    "FileService",
    "__version__",
]
