"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Builds the DuplicateIndex by fingerprinting each discovered file in turn.
"""

import logging
from typing import Iterable, List, Optional, Callable

from onecopy.core.interfaces import FileGrouper, Hasher
from onecopy.core.models import DuplicateIndex, FileReadError, SkippedFile
from onecopy.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Groups files by full-content fingerprint.
    Uses an injected Hasher instance for flexibility and testability.
    """

    STAGE_NAME = "hashing"

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()
        self.skipped: List[SkippedFile] = []
        self.files_hashed = 0

    def build_index(
        self,
        paths: Iterable[str],
        progress_callback: Optional[Callable[[str, int, Optional[str]], None]] = None,
        stopped_flag: Optional[Callable[[], bool]] = None
    ) -> DuplicateIndex:
        """
        Hashes paths one after another, in the order given, and indexes each
        under its fingerprint. Files that cannot be read are left out and
        recorded in `skipped`; they never abort the pass.
        """
        index = DuplicateIndex()
        processed = 0

        for path in paths:
            if stopped_flag and stopped_flag():
                logger.debug("Indexing interrupted by user")
                break

            processed += 1
            if progress_callback:
                progress_callback(self.STAGE_NAME, processed, path)

            try:
                fingerprint = self.hasher.compute_fingerprint(path)
            except FileReadError as e:
                logger.warning(f"Skipping unreadable file {path}: {e.__cause__ or e}")
                self.skipped.append(SkippedFile(path=path, reason=str(e.__cause__ or e)))
                continue

            index.add(fingerprint, path)
            self.files_hashed += 1

        if self.skipped:
            logger.warning(f"Skipped {len(self.skipped)} files due to read errors")

        return index.freeze()
