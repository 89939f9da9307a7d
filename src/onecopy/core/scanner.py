"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements lazy directory traversal.
Features:
- Uses os.walk for fast traversal, without following directory symlinks
- Yields every regular file at any depth, one path at a time
- Skips symlinks and special files (FIFOs, sockets, devices)
- Visits directories and files in sorted order, so discovery order is repeatable
"""

import os
import stat
import logging
from typing import Iterator, List, Optional, Callable

from onecopy.core.interfaces import FileScanner
from onecopy.core.models import FilesystemError, SkippedFile

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Walks a directory tree and yields the path of each regular file.

    Attributes:
        root_dir: Root directory to scan
        skipped: Entries left out because they could not be inspected
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir
        self.skipped: List[SkippedFile] = []
        self.files_found = 0

    def validate_root(self) -> None:
        """
        Raises FilesystemError unless the root is an existing, readable directory.
        """
        if not os.path.exists(self.root_dir):
            raise FilesystemError(f"Directory does not exist: {self.root_dir}", path=self.root_dir)
        if not os.path.isdir(self.root_dir):
            raise FilesystemError(f"Path is not a directory: {self.root_dir}", path=self.root_dir)
        if not os.access(self.root_dir, os.R_OK | os.X_OK):
            raise FilesystemError(f"Directory is not readable: {self.root_dir}", path=self.root_dir)

    def walk(self, stopped_flag: Optional[Callable[[], bool]] = None) -> Iterator[str]:
        """
        Generator over regular files under the root.
        Within a directory, files are yielded by sorted name before the walk
        descends into its (sorted) subdirectories.
        """
        self.validate_root()
        logger.debug(f"Scanning directory: {self.root_dir}")

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            if stopped_flag and stopped_flag():
                logger.debug("Scan interrupted by user")
                return

            # Sorting in place also fixes the order os.walk descends in
            dirs.sort()

            for filename in sorted(files):
                if stopped_flag and stopped_flag():
                    logger.debug("Scan interrupted by user")
                    return

                path = os.path.join(root, filename)
                if self._is_regular_file(path):
                    self.files_found += 1
                    yield path

        logger.debug(f"Scan completed. Found {self.files_found} regular files.")

    def _on_walk_error(self, error: OSError) -> None:
        """
        os.walk reports directories it cannot list here.
        Failure to list the root is fatal; any other directory is skipped.
        """
        failed_path = error.filename or self.root_dir
        if os.path.normpath(failed_path) == os.path.normpath(self.root_dir):
            raise FilesystemError(
                f"Cannot enumerate directory {self.root_dir}: {error.strerror or error}",
                path=self.root_dir
            ) from error

        reason = error.strerror or str(error)
        logger.warning(f"Skipping unreadable directory {failed_path}: {reason}")
        self.skipped.append(SkippedFile(path=failed_path, reason=reason))

    def _is_regular_file(self, path: str) -> bool:
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            reason = e.strerror or str(e)
            logger.warning(f"Skipping {path}: {reason}")
            self.skipped.append(SkippedFile(path=path, reason=reason))
            return False

        if stat.S_ISLNK(mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return False
        if not stat.S_ISREG(mode):
            logger.debug(f"Skipping special file: {path}")
            return False
        return True
