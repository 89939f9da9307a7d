"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Cross-platform file removal: permanent deletion or a move to the system trash.
Batch deletion is best-effort; every path gets its own outcome.
"""
import os
import logging
from pathlib import Path
from typing import Iterable

from send2trash import send2trash

from onecopy.core.models import (
    DeletionOutcome,
    DeletionResult,
    DeletionStatus,
    FilesystemError,
)

logger = logging.getLogger(__name__)


class FileService:
    """
    File removal operations used by the deletion step.
    """

    @staticmethod
    def delete_file(file_path: str):
        """Permanently removes a file."""
        try:
            os.remove(file_path)
        except OSError as e:
            raise FilesystemError(e.strerror or str(e), path=file_path) from e

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FilesystemError("File not found", path=file_path)

        try:
            send2trash(str(path))
        except Exception as e:
            raise FilesystemError(f"Failed to move to trash: {e}", path=file_path) from e

    @classmethod
    def delete_all(cls, file_paths: Iterable[str], use_trash: bool = False) -> DeletionResult:
        """
        Removes every path independently. A failure is recorded and the next
        path is still attempted; this method itself never raises.
        """
        remove = cls.move_to_trash if use_trash else cls.delete_file
        result = DeletionResult()

        for path in file_paths:
            try:
                remove(path)
            except FilesystemError as e:
                logger.error(f"Error deleting file {path}: {e}")
                result.outcomes.append(DeletionOutcome(path=path, status=DeletionStatus.FAILED, error=str(e)))
                continue

            logger.debug(f"Deleted: {path}")
            result.outcomes.append(DeletionOutcome(path=path, status=DeletionStatus.SUCCESS))

        return result
