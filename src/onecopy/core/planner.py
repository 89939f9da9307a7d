"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/planner.py
Turns a frozen DuplicateIndex into a DeletionPlan.

Policy:
- Entries with a single path are unique content and produce nothing
- The first path of each remaining entry is the keeper, the rest are candidates
- Candidate sizes are queried here, not during the walk; a failed query keeps
  the candidate in the plan with an unknown size that contributes 0 bytes
- Groups are ordered by keeper path so reports are stable across runs
"""

import os
import logging
from typing import Callable, List, Optional

from onecopy.core.models import (
    DeletionPlan,
    DuplicateGroup,
    DuplicateIndex,
    FileRecord,
    FilesystemError,
    SkippedFile,
)

logger = logging.getLogger(__name__)


def stat_size(path: str) -> int:
    """On-disk size in bytes. Raises FilesystemError if the file cannot be stat'ed."""
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise FilesystemError(f"Could not get size for {path}: {e.strerror or e}", path=path) from e


class PlanBuilder:
    """
    Grouping and sizing pass.
    The size getter is injectable so tests can simulate stat failures.
    """

    def __init__(self, size_getter: Optional[Callable[[str], int]] = None):
        self.size_getter = size_getter or stat_size

    def build_plan(self, index: DuplicateIndex) -> DeletionPlan:
        groups: List[DuplicateGroup] = []
        size_errors: List[SkippedFile] = []
        total = 0

        for fingerprint, paths in index.duplicate_entries():
            keeper = FileRecord(path=paths[0])
            candidates = []
            for path in paths[1:]:
                record = FileRecord(path=path)
                try:
                    record.size = self.size_getter(path)
                    total += record.size
                except FilesystemError as e:
                    logger.warning(f"Could not get size for {path}, counting it as 0 bytes: {e}")
                    size_errors.append(SkippedFile(path=path, reason=str(e)))
                candidates.append(record)

            groups.append(DuplicateGroup(fingerprint=fingerprint, keeper=keeper, candidates=candidates))

        groups.sort(key=lambda g: g.keeper.path)

        logger.debug(f"Plan: {len(groups)} groups, {sum(len(g.candidates) for g in groups)} candidates, "
                     f"{total} bytes reclaimable")
        return DeletionPlan(groups=groups, total_reclaimable=total, size_errors=size_errors)
