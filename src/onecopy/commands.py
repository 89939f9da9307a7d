"""
Unified command orchestrator for duplicate detection and removal.
This is the SINGLE source of truth for business logic — the CLI only renders
what it returns. No console I/O here.
"""
import time
import logging
from typing import Optional, Callable

from onecopy.core.models import DeletionPlan, DeletionResult, ScanParams, ScanResult, ScanStats
from onecopy.core.scanner import FileScannerImpl
from onecopy.core.hasher import HasherImpl, get_algorithm
from onecopy.core.grouper import FileGrouperImpl
from onecopy.core.planner import PlanBuilder
from onecopy.services.file_service import FileService

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the whole workflow:
    1. Validate the root and walk it lazily
    2. Fingerprint each file into a DuplicateIndex
    3. Derive the DeletionPlan (groups, candidates, reclaimable size)
    4. After a single confirmation, delete every candidate

    Usage:
        command = DeduplicationCommand()
        result = command.execute(params, progress_callback=printer)
        deletion = command.apply(result.plan, confirm=ask_user, use_trash=params.use_trash)
    """

    def __init__(self, plan_builder: Optional[PlanBuilder] = None):
        self._plan_builder = plan_builder or PlanBuilder()

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[str]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> ScanResult:
        """
        Scan params.root_dir and build the deletion plan.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, path: Optional[str]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            ScanResult with the frozen index, the plan, skipped entries and statistics

        Raises:
            FilesystemError: If the root directory is unusable
        """
        start_time = time.time()

        scanner = FileScannerImpl(root_dir=params.root_dir)
        scanner.validate_root()

        hasher = HasherImpl(get_algorithm(params.algorithm), chunk_size=params.chunk_size)
        grouper = FileGrouperImpl(hasher)

        index = grouper.build_index(
            scanner.walk(stopped_flag=stopped_flag),
            progress_callback=progress_callback,
            stopped_flag=stopped_flag
        )
        plan = self._plan_builder.build_plan(index)

        skipped = scanner.skipped + grouper.skipped
        stats = ScanStats(
            files_found=scanner.files_found,
            files_hashed=grouper.files_hashed,
            files_skipped=len(skipped),
            bytes_hashed=hasher.bytes_hashed,
            total_time=time.time() - start_time,
        )
        logger.debug(f"Scan finished in {stats.total_time:.3f}s")

        return ScanResult(index=index, plan=plan, skipped=skipped, stats=stats)

    @staticmethod
    def apply(
            plan: DeletionPlan,
            confirm: Callable[[DeletionPlan], bool],
            use_trash: bool = False
    ) -> Optional[DeletionResult]:
        """
        Ask for one decision covering the whole plan, then delete every candidate.

        Returns:
            DeletionResult, or None when the plan is empty or the decision was no.
            Nothing on disk is touched in the None case.
        """
        if plan.is_empty:
            return None

        if not confirm(plan):
            logger.debug(f"Deletion declined for {plan.candidate_count} files")
            return None

        return FileService.delete_all(plan.candidates, use_trash=use_trash)
