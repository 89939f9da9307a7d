#!/usr/bin/env python3
"""
onecopy CLI — Command line interface for duplicate file detection and removal.
Scans a directory, lists every duplicate group with the copy that will be kept,
and deletes all other copies after a single Y/N confirmation.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import sys
from typing import List, Optional, NoReturn

from onecopy import __version__
from onecopy.core.models import (
    DeletionPlan,
    DeletionResult,
    FilesystemError,
    HashAlgorithmName,
    ScanParams,
    ScanResult,
)
from onecopy.commands import DeduplicationCommand
from onecopy.core.scanner import FileScannerImpl
from onecopy.utils.convert_utils import ConvertUtils
from onecopy.aliases import ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"
SEPARATOR = "=" * 56


class OneCopyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with code 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(1)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False
        self._progress_open: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = OneCopyArgumentParser(
            prog="onecopy",
            description="onecopy — find files with identical content and keep only one copy",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directory",
            type=str,
            help="Directory to scan for duplicates"
        )

        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move duplicates to the system trash instead of deleting them permanently"
        )
        parser.add_argument(
            "--yes", "-y",
            action="store_true",
            help="Skip the confirmation prompt and delete all duplicates (for automation/scripts)"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and scan statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def configure_logging(self) -> None:
        """Route engine warnings and errors to stderr."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate the root directory before any scanning begins."""
        try:
            FileScannerImpl(args.directory).validate_root()
        except FilesystemError as e:
            self.error_exit(str(e))

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=args.directory,
                algorithm=ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmName.SHA256),
                use_trash=args.trash,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, path: Optional[str]) -> None:
        """Shows the file being hashed. One overwritten line on a terminal."""
        if self.quiet:
            return

        line = f"Calculating hash for: {path}"
        if sys.stdout.isatty():
            sys.stdout.write(f"\r\033[K{line}")
            sys.stdout.flush()
            self._progress_open = True
        else:
            print(line)

    def _close_progress_line(self) -> None:
        if self._progress_open:
            sys.stdout.write("\n")
            sys.stdout.flush()
            self._progress_open = False

    def run_scan(self, params: ScanParams) -> ScanResult:
        """Execute the scan phase."""
        command = DeduplicationCommand()
        try:
            result = command.execute(params, progress_callback=self.progress_callback)
        except FilesystemError as e:
            self._close_progress_line()
            self.error_exit(str(e))
        finally:
            self._close_progress_line()
        return result

    def output_results(self, plan: DeletionPlan) -> None:
        """Print each duplicate group: the keeper, then every candidate with its size."""
        for group in plan.groups:
            print(f"\n--- Duplicate Group (Keeper: {group.keeper.path}) ---")
            for candidate in group.candidates:
                if candidate.size_known:
                    size_str = ConvertUtils.bytes_to_human(candidate.size)
                else:
                    size_str = "unknown size"
                print(f"   -> Duplicate: {candidate.path} ({size_str})")

    @staticmethod
    def output_summary(plan: DeletionPlan) -> None:
        print()
        print(SEPARATOR)
        print(f"   Summary: {plan.candidate_count} duplicate file(s) identified.")
        print(f"   Total Size to Reclaim: {ConvertUtils.bytes_to_human(plan.total_reclaimable)}")
        if plan.size_errors:
            print(f"   ({len(plan.size_errors)} file(s) of unknown size not counted)")
        print(SEPARATOR)

    @staticmethod
    def read_token() -> str:
        """First whitespace-delimited token of the next input line ('' on EOF)."""
        line = sys.stdin.readline()
        parts = line.split()
        return parts[0] if parts else ""

    def confirm_deletion(self, plan: DeletionPlan) -> bool:
        """Single yes/no gate for the whole plan. Only 'Y' or 'y' proceeds."""
        print(f"   Do you want to delete ALL {plan.candidate_count} files listed above (Y/N)? ",
              end="", flush=True)
        response = self.read_token()
        return response in ("Y", "y")

    @staticmethod
    def auto_confirm(plan: DeletionPlan) -> bool:
        print(f"⚠️  WARNING: --yes skips confirmation. Deleting {plan.candidate_count} files...")
        return True

    @staticmethod
    def output_deletion(result: DeletionResult, use_trash: bool) -> None:
        verb = "Moved to trash" if use_trash else "Deleted"
        for outcome in result.outcomes:
            if outcome.ok:
                print(f"   [OK] {verb}: {outcome.path}")
            else:
                print(f"   [FAIL] {outcome.path}: {outcome.error}")

        print(f"\nBatch operation complete: {result.succeeded} files successfully deleted.")
        if result.failed:
            print(f"⚠️  Partial success: {len(result.failed)} file(s) could not be deleted.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point: scan, report, confirm, delete."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        print(f"Starting scan of directory: {params.root_dir}")
        print("This may take a while for large directories...")
        if self.verbose:
            print(f"Fingerprint algorithm: {params.algorithm.display_name}")

        result = self.run_scan(params)
        print("Scan complete. Checking for duplicates...")

        if self.verbose:
            print(result.stats.print_summary())

        if result.skipped:
            self.warning(f"{len(result.skipped)} file(s) or director(ies) were skipped, see messages above")

        plan = result.plan
        if plan.is_empty:
            print("\nNo duplicate files found in the directory.")
            return

        self.output_results(plan)
        self.output_summary(plan)

        confirm = self.auto_confirm if args.yes else self.confirm_deletion
        deletion = DeduplicationCommand.apply(plan, confirm=confirm, use_trash=params.use_trash)

        if deletion is None:
            print(f"\nDeletion skipped for all {plan.candidate_count} identified files.")
            return

        print("\nStarting batch deletion...")
        self.output_deletion(deletion, use_trash=params.use_trash)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if app.verbose:
            logger.exception("Unexpected error")
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
