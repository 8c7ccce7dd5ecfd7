#!/usr/bin/env python3
"""
TwinFinder CLI — Command line interface for duplicate file detection and removal.
Implements the same core engine as the GUI worker but with console-based interaction.
All operations are safe: deletion moves files to system trash, never permanent erase.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from twinfinder.core.models import DuplicateGroup, ScanParams, SortOrder, HashAlgorithmName
from twinfinder.commands import ScanCommand
from twinfinder.utils.convert_utils import ConvertUtils
from twinfinder.services.deletion_service import DeletionService
from twinfinder.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    SORT_ALIASES, SORT_CHOICES, SORT_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, deletion_service: DeletionService = None):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.deletion_service = deletion_service or DeletionService()

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse and validate command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="twinfinder",
            description="TwinFinder — find byte-identical files and move extra copies to trash",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Input directory to scan for duplicates"
        )

        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="twin",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        parser.add_argument(
            "--sort",
            choices=SORT_CHOICES,
            default="first-found",
            type=str,
            help=SORT_HELP_TEXT
        )

        parser.add_argument(
            "--chunk-size",
            default="4K",
            type=str,
            metavar='',
            help="Read buffer size for hashing (e.g., 4K, 64KB, 1M). Default: 4K"
        )

        # Actions
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move every flagged duplicate to trash (one file per group is kept). "
                 "Always shows preview before deletion for safety."
        )

        # Output options
        parser.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt when used with --trash (for automation/scripts)"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, status messages and statistics"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.force and not args.trash:
            self.error_exit("--force can only be used with --trash")

        # Prevent interactive confirmation in non-TTY environments
        if args.trash and not args.force:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Cannot request interactive confirmation in non-interactive session.\n"
                    "Use --force flag to proceed without confirmation when piping output or running in scripts."
                )

        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        try:
            if ConvertUtils.human_to_bytes(args.chunk_size) <= 0:
                self.error_exit("Chunk size must be positive")
        except ValueError as e:
            self.error_exit(f"Invalid size format: {e}")

        if args.trash and not self.deletion_service.trash_supported():
            self.error_exit("Moving files to trash is not supported on this system. Nothing will be deleted.")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=str(Path(args.input).resolve()),
                algorithm=ALGORITHM_ALIASES.get(args.algorithm, HashAlgorithmName.TWIN),
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size),
                sort_order=SORT_ALIASES.get(args.sort, SortOrder.FIRST_FOUND)
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, fraction: float) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return
        sys.stderr.write(f"\r  {fraction * 100:.1f}%")
        sys.stderr.flush()

    def status_callback(self, message: str) -> None:
        if self.verbose:
            sys.stderr.write(f"\n{message}\n")
            sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute scan workflow."""
        command = ScanCommand()
        if self.verbose:
            print(f"Finding duplicates (algorithm: {params.algorithm.display_name}, "
                  f"keep: {params.sort_order.display_name})...")

        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                status_callback=self.status_callback if self.verbose else None
            )
        except Exception as e:
            self.error_exit(f"Scan failed: {e}")

        if stats.skipped_files and not self.quiet:
            self.warning(f"{stats.skipped_files} file(s) could not be read and were skipped")

        if self.verbose:
            for path in stats.skipped_paths:
                print(f"   [SKIPPED] {path}", file=sys.stderr)
            print("\n" + stats.print_summary())

        return groups

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Output duplicate groups as plain text."""
        if self.quiet:
            return

        if not groups:
            print("No duplicate groups found.")
            return

        total_files = sum(len(g.files) for g in groups)
        print(f"\nFound {len(groups)} duplicate groups ({total_files} files)")

        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"\n📁 Group {idx} | Size: {size_str} | Files: {len(group.files)}")
            for file in group.files:
                marker = "[DEL] " if file.marked_for_removal else "[KEEP]"
                print(f"   {marker} {file.path}")

        reclaimable = sum(g.reclaimable_bytes for g in groups)
        print(f"\nReclaimable space: {ConvertUtils.bytes_to_human(reclaimable)}")

    def execute_trash(self, groups: List[DuplicateGroup], force: bool = False) -> None:
        """Move flagged files to trash. Always shows preview before deletion."""
        if not groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        records = [f for g in groups for f in g.files]
        flagged = [f for f in records if f.marked_for_removal]
        if not flagged:
            if not self.quiet:
                print("No files are flagged for removal.")
            return

        space_saved_str = ConvertUtils.bytes_to_human(sum(f.size for f in flagged))

        # Always show deletion preview before action
        print()
        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"📁 Group {idx} | Size: {size_str} | Files: {len(group.files)}")
            print("-" * 60)
            for file in group.files:
                marker = "[DEL] " if file.marked_for_removal else "[KEEP]"
                print(f"   {marker} {file.path}")
            print()

        print("=" * 60)
        preserved = sum(len(g.kept()) for g in groups)
        print(f"Summary: {preserved} files preserved, {len(flagged)} files to move to trash")
        print(f"Total space saved: {space_saved_str}")
        print()

        if force:
            print("⚠️  WARNING: --force flag skips confirmation. Proceeding with deletion...")
        else:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Lost interactive terminal during operation. "
                    "Use --force to proceed in non-interactive environments."
                )

            response = input(f"Are you sure you want to move {len(flagged)} files to trash? [y/N]: ")
            if response.strip().lower() not in ("y", "yes"):
                print("Deletion cancelled by user.")
                return

        print(f"\nMoving {len(flagged)} files to trash...")
        deleted_count = self.deletion_service.delete_flagged(records)
        removed = set(self.deletion_service.last_removed)
        failed_files = [f.path for f in flagged if f.path not in removed]

        if failed_files:
            print(f"\n⚠️  Partial success: {deleted_count}/{len(flagged)} files moved to trash.")
            print(f"Failed to delete {len(failed_files)} file(s):")
            for path in failed_files[:5]:
                print(f"  • {os.path.basename(path)}")
            if len(failed_files) > 5:
                print(f"  ...and {len(failed_files) - 5} more files")
        else:
            print(f"✅ Successfully moved {deleted_count} files to trash.")
            print(f"Total space saved: {space_saved_str}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.WARNING)

        self.validate_args(args)
        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        groups = self.run_scan(params)

        if args.trash:
            self.execute_trash(groups, force=args.force)
        else:
            self.output_results(groups)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
