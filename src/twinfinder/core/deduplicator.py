"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the two-pass duplicate scanner:
    1. collect regular files
    2. size → table #1 (GroupingTable unless another factory is injected)
    3. fingerprint of shared-size files → table #2
    4. flag all but one record of every group with 2+ members
Progress and status are reported through injected callbacks. Nothing is deleted here.
"""
import time
from typing import Callable, List, Optional
import logging

from twinfinder.core.hasher import HasherImpl
from twinfinder.core.grouping_table import GroupingTable
from twinfinder.core.interfaces import Hasher, TableFactory
from twinfinder.core.models import DuplicateGroup, FileRecord, ScanStats, SortOrder
from twinfinder.core.scanner import FileScannerImpl
from twinfinder.core.stages import FingerprintStage, ProgressTracker, SelectionStage, SizeStage

logger = logging.getLogger(__name__)

STATUS_COLLECTING = "Collecting files..."
STATUS_NO_FILES = "No files found."
STATUS_GROUPING = "Grouping files by size..."
STATUS_HASHING = "Hashing files and looking for duplicates..."
STATUS_DONE = "Scan complete. Duplicates found: {count}"


class DuplicateScanner:
    """
    Finds groups of byte-identical files below a root directory.

    Usage:
        scanner = DuplicateScanner(
            progress_callback=lambda fraction: ...,
            status_callback=lambda message: ...,
        )
        records = scanner.scan("/path/to/dir")
        print(scanner.stats.print_summary())
    """

    def __init__(
            self,
            hasher: Optional[Hasher] = None,
            progress_callback: Optional[Callable[[float], None]] = None,
            status_callback: Optional[Callable[[str], None]] = None,
            sort_order: SortOrder = SortOrder.FIRST_FOUND,
            table_factory: TableFactory = GroupingTable
    ):
        self.hasher = hasher or HasherImpl()
        self.progress_callback = progress_callback
        self.status_callback = status_callback
        self.sort_order = sort_order
        self.table_factory = table_factory
        self.stats = ScanStats()

    def scan(self, root_dir: str) -> List[FileRecord]:
        """
        Returns every record belonging to some duplicate group, group by group.

        Raises:
            RuntimeError: If the root directory is missing or unreadable
        """
        result = []
        for group in self.find_groups(root_dir):
            result.extend(group.files)
        return result

    def find_groups(self, root_dir: str) -> List[DuplicateGroup]:
        """Same pipeline as scan(), keeping the group structure."""
        self.stats = ScanStats()
        start_time = time.time()

        self._status(STATUS_COLLECTING)
        paths = FileScannerImpl(root_dir).scan()
        self.stats.files_found = len(paths)

        # Total is fixed here; later size failures still count as processed.
        tracker = ProgressTracker(len(paths), self.progress_callback)
        if not paths:
            self._status(STATUS_NO_FILES)
            tracker.complete()
            self.stats.total_time = time.time() - start_time
            return []

        self._status(STATUS_GROUPING)
        size_table = SizeStage(self.stats, self.table_factory).process(paths, tracker)
        logger.debug(f"{len(size_table)} distinct sizes among {len(paths)} files")

        self._status(STATUS_HASHING)
        fingerprint_table = FingerprintStage(self.hasher, self.stats, self.table_factory).process(size_table, tracker)

        groups = SelectionStage(self.sort_order).process(fingerprint_table)
        tracker.complete()

        record_count = sum(len(g.files) for g in groups)
        self.stats.groups_found = len(groups)
        self.stats.duplicates_flagged = sum(len(g.flagged()) for g in groups)
        self.stats.reclaimable_bytes = sum(g.reclaimable_bytes for g in groups)
        self.stats.total_time = time.time() - start_time

        if self.stats.skipped_files:
            logger.warning(f"Skipped {self.stats.skipped_files} unreadable file(s)")
        self._status(STATUS_DONE.format(count=record_count))
        return groups

    def _status(self, message: str) -> None:
        logger.debug(message)
        if self.status_callback:
            self.status_callback(message)
