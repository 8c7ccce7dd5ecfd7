"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages of the duplicate scanner.

CLASS HIERARCHY
---------------
ProgressTracker    : Shared processed-file counter reporting fractions in [0.0, 1.0]
SizeStage          : Buckets collected paths by byte size (table #1)
FingerprintStage   : Fingerprints members of shared-size buckets (table #2)
SelectionStage     : Turns fingerprint buckets with 2+ members into flagged groups

STAGE CONTRACTS
---------------
  • Stages run strictly one after another on the caller's thread
  • A failure on one file is logged, recorded in ScanStats and skipped
  • Every discovered file advances the ProgressTracker exactly once, whichever
    stage accounts for it, so a finished scan always reports 1.0
  • Buckets live in tables built by an injectable factory (GroupingTable by default)
"""

import os
from typing import Callable, List, Optional
import logging

from twinfinder.core.grouping_table import GroupingTable
from twinfinder.core.interfaces import Hasher, MultiTable, TableFactory
from twinfinder.core.models import DuplicateGroup, FileRecord, ScanStats, SortOrder
from twinfinder.core.sorter import Sorter

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Counts processed files and reports processed / total.
    Reported values never decrease and never exceed 1.0.
    """

    def __init__(self, total: int, callback: Optional[Callable[[float], None]] = None):
        self.total = total
        self.processed = 0
        self._callback = callback
        self._last = 0.0

    def advance(self, count: int = 1) -> None:
        self.processed += count
        if self.total > 0:
            self.report(self.processed / self.total)

    def report(self, fraction: float) -> None:
        fraction = min(max(fraction, self._last), 1.0)
        self._last = fraction
        if self._callback:
            self._callback(fraction)

    def complete(self) -> None:
        self.report(1.0)

    @property
    def fraction(self) -> float:
        return self._last


class SizeStage:
    """Groups paths by file size."""

    def __init__(self, stats: ScanStats, table_factory: TableFactory = GroupingTable):
        self.stats = stats
        self.table_factory = table_factory

    def process(self, paths: List[str], tracker: ProgressTracker) -> MultiTable:
        """
        Returns a table mapping size -> list of paths.
        Files whose size cannot be read are dropped here; they count as processed.
        """
        size_table = self.table_factory()
        for path in paths:
            try:
                size = os.path.getsize(path)
            except OSError as e:
                logger.warning(f"Could not get file size for {path}: {e}. Skipping file.")
                self.stats.record_skip(path)
                tracker.advance()
                continue
            size_table.append(size, path)
        return size_table


class FingerprintStage:
    """Fingerprints files that share their size with at least one other file."""

    def __init__(self, hasher: Hasher, stats: ScanStats, table_factory: TableFactory = GroupingTable):
        self.hasher = hasher
        self.stats = stats
        self.table_factory = table_factory

    def process(self, size_table: MultiTable, tracker: ProgressTracker) -> MultiTable:
        """
        Returns a table mapping fingerprint -> list of FileRecord,
        each list in processing order.
        """
        fingerprint_table = self.table_factory()

        for size, group in size_table.items():
            if len(group) < 2:
                # A unique size cannot match anything else by content
                tracker.advance(len(group))
                continue

            for path in group:
                try:
                    digest = self.hasher.compute_fingerprint(path)
                except OSError as e:
                    logger.warning(f"Could not read or hash file {path}: {e}. Skipping file.")
                    self.stats.record_skip(path)
                else:
                    record = FileRecord(path=path, size=size, fingerprint=digest)
                    fingerprint_table.append(digest, record)
                tracker.advance()

        return fingerprint_table


class SelectionStage:
    """Builds duplicate groups and applies the default removal flags."""

    def __init__(self, sort_order: SortOrder = SortOrder.FIRST_FOUND):
        self.sort_order = sort_order

    def process(self, fingerprint_table: MultiTable) -> List[DuplicateGroup]:
        groups = []
        for digest, records in fingerprint_table.items():
            group = DuplicateGroup(fingerprint=digest, size=records[0].size, files=records)
            if group.is_duplicate():
                groups.append(group)

        Sorter.sort_files_inside_groups(groups, self.sort_order)

        for group in groups:
            group.files[0].marked_for_removal = False
            for record in group.files[1:]:
                record.marked_for_removal = True

        return groups
