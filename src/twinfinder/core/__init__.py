"""
Core duplicate-detection engine — collector, grouping table, hasher, stages and scanner.

This package contains the performance-critical foundation of twinfinder:
- FileScannerImpl: recursive collection of regular files
- GroupingTable: separate-chaining hash table used for size and fingerprint buckets
- HasherImpl + TwinHashAlgorithmImpl: streaming 128-bit content fingerprints
- DuplicateScanner: size pass → fingerprint pass → default removal flags
- Models: FileRecord, DuplicateGroup, ScanParams, ScanStats

All components are pure Python with no GUI dependencies — suitable for CLI and server usage.
"""

from .scanner import FileScannerImpl
from .grouping_table import GroupingTable
from .hasher import HasherImpl, TwinHash, TwinHashAlgorithmImpl, XXHash128AlgorithmImpl, fingerprint
from .deduplicator import DuplicateScanner
from .sorter import Sorter
from .models import (
    FileRecord, DuplicateGroup, ScanParams, ScanStats, SortOrder, HashAlgorithmName)

__all__ = [
    "FileScannerImpl",
    "GroupingTable",
    "HasherImpl",
    "TwinHash",
    "TwinHashAlgorithmImpl",
    "XXHash128AlgorithmImpl",
    "fingerprint",
    "DuplicateScanner",
    "Sorter",
    "FileRecord",
    "DuplicateGroup",
    "ScanParams",
    "ScanStats",
    "SortOrder",
    "HashAlgorithmName",
]
