"""
Unified command orchestrator for duplicate scanning.
This is the SINGLE source of truth for business logic — used by both GUI and CLI.
No Qt/PySide6 dependencies — pure Python.
"""
from typing import Callable, List, Optional, Tuple
from twinfinder.core.deduplicator import DuplicateScanner
from twinfinder.core.hasher import HasherImpl, TwinHashAlgorithmImpl, XXHash128AlgorithmImpl
from twinfinder.core.models import DuplicateGroup, HashAlgorithmName, ScanParams, ScanStats

ALGORITHMS = {
    HashAlgorithmName.TWIN: TwinHashAlgorithmImpl,
    HashAlgorithmName.XXH128: XXHash128AlgorithmImpl,
}


class ScanCommand:
    """
    Builds a DuplicateScanner from ScanParams and runs it.

    Usage:
        # For GUI (with progress UI updates):
        groups, stats = ScanCommand().execute(
            params,
            progress_callback=qt_progress_adapter,
            status_callback=qt_status_adapter
        )

        # For CLI (with console progress):
        groups, stats = ScanCommand().execute(params, progress_callback=cli_progress_printer)
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[float], None]] = None,
            status_callback: Optional[Callable[[str], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (fraction: float) -> None
            status_callback: (message: str) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If the root directory cannot be scanned
        """
        hasher = HasherImpl(ALGORITHMS[params.algorithm](), chunk_size=params.chunk_size)
        scanner = DuplicateScanner(
            hasher=hasher,
            progress_callback=progress_callback,
            status_callback=status_callback,
            sort_order=params.sort_order
        )
        groups = scanner.find_groups(params.root_dir)
        return groups, scanner.stats
