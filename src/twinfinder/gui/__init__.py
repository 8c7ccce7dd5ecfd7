"""Qt integration layer (requires the [gui] extra)."""

from .worker import ScanWorker, WorkerSignals

__all__ = ["ScanWorker", "WorkerSignals"]
