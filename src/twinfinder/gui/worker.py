"""
Qt worker runnable — follows modern Qt pattern: QRunnable + QThreadPool.
Runs a scan off the UI thread and forwards progress/status through signals.
"""
from PySide6.QtCore import QRunnable, QObject, Signal, QMutex, QMutexLocker
from twinfinder.core.models import ScanParams
from twinfinder.commands import ScanCommand


class WorkerSignals(QObject):
    """Separate QObject to hold signals (QRunnable cannot emit signals directly)."""
    progress = Signal(float)            # fraction in [0.0, 1.0]
    status = Signal(str)
    finished = Signal(list, object)     # duplicate_groups, stats
    error = Signal(str)


class ScanWorker(QRunnable):
    """
    Worker runnable that performs a scan in thread pool.
    The scan itself cannot be interrupted: stop() only silences the signals,
    so a discarded worker never reaches a destroyed UI.
    """
    def __init__(self, params: ScanParams):
        super().__init__()
        self.params = params
        self.command = ScanCommand()
        self.signals = WorkerSignals()
        self._stopped = False
        self._mutex = QMutex()
        self.setAutoDelete(True)

    def stop(self):
        with QMutexLocker(self._mutex):
            self._stopped = True

    def is_stopped(self) -> bool:
        with QMutexLocker(self._mutex):
            return self._stopped

    def safe_progress_emit(self, fraction: float):
        with QMutexLocker(self._mutex):
            if not self._stopped:
                try:
                    self.signals.progress.emit(fraction)
                except RuntimeError:
                    pass

    def safe_status_emit(self, message: str):
        with QMutexLocker(self._mutex):
            if not self._stopped:
                try:
                    self.signals.status.emit(message)
                except RuntimeError:
                    pass

    def run(self):
        """Main execution method. Runs in thread pool thread."""
        try:
            if self.is_stopped():
                return

            groups, stats = self.command.execute(
                self.params,
                progress_callback=self.safe_progress_emit,
                status_callback=self.safe_status_emit
            )

            if not self.is_stopped():
                self.signals.finished.emit(groups, stats)
        except Exception as e:
            if not self.is_stopped():
                self.signals.error.emit(f"{type(e).__name__}: {str(e)}")
