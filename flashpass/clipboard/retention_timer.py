"""
Retention Timer

This module contains the countdown that keeps the password on the clipboard
for a fixed time.
"""

import logging
from PyQt6.QtCore import QObject, QEventLoop, QTimer, pyqtSignal

from ..config import RETENTION_SECONDS, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class RetentionTimer(QObject):
    """Blocking countdown driven by a QTimer inside a local event loop.

    The event loop keeps Qt responsive while waiting, which matters on X11
    where the clipboard owner must answer paste requests itself.
    """
    tick = pyqtSignal(int)  # seconds remaining
    expired = pyqtSignal()

    def __init__(self, seconds=RETENTION_SECONDS, interval_ms=TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.seconds = seconds
        self.interval_ms = interval_ms
        self.remaining = seconds
        self._timer = None
        self._loop = None

    def advance(self):
        """Count down one step; emits expired and stops at zero."""
        self.remaining -= 1
        if self.remaining > 0:
            self.tick.emit(self.remaining)
            return

        if self._timer is not None:
            self._timer.stop()
        logger.info(f"Retention period of {self.seconds}s elapsed")
        self.expired.emit()
        if self._loop is not None:
            self._loop.quit()

    def run(self):
        """Block until the countdown has finished."""
        self.remaining = self.seconds
        if self.seconds <= 0:
            self.expired.emit()
            return

        self.tick.emit(self.remaining)

        self._loop = QEventLoop()
        self._timer = QTimer(self)
        self._timer.setInterval(self.interval_ms)
        self._timer.timeout.connect(self.advance)
        self._timer.start()
        try:
            self._loop.exec()
        finally:
            self._timer.stop()
            self._timer = None
            self._loop = None
