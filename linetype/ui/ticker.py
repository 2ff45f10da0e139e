"""Qt-backed ticker driving the session countdown."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtTicker(QObject):
    """Repeating ``QTimer`` wrapper; one callback at a time.

    ``stop`` is synchronous: once it returns no queued timeout is delivered.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setSingleShot(False)
        self._timer.timeout.connect(self._fire)
        self._callback: Optional[Callable[[], None]] = None

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._timer.stop()
        self._callback = callback
        self._timer.start(interval_ms)

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback()
