from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class Ticker(Protocol):
    """Periodic callback source owned by a single timer at a time."""

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class TimerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class CountdownTimer:
    """One-second countdown that is armed explicitly and expires exactly once.

    The timer never drives itself: a :class:`Ticker` calls :meth:`tick` once
    per period while the timer is running.  Ticks that arrive in any other
    state are ignored, so a late tick from a disarmed timer cannot touch the
    owning session.
    """

    def __init__(
        self,
        duration_seconds: int,
        ticker: Ticker,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
    ) -> None:
        if duration_seconds < 1:
            raise ValueError(f"duration_seconds must be positive, got {duration_seconds}")
        self._duration = duration_seconds
        self._time_left = duration_seconds
        self._ticker = ticker
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._state = TimerState.IDLE

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def duration_seconds(self) -> int:
        return self._duration

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def running(self) -> bool:
        return self._state is TimerState.RUNNING

    def arm(self) -> None:
        """Start counting down. Only an idle timer can be armed."""
        if self._state is not TimerState.IDLE:
            return
        self._state = TimerState.RUNNING
        self._ticker.start(TICK_INTERVAL_MS, self.tick)
        logger.debug("Timer armed for %ds", self._duration)

    def disarm(self) -> None:
        """Stop the timer for good. Safe to call in any state, any number of times."""
        if self._state is TimerState.STOPPED:
            return
        was_running = self._state is TimerState.RUNNING
        self._state = TimerState.STOPPED
        if was_running:
            self._ticker.stop()
            logger.debug("Timer disarmed with %ds left", self._time_left)

    def tick(self) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._time_left = max(0, self._time_left - 1)
        logger.debug("Tick: %ds left", self._time_left)
        if self._time_left == 0:
            self.disarm()
            if self._on_tick is not None:
                self._on_tick(self._time_left)
            if self._on_expire is not None:
                self._on_expire()
            return
        if self._on_tick is not None:
            self._on_tick(self._time_left)
