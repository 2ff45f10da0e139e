from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from linetype.core.models import MatchOutcome, Phase, Score, SessionSnapshot, WordMark
from linetype.core.passages import WORDS_PER_LINE, select_source
from linetype.core.scoring import score
from linetype.core.settings import Settings
from linetype.core.timer import CountdownTimer, Ticker, TimerState

logger = logging.getLogger(__name__)

DEFAULT_DURATIONS: Tuple[int, ...] = (60, 120, 180)

Listener = Callable[[SessionSnapshot], None]


def mark_words(line: str, typed: str) -> Tuple[WordMark, ...]:
    """Classify each word of *line* against the word at the same position in *typed*."""
    typed_words = typed.split()
    marks: List[WordMark] = []
    for i, word in enumerate(line.split()):
        if i >= len(typed_words):
            marks.append(WordMark.UNMARKED)
        elif typed_words[i] == word:
            marks.append(WordMark.CORRECT)
        else:
            marks.append(WordMark.INCORRECT)
    return tuple(marks)


class Session:
    """Timed typing test over a passage split into fixed-size lines.

    The session moves through three phases:
      * **setup** – a duration can be chosen; nothing else is populated.
      * **typing** – a passage has been picked.  The countdown is armed by the
        first input, not by :meth:`start`, so idle time is free.
      * **finished** – reached when the countdown expires or the last line is
        typed correctly.  Input is frozen and :meth:`result` becomes available.

    Every mutation happens through the command methods and is followed by a
    snapshot broadcast to the subscribed listeners.
    """

    def __init__(
        self,
        pool: Sequence[str],
        ticker: Ticker,
        durations: Sequence[int] = DEFAULT_DURATIONS,
        default_duration: Optional[int] = None,
        words_per_line: int = WORDS_PER_LINE,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not durations:
            raise ValueError("At least one duration is required")
        self._pool = list(pool)
        self._ticker = ticker
        self._durations = tuple(durations)
        self._words_per_line = words_per_line
        self._rng = rng
        self._listeners: List[Listener] = []

        duration = default_duration if default_duration is not None else self._durations[0]
        if duration not in self._durations:
            raise ValueError(f"Default duration {duration} is not one of {self._durations}")
        self._duration = duration
        self._timer: Optional[CountdownTimer] = None
        self._reset()

    @classmethod
    def from_settings(cls, settings: Settings, pool: Sequence[str], ticker: Ticker) -> "Session":
        return cls(
            pool,
            ticker,
            durations=settings.durations,
            default_duration=settings.default_duration,
            words_per_line=settings.words_per_line,
        )

    # -- queries ---------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def durations(self) -> Tuple[int, ...]:
        return self._durations

    @property
    def duration_seconds(self) -> int:
        return self._duration

    @property
    def time_left_seconds(self) -> int:
        return self._time_left

    @property
    def source_text(self) -> str:
        return self._source_text

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._lines

    @property
    def words_per_line(self) -> int:
        return self._words_per_line

    @property
    def current_line_index(self) -> int:
        return self._index

    @property
    def current_input(self) -> str:
        return self._input

    @property
    def current_line(self) -> str:
        if self._index < len(self._lines):
            return self._lines[self._index]
        return ""

    @property
    def timer_state(self) -> TimerState:
        if self._timer is None:
            return TimerState.IDLE
        return self._timer.state

    def word_marks(self) -> Tuple[WordMark, ...]:
        return mark_words(self.current_line, self._input)

    def result(self) -> Optional[Score]:
        """The final score, or None while the session is still running."""
        if self._phase is not Phase.FINISHED:
            return None
        return score(self)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            duration_seconds=self._duration,
            time_left_seconds=self._time_left,
            lines=self._lines,
            current_line_index=self._index,
            current_input=self._input,
            word_marks=self.word_marks(),
            score=self.result(),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for snapshots; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # -- commands --------------------------------------------------------

    def select_duration(self, seconds: int) -> bool:
        """Choose the test length. Only allowed durations, and only during setup."""
        if self._phase is not Phase.SETUP:
            logger.warning("Ignoring duration %r: session is %s", seconds, self._phase.value)
            return False
        if seconds not in self._durations:
            logger.warning("Ignoring duration %r: expected one of %s", seconds, self._durations)
            return False
        self._duration = seconds
        self._time_left = seconds
        logger.info("Duration set to %ds", seconds)
        self._notify()
        return True

    def start(self) -> bool:
        """Pick a passage and enter the typing phase.

        Raises :class:`~linetype.core.passages.EmptyPoolError` when there is
        nothing to type; the session then stays in setup.
        """
        if self._phase is not Phase.SETUP:
            logger.warning("Ignoring start: session is %s", self._phase.value)
            return False
        text, lines = select_source(self._pool, self._words_per_line, self._rng)
        self._source_text = text
        self._lines = tuple(lines)
        self._index = 0
        self._input = ""
        self._time_left = self._duration
        self._timer = CountdownTimer(
            self._duration,
            self._ticker,
            on_tick=self._on_tick,
            on_expire=self._on_expire,
        )
        self._phase = Phase.TYPING
        logger.info("Session started: %d lines, %ds", len(self._lines), self._duration)
        self._notify()
        return True

    def submit_input(self, raw: str) -> MatchOutcome:
        """Feed the full contents of the input buffer for the active line."""
        if self._phase is not Phase.TYPING:
            return MatchOutcome.NOT_ACCEPTING
        if self._timer is not None and self._timer.state is TimerState.IDLE:
            self._timer.arm()

        line = self.current_line
        stripped = raw.strip()
        if raw.endswith(" ") or stripped == line:
            if stripped == line:
                if self._index + 1 < len(self._lines):
                    self._index += 1
                    self._input = ""
                    outcome = MatchOutcome.ADVANCED
                else:
                    self._input = raw
                    self._finish("all lines typed")
                    self._time_left = 0
                    outcome = MatchOutcome.COMPLETED
            else:
                self._input = raw
                outcome = MatchOutcome.REJECTED
        else:
            self._input = raw
            outcome = MatchOutcome.PENDING

        logger.debug("Input %r on line %d: %s", raw, self._index, outcome.value)
        self._notify()
        return outcome

    def restart(self) -> None:
        """Discard the current passage and return to setup, keeping the duration."""
        if self._timer is not None:
            self._timer.disarm()
        self._reset()
        logger.info("Session restarted")
        self._notify()

    # -- internals -------------------------------------------------------

    def _reset(self) -> None:
        self._timer = None
        self._phase = Phase.SETUP
        self._time_left = self._duration
        self._source_text = ""
        self._lines: Tuple[str, ...] = ()
        self._index = 0
        self._input = ""

    def _finish(self, reason: str) -> None:
        if self._timer is not None:
            self._timer.disarm()
        self._phase = Phase.FINISHED
        logger.info("Session finished (%s) on line %d of %d", reason, self._index + 1, len(self._lines))

    def _on_tick(self, time_left: int) -> None:
        if self._phase is not Phase.TYPING:
            return
        self._time_left = time_left
        if time_left > 0:
            self._notify()

    def _on_expire(self) -> None:
        if self._phase is not Phase.TYPING:
            return
        self._finish("time up")
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
