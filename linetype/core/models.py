"""Value types shared by the session engine and the UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Phase(enum.Enum):
    SETUP = "setup"
    TYPING = "typing"
    FINISHED = "finished"


class MatchOutcome(enum.Enum):
    """What happened to a single input-buffer submission."""

    PENDING = "pending"
    ADVANCED = "advanced"
    COMPLETED = "completed"
    REJECTED = "rejected"
    NOT_ACCEPTING = "not_accepting"


class WordMark(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNMARKED = "unmarked"


class NotReadyError(RuntimeError):
    """Raised when results are requested before the session has finished."""


@dataclass(frozen=True)
class Score:
    """Final speed and accuracy of a finished session."""

    words_per_second: float
    accuracy_percent: int
    words_typed: int = 0
    correct_chars: int = 0
    typed_chars: int = 0

    @property
    def wps_text(self) -> str:
        return f"{self.words_per_second:.2f}"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to the presentation layer."""

    phase: Phase
    duration_seconds: int
    time_left_seconds: int
    lines: Tuple[str, ...]
    current_line_index: int
    current_input: str
    word_marks: Tuple[WordMark, ...]
    score: Optional[Score] = None

    @property
    def total_lines(self) -> int:
        return len(self.lines)
