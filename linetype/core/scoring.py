from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Sequence

from linetype.core.models import NotReadyError, Phase, Score

if TYPE_CHECKING:
    from linetype.core.session import Session


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``round`` would go to even)."""
    return int(math.floor(value + 0.5))


def round_cents_half_up(value: float) -> float:
    """Round to two decimals, halves going up, using the exact binary value of *value*."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def count_words(text: str) -> int:
    return len(text.split())


def typed_text(lines: Sequence[str], current_line_index: int, current_input: str) -> str:
    """Everything the user has typed, as compared against the source text.

    Completed lines are joined with single spaces and the active input is
    appended directly after them, with no separator.
    """
    return " ".join(lines[:current_line_index]) + current_input


def correct_char_count(typed: str, source: str) -> int:
    # zip stops at the shorter string; positions past the source never match
    return sum(1 for a, b in zip(typed, source) if a == b)


def accuracy_percent(typed: str, source: str) -> int:
    if not typed:
        return 0
    return round_half_up(100 * correct_char_count(typed, source) / len(typed))


def score(session: "Session") -> Score:
    """Compute words per second and accuracy for a finished session.

    Speed is measured against the configured duration, not the time actually
    spent, so finishing every line early still divides by the full duration.
    """
    if session.phase is not Phase.FINISHED:
        raise NotReadyError(f"Cannot score a session in phase {session.phase.value!r}")

    index = session.current_line_index
    current_input = session.current_input
    words_typed = index * session.words_per_line + count_words(current_input)
    text = typed_text(session.lines, index, current_input)
    correct = correct_char_count(text, session.source_text)

    return Score(
        words_per_second=round_cents_half_up(words_typed / session.duration_seconds),
        accuracy_percent=accuracy_percent(text, session.source_text),
        words_typed=words_typed,
        correct_chars=correct,
        typed_chars=len(text),
    )
