"""Tests for linetype.core.scoring – words per second and accuracy."""

from __future__ import annotations

import pytest

from linetype.core.models import NotReadyError, Score
from linetype.core.scoring import (
    accuracy_percent,
    correct_char_count,
    count_words,
    round_cents_half_up,
    round_half_up,
    score,
    typed_text,
)
from linetype.core.session import Session

LINE_ONE = "the quick brown fox jumps"
LINE_TWO = "over the lazy dog end"


# ===========================================================================
# Helpers
# ===========================================================================

class TestHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0), (0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (99.49, 99), (99.5, 100)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(15 / 120, 0.13), (75 / 120, 0.63), (135 / 120, 1.13), (10 / 60, 0.17), (10 / 120, 0.08), (0.0, 0.0)],
    )
    def test_round_cents_half_up(self, value, expected):
        assert round_cents_half_up(value) == expected

    def test_count_words_ignores_extra_whitespace(self):
        assert count_words("  over   the lazy ") == 3
        assert count_words("") == 0
        assert count_words("   ") == 0

    def test_typed_text_has_no_gap_before_current_input(self):
        lines = (LINE_ONE, LINE_TWO)
        assert typed_text(lines, 1, "over") == LINE_ONE + "over"
        assert typed_text(lines, 0, "the q") == "the q"
        assert typed_text(lines, 0, "") == ""

    def test_correct_chars_positional(self):
        assert correct_char_count("abc", "abc") == 3
        assert correct_char_count("axc", "abc") == 2
        assert correct_char_count("abcdef", "abc") == 3
        assert correct_char_count("", "abc") == 0

    def test_accuracy_empty_typed_is_zero(self):
        assert accuracy_percent("", "anything") == 0

    def test_accuracy_bounds(self):
        assert accuracy_percent("abc", "abc") == 100
        assert accuracy_percent("xyz", "abc") == 0
        assert 0 <= accuracy_percent("abxyzw", "abc") <= 100

    def test_accuracy_rounds(self):
        # 2 of 3 correct -> 66.67 -> 67
        assert accuracy_percent("abx", "abc") == 67


# ===========================================================================
# score()
# ===========================================================================

class TestScore:
    def test_not_ready_in_setup(self, session: Session):
        with pytest.raises(NotReadyError):
            score(session)

    def test_not_ready_while_typing(self, typing_session: Session):
        typing_session.submit_input("the ")
        with pytest.raises(NotReadyError):
            score(typing_session)
        assert typing_session.result() is None

    def test_all_lines_at_sixty_seconds(self, typing_session: Session):
        typing_session.submit_input(LINE_ONE + " ")
        typing_session.submit_input(LINE_TWO)
        result = score(typing_session)
        assert result.words_typed == 10
        assert result.words_per_second == 0.17
        assert result.wps_text == "0.17"
        assert typing_session.result() == result

    def test_uses_configured_duration_not_elapsed(self, session: Session, ticker):
        session.select_duration(120)
        session.start()
        session.submit_input(LINE_ONE + " ")
        ticker.fire(5)
        session.submit_input(LINE_TWO)
        # 10 words over the full 120s, even though only 5s passed
        assert score(session).words_per_second == 0.08

    def test_accuracy_after_completion(self, typing_session: Session):
        typing_session.submit_input(LINE_ONE + " ")
        typing_session.submit_input(LINE_TWO)
        result = score(typing_session)
        text = LINE_ONE + LINE_TWO
        source = typing_session.source_text
        assert result.typed_chars == len(text)
        assert result.correct_chars == correct_char_count(text, source)
        assert result.accuracy_percent == round_half_up(100 * result.correct_chars / len(text))
        # the missing separator shifts the second line out of alignment
        assert result.accuracy_percent < 100

    def test_exact_half_cent_rounds_up(self, ticker):
        text = " ".join(f"w{i}" for i in range(15))
        s = Session([text], ticker)
        s.select_duration(120)
        s.start()
        for line in s.lines:
            s.submit_input(line + " ")
        result = score(s)
        assert result.words_typed == 15
        assert result.words_per_second == 0.13
        assert result.wps_text == "0.13"

    def test_time_up_mid_first_line(self, typing_session: Session, ticker):
        typing_session.submit_input("the quick bro")
        ticker.fire(60)
        result = score(typing_session)
        assert result.words_typed == 3
        assert result.words_per_second == 0.05
        assert result.accuracy_percent == 100

    def test_time_up_with_no_input_pending(self, typing_session: Session, ticker):
        typing_session.submit_input("t")
        typing_session.submit_input("")
        ticker.fire(60)
        result = score(typing_session)
        assert result.words_typed == 0
        assert result.words_per_second == 0.0
        assert result.accuracy_percent == 0

    def test_time_up_after_first_line(self, typing_session: Session, ticker):
        typing_session.submit_input(LINE_ONE + " ")
        ticker.fire(60)
        result = score(typing_session)
        assert result.words_typed == 5
        assert result.typed_chars == len(LINE_ONE)
        assert result.accuracy_percent == 100

    def test_errors_lower_accuracy(self, typing_session: Session, ticker):
        typing_session.submit_input("tha quick")
        ticker.fire(60)
        result = score(typing_session)
        # 8 of 9 characters line up with the source
        assert result.accuracy_percent == 89

    def test_score_is_frozen(self):
        s = Score(words_per_second=0.5, accuracy_percent=90)
        with pytest.raises(AttributeError):
            s.accuracy_percent = 10  # type: ignore[misc]

    def test_wps_text_two_decimals(self):
        assert Score(words_per_second=1.0, accuracy_percent=0).wps_text == "1.00"
