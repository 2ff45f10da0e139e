"""Typing screen widgets: passage view and the info bar."""

from __future__ import annotations

import html
from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from linetype.core.models import SessionSnapshot, WordMark
from linetype.ui.colors import ThemeColors, time_left_color


def render_word(word: str, mark: WordMark) -> str:
    """HTML for one word of the active line."""
    text = html.escape(word)
    if mark is WordMark.CORRECT:
        return f'<span style="color:{ThemeColors.WORD_CORRECT};">{text}</span>'
    if mark is WordMark.INCORRECT:
        return (
            f'<span style="color:{ThemeColors.WORD_INCORRECT}; '
            f'background:{ThemeColors.WORD_INCORRECT_BG};">{text}</span>'
        )
    return f'<span style="color:{ThemeColors.TEXT_PRIMARY};">{text}</span>'


def render_active_line(line: str, marks: Sequence[WordMark]) -> str:
    words = line.split()
    return " ".join(render_word(word, mark) for word, mark in zip(words, marks))


def render_passage(snapshot: SessionSnapshot) -> str:
    """Rich-text rendering of every line: done lines green, the active one per word, the rest muted."""
    rows = []
    for index, line in enumerate(snapshot.lines):
        if index < snapshot.current_line_index:
            body = f'<span style="color:{ThemeColors.WORD_CORRECT};">{html.escape(line)}</span>'
            rows.append(f"<div>{body}</div>")
        elif index == snapshot.current_line_index:
            body = render_active_line(line, snapshot.word_marks)
            rows.append(f'<div style="background:{ThemeColors.ACTIVE_LINE_BG}; font-weight:600;">{body}</div>')
        else:
            body = f'<span style="color:{ThemeColors.TEXT_MUTED};">{html.escape(line)}</span>'
            rows.append(f"<div>{body}</div>")
    return "".join(rows)


class PassageView(QLabel):
    """Read-only rich-text view of the passage lines."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {ThemeColors.CARD_BG};
                border: 1px solid {ThemeColors.CARD_BORDER};
                border-radius: 12px;
                padding: 16px;
                font-size: 20px;
                line-height: 150%;
            }}
            """
        )

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        self.setText(render_passage(snapshot))


class InfoBar(QWidget):
    """Time left on the left, line progress on the right."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        self._time_label = QLabel("")
        self._line_label = QLabel("")
        self._line_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self._line_label.setStyleSheet(f"color: {ThemeColors.TEXT_SECONDARY}; font-size: 16px;")
        layout.addWidget(self._time_label, 1)
        layout.addWidget(self._line_label, 1)

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        color = time_left_color(snapshot.time_left_seconds, snapshot.duration_seconds)
        self._time_label.setStyleSheet(f"color: {color}; font-size: 16px; font-weight: 700;")
        self._time_label.setText(f"Time Left: {snapshot.time_left_seconds}s")
        shown = min(snapshot.current_line_index + 1, snapshot.total_lines)
        self._line_label.setText(f"Line {shown} / {snapshot.total_lines}")
