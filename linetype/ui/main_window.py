from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from linetype.core.models import Phase, SessionSnapshot
from linetype.core.passages import EmptyPoolError
from linetype.core.session import Session
from linetype.ui.colors import ThemeColors
from linetype.ui.typing_widgets import InfoBar, PassageView

logger = logging.getLogger(__name__)


def duration_label(seconds: int) -> str:
    """Button caption for a duration: whole minutes where possible."""
    if seconds % 60 == 0:
        return f"{seconds // 60} min"
    return f"{seconds}s"


class MainWindow(QMainWindow):
    """Three-screen window (setup, typing, results) driven by session snapshots.

    The window never changes session state on its own; it forwards button
    clicks and input-box edits as commands and redraws from the snapshots the
    session publishes.
    """

    def __init__(self, session: Session) -> None:
        super().__init__()
        self._session = session
        self._duration_buttons: Dict[int, QPushButton] = {}

        self._stack: Optional[QStackedWidget] = None
        self._setup_screen: Optional[QWidget] = None
        self._typing_screen: Optional[QWidget] = None
        self._results_screen: Optional[QWidget] = None
        self._info_bar: Optional[InfoBar] = None
        self._passage_view: Optional[PassageView] = None
        self._input_box: Optional[QLineEdit] = None
        self._wps_label: Optional[QLabel] = None
        self._accuracy_label: Optional[QLabel] = None

        self._build_ui()
        self._unsubscribe = self._session.subscribe(self._on_snapshot)
        self._on_snapshot(self._session.snapshot())

    def _build_ui(self) -> None:
        """Construct the setup, typing and results screens."""
        self.setWindowTitle("Typing Speed Test")
        self.setMinimumSize(800, 560)
        self.setStyleSheet(
            f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {ThemeColors.BG_TOP}, stop:1 {ThemeColors.BG_BOTTOM});
            }}
            QLabel {{ color: {ThemeColors.TEXT_PRIMARY}; }}
            QPushButton {{
                background: {ThemeColors.CARD_BG};
                color: {ThemeColors.PRIMARY_DARK};
                border: 1px solid {ThemeColors.PRIMARY_LIGHT};
                border-radius: 8px;
                padding: 8px 18px;
                font-size: 15px;
            }}
            QPushButton:checked {{
                background: {ThemeColors.PRIMARY};
                color: white;
            }}
            """
        )

        self._stack = QStackedWidget()
        self._setup_screen = self._build_setup_screen()
        self._typing_screen = self._build_typing_screen()
        self._results_screen = self._build_results_screen()
        self._stack.addWidget(self._setup_screen)
        self._stack.addWidget(self._typing_screen)
        self._stack.addWidget(self._results_screen)
        self.setCentralWidget(self._stack)

    def _title(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(f"color: {ThemeColors.PRIMARY_DARK}; font-size: 28px; font-weight: 800;")
        return label

    def _build_setup_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)
        layout.addStretch(1)
        layout.addWidget(self._title("Typing Speed Test"))

        prompt = QLabel("Select test duration:")
        prompt.setAlignment(Qt.AlignCenter)
        layout.addWidget(prompt)

        row = QHBoxLayout()
        row.addStretch(1)
        group = QButtonGroup(screen)
        group.setExclusive(True)
        for seconds in self._session.durations:
            button = QPushButton(duration_label(seconds))
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, s=seconds: self._session.select_duration(s))
            group.addButton(button)
            row.addWidget(button)
            self._duration_buttons[seconds] = button
        row.addStretch(1)
        layout.addLayout(row)

        start_button = QPushButton("Start Test")
        start_button.clicked.connect(self._start_test)
        layout.addWidget(start_button, 0, Qt.AlignCenter)
        layout.addStretch(2)
        return screen

    def _build_typing_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        self._info_bar = InfoBar()
        layout.addWidget(self._info_bar)

        self._passage_view = PassageView()
        layout.addWidget(self._passage_view, 1)

        self._input_box = QLineEdit()
        self._input_box.setPlaceholderText("Start typing here...")
        self._input_box.setStyleSheet(
            f"""
            QLineEdit {{
                background: white;
                border: 2px solid {ThemeColors.PRIMARY_LIGHT};
                border-radius: 10px;
                padding: 10px;
                font-size: 18px;
            }}
            """
        )
        self._input_box.textChanged.connect(self._session.submit_input)
        layout.addWidget(self._input_box)
        return screen

    def _build_results_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addStretch(1)
        layout.addWidget(self._title("Test Complete!"))

        self._wps_label = QLabel("")
        self._wps_label.setAlignment(Qt.AlignCenter)
        self._wps_label.setStyleSheet("font-size: 18px;")
        layout.addWidget(self._wps_label)

        self._accuracy_label = QLabel("")
        self._accuracy_label.setAlignment(Qt.AlignCenter)
        self._accuracy_label.setStyleSheet("font-size: 18px;")
        layout.addWidget(self._accuracy_label)

        restart_button = QPushButton("Try Again")
        restart_button.clicked.connect(self._session.restart)
        layout.addWidget(restart_button, 0, Qt.AlignCenter)
        layout.addStretch(2)
        return screen

    def _start_test(self) -> None:
        try:
            self._session.start()
        except EmptyPoolError as e:
            logger.error("Cannot start test: %s", e)
            QMessageBox.warning(self, "No passages", "There is no text available to type.")

    def _on_snapshot(self, snapshot: SessionSnapshot) -> None:
        """Redraw whichever screen matches the snapshot's phase."""
        if self._stack is None:
            return
        if snapshot.phase is Phase.SETUP:
            self._show_setup(snapshot)
        elif snapshot.phase is Phase.TYPING:
            self._show_typing(snapshot)
        else:
            self._show_results(snapshot)

    def _show_setup(self, snapshot: SessionSnapshot) -> None:
        for seconds, button in self._duration_buttons.items():
            button.setChecked(seconds == snapshot.duration_seconds)
        if self._input_box is not None:
            self._sync_input(snapshot.current_input)
        self._stack.setCurrentWidget(self._setup_screen)

    def _show_typing(self, snapshot: SessionSnapshot) -> None:
        if self._info_bar is not None:
            self._info_bar.show_snapshot(snapshot)
        if self._passage_view is not None:
            self._passage_view.show_snapshot(snapshot)
        if self._input_box is not None:
            self._sync_input(snapshot.current_input)
        if self._stack.currentWidget() is not self._typing_screen:
            self._stack.setCurrentWidget(self._typing_screen)
            if self._input_box is not None:
                self._input_box.setFocus()

    def _show_results(self, snapshot: SessionSnapshot) -> None:
        result = snapshot.score
        if result is not None:
            if self._wps_label is not None:
                self._wps_label.setText(f"<b>Words per second (WPS):</b> {result.wps_text}")
            if self._accuracy_label is not None:
                self._accuracy_label.setText(f"<b>Accuracy:</b> {result.accuracy_percent}%")
        self._stack.setCurrentWidget(self._results_screen)

    def _sync_input(self, text: str) -> None:
        """Mirror the session's buffer into the input box without re-submitting it."""
        if self._input_box.text() == text:
            return
        blocked = self._input_box.blockSignals(True)
        self._input_box.setText(text)
        self._input_box.blockSignals(blocked)

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        self._session.restart()
        super().closeEvent(event)
