"""Shared fixtures for the session engine tests."""

from __future__ import annotations

import random
from typing import Callable, Optional

import pytest

from linetype.core.session import Session

SAMPLE_TEXT = "the quick brown fox jumps over the lazy dog end"


class ManualTicker:
    """Ticker that only fires when the test says so."""

    def __init__(self) -> None:
        self.interval_ms: Optional[int] = None
        self.callback: Optional[Callable[[], None]] = None
        self.start_calls = 0
        self.stop_calls = 0

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.start_calls += 1
        self.interval_ms = interval_ms
        self.callback = callback

    def stop(self) -> None:
        self.stop_calls += 1
        self.callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is not None:
                self.callback()


@pytest.fixture()
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture()
def session(ticker: ManualTicker) -> Session:
    return Session([SAMPLE_TEXT], ticker, rng=random.Random(0))


@pytest.fixture()
def typing_session(session: Session) -> Session:
    session.start()
    return session
