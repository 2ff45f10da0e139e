from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

WORDS_PER_LINE = 5


class EmptyPoolError(ValueError):
    """Raised when there is no passage to choose from."""


def chunk_words(text: str, words_per_line: int = WORDS_PER_LINE) -> List[str]:
    """Split *text* on whitespace into lines of ``words_per_line`` words.

    The last line holds whatever is left over (1..words_per_line words).
    """
    if words_per_line < 1:
        raise ValueError(f"words_per_line must be positive, got {words_per_line}")
    words = text.split()
    return [
        " ".join(words[i : i + words_per_line])
        for i in range(0, len(words), words_per_line)
    ]


def select_source(
    pool: Sequence[str],
    words_per_line: int = WORDS_PER_LINE,
    rng: Optional[random.Random] = None,
) -> Tuple[str, List[str]]:
    """Pick one non-blank passage uniformly at random and return it with its lines."""
    candidates = [text for text in pool if text.strip()]
    if not candidates:
        raise EmptyPoolError("No passages available")
    chooser = rng if rng is not None else random
    text = chooser.choice(candidates)
    return text, chunk_words(text, words_per_line)


class PassageRepository:
    def __init__(self, path: Path) -> None:
        self._path = path
        self._passages = self._load_passages()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> List[str]:
        return list(self._passages)

    def _load_passages(self) -> List[str]:
        if not self._path.exists():
            raise FileNotFoundError(f"Passages file not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with 'passages'")
        content = raw.get("passages")
        if content is None:
            raise ValueError(f"{self._path.name}: missing 'passages'")

        if isinstance(content, list):
            passages = [" ".join(str(item).split()) for item in content]
        else:
            # one passage per non-blank line
            passages = [" ".join(line.split()) for line in str(content).splitlines()]
        passages = [p for p in passages if p]

        if not passages:
            logger.warning("%s holds no passages", self._path)
        else:
            logger.info("Loaded %d passages from %s", len(passages), self._path)
        return passages
