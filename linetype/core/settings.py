from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SETTINGS_ENV = "LINETYPE_SETTINGS"
PASSAGES_ENV = "LINETYPE_PASSAGES"


@dataclass(frozen=True)
class Settings:
    durations: Tuple[int, ...] = (60, 120, 180)
    default_duration: int = 60
    words_per_line: int = 5
    passages_path: Path = DATA_DIR / "passages.yaml"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Read settings from YAML, honouring the environment overrides.

        ``LINETYPE_SETTINGS`` replaces the settings file and
        ``LINETYPE_PASSAGES`` replaces whatever passages file it names.
        """
        if path is None:
            env_path = os.environ.get(SETTINGS_ENV)
            path = Path(env_path) if env_path else DATA_DIR / "settings.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected a YAML mapping")

        durations = raw.get("durations", list(cls.durations))
        if not isinstance(durations, list) or not durations:
            raise ValueError(f"{path.name}: 'durations' must be a non-empty list")
        for value in durations:
            if not _is_positive_int(value):
                raise ValueError(f"{path.name}: invalid duration {value!r}")

        default_duration = raw.get("default_duration", durations[0])
        if default_duration not in durations:
            raise ValueError(f"{path.name}: 'default_duration' must be one of {durations}")

        words_per_line = raw.get("words_per_line", cls.words_per_line)
        if not _is_positive_int(words_per_line):
            raise ValueError(f"{path.name}: invalid 'words_per_line' {words_per_line!r}")

        passages_env = os.environ.get(PASSAGES_ENV)
        if passages_env:
            passages_path = Path(passages_env)
        else:
            passages_path = path.parent / str(raw.get("passages_file", "passages.yaml"))

        settings = cls(
            durations=tuple(durations),
            default_duration=default_duration,
            words_per_line=words_per_line,
            passages_path=passages_path,
        )
        logger.info("Loaded settings from %s", path)
        return settings


def _is_positive_int(value: object) -> bool:
    # bool is an int subclass; "true" is not a duration
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
