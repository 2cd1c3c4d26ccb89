from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SENTENCE: Final[str] = "원하시는 페이지를 찾을 수가 없습니다. 좋아요."
VIEWS: Final[tuple[str, ...]] = ("roman", "jamo", "hangul")
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the sentence, the views to print and the log level

    Notes:
      - Unknown or malformed values fall back to defaults; they never raise.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_sentence(self) -> str:
        v = self.load().get("sentence")
        if isinstance(v, str) and v.strip():
            return v
        return DEFAULT_SENTENCE

    def set_sentence(self, value: str) -> None:
        s = self.load()
        s["sentence"] = str(value)
        self.save(s)

    def get_views(self) -> list[str]:
        v = self.load().get("views")
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, list):
            return list(VIEWS)
        views = [str(x).strip().lower() for x in v if isinstance(x, str)]
        known = [x for x in views if x in VIEWS]
        if len(known) != len(views):
            logger.warning("Ignoring unknown views in settings: %s", sorted(set(views) - set(VIEWS)))
        return known or list(VIEWS)

    def set_views(self, views: list[str]) -> None:
        s = self.load()
        s["views"] = [v for v in views if v in VIEWS]
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            logger.warning("Unknown log level %r in settings; using %s", v, DEFAULT_LOG_LEVEL)
            return DEFAULT_LOG_LEVEL
        return level
