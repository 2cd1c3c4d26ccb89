from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExampleItem:
    text: str
    roman: str
    roman_after: str
    hangul_after: str
    note: str = ""


class ExamplesRepository:
    """Load example sentences and their expected renderings from data/examples.yaml."""

    def __init__(self, *, data_path: Path | None = None) -> None:
        self._data_path = data_path or (Path(__file__).resolve().parents[2] / "data" / "examples.yaml")
        self._items: list[ExampleItem] = []
        self._by_text: dict[str, ExampleItem] = {}

        self._load()

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def items(self) -> list[ExampleItem]:
        return list(self._items)

    def by_text(self, text: str) -> ExampleItem | None:
        return self._by_text.get(text)

    def _load(self) -> None:
        data = self._read_yaml()
        items = data.get("examples", []) if isinstance(data, dict) else []
        for raw in items:
            item = self._parse_item(raw)
            if item is None:
                logger.debug("Skipping malformed example: %r", raw)
                continue
            self._items.append(item)
            self._by_text[item.text] = item

    def _read_yaml(self) -> dict[str, Any]:
        try:
            if not self._data_path.exists():
                return {}
            raw = self._data_path.read_text(encoding="utf-8")
            data = yaml.safe_load(raw)
            return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read examples %s: %s", self._data_path, e)
            return {}

    def _parse_item(self, raw: Any) -> ExampleItem | None:
        if not isinstance(raw, dict):
            return None

        required = ["text", "roman", "roman_after", "hangul_after"]
        for key in required:
            value = raw.get(key)
            if not isinstance(value, str) or not value:
                return None

        note = raw.get("note")
        return ExampleItem(
            text=raw["text"],
            roman=raw["roman"],
            roman_after=raw["roman_after"],
            hangul_after=raw["hangul_after"],
            note=note.strip() if isinstance(note, str) else "",
        )
