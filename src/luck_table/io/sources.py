# luck_table/io/sources.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class FileSource:
    """Reads a JSON table config from a file path on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load_json(self) -> Any:
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def describe(self) -> str:
        return str(self.path)


class DictSource:
    """Returns a table config that is already in-memory (dict)."""

    def __init__(self, data: Any, label: str = "<memory>"):
        self.data = data
        self.label = label

    def load_json(self) -> Any:
        return self.data

    def describe(self) -> str:
        return self.label
