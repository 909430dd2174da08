# luck_table/io/loader.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Union, TYPE_CHECKING

from .sources import FileSource, DictSource
from . import parsers
from ..models import CatalogueError, TableConfig

if TYPE_CHECKING:
    from logging import Logger

SourceLike = Union[str, Path, FileSource, DictSource]


class Loader:
    """
    Loads table configs from file paths or in-memory JSON.

    - Paths (str/Path/FileSource) are read as JSON documents.
    - DictSource wraps a document that is already parsed.
    - Keys missing from the document fall back to the built-in defaults.
    """

    def __init__(self, logger: "Logger | None" = None):
        self.logger = logger

    # ---------- Public API ----------
    def load_config(self, source: SourceLike | None = None) -> TableConfig:
        if source is None:
            self._info("ℹ️ No config file — using built-in catalogue and sweeps.")
            return TableConfig()

        src = self._coerce_source(source)
        data = self._load_json(src)
        config = parsers.parse_config(data, logger=self.logger)
        self._info(
            f"✅ Loaded config from {src.describe()}: {len(config.catalogue)} outcomes, "
            f"{len(config.multipliers)} multipliers, {len(config.player_luck)} luck values."
        )
        return config

    def with_crate_bonus(self, config: TableConfig, crate_bonus: float | None) -> TableConfig:
        """Return `config` with its policy crate bonus replaced (None keeps it)."""
        if crate_bonus is None:
            return config
        self._debug(f"🎁 Crate bonus override: {config.policy.crate_bonus:g} -> {crate_bonus:g}")
        return replace(config, policy=replace(config.policy, crate_bonus=crate_bonus))

    # ---------- Helpers ----------
    def _coerce_source(self, source: SourceLike) -> FileSource | DictSource:
        if isinstance(source, (FileSource, DictSource)):
            return source
        return FileSource(source)

    def _load_json(self, src: FileSource | DictSource) -> Any:
        try:
            data = src.load_json()
        except FileNotFoundError:
            self._error(f"❌ File not found: {src.describe()}")
            raise
        except ValueError as e:
            raise CatalogueError(f"{src.describe()} is not valid JSON: {e}") from None
        self._debug(f"📘 Loaded file: {src.describe()}")
        return data

    # ---------- Logging wrappers ----------
    def _debug(self, msg: str) -> None:
        if self.logger:
            self.logger.debug(msg)

    def _info(self, msg: str) -> None:
        if self.logger:
            self.logger.info(msg)

    def _error(self, msg: str) -> None:
        if self.logger:
            self.logger.error(msg)
