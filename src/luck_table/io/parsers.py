# luck_table/io/parsers.py
from __future__ import annotations

import math
from typing import Any, Iterable, List, Tuple, TYPE_CHECKING

from pydantic import ValidationError

from .schemas import TableConfigIn, PolicyIn
from ..models import CatalogueError, LuckPolicy, TableConfig, build_catalogue
from ..utils import parse_multiplier

if TYPE_CHECKING:
    from logging import Logger


def _format_errors(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "<root>"
        parts.append(f"{loc}: {e['msg']}")
    return "; ".join(parts)


def _finite_sweep(values: Iterable[float], where: str) -> Tuple[float, ...]:
    out: List[float] = []
    for i, v in enumerate(values):
        if not math.isfinite(v):
            raise CatalogueError(f"{where}[{i}] must be finite, got {v!r}")
        out.append(v)
    return tuple(out)


def parse_policy(data: PolicyIn | None, default: LuckPolicy) -> LuckPolicy:
    """Overlay the fields present in `data` onto `default`."""
    if data is None:
        return default
    crate_bonus = default.crate_bonus
    if data.crate_bonus is not None:
        try:
            crate_bonus = parse_multiplier(data.crate_bonus)
        except ValueError:
            raise CatalogueError(f"policy.crate_bonus: not a multiplier: {data.crate_bonus!r}") from None
    return LuckPolicy(
        name=data.name if data.name is not None else default.name,
        base=data.base if data.base is not None else default.base,
        crate_bonus=crate_bonus,
        luck_per_percent=(
            data.luck_per_percent if data.luck_per_percent is not None else default.luck_per_percent
        ),
    )


def parse_config(
    data: Any,
    default: TableConfig | None = None,
    logger: "Logger | None" = None,
) -> TableConfig:
    """Validate a table config document -> TableConfig; missing keys use `default`."""
    base = default or TableConfig()
    if not isinstance(data, dict):
        raise CatalogueError("table config must be an object")
    try:
        doc = TableConfigIn.model_validate(data)
    except ValidationError as e:
        raise CatalogueError(_format_errors(e)) from None

    catalogue = base.catalogue
    if doc.outcomes is not None:
        catalogue = build_catalogue((o.odds, o.rarity) for o in doc.outcomes)
    elif logger:
        logger.info("ℹ️ No outcomes in config — using built-in catalogue.")

    multipliers = base.multipliers
    if doc.multipliers is not None:
        multipliers = _finite_sweep(doc.multipliers, "multipliers")

    player_luck = base.player_luck
    if doc.player_luck is not None:
        player_luck = _finite_sweep(doc.player_luck, "player_luck")

    return TableConfig(
        catalogue=catalogue,
        multipliers=multipliers,
        player_luck=player_luck,
        policy=parse_policy(doc.policy, base.policy),
    )
