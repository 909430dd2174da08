"""Models for the luck table.

This module defines dataclasses that represent the outcome catalogue, the
per-tier distribution and the player luck policy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Tuple

from .defaults import (
    RARITIES,
    DEFAULT_BASE_MULTIPLIER,
    DEFAULT_CRATE_BONUS,
    DEFAULT_LUCK_PER_PERCENT,
    DEFAULT_POLICY_NAME,
    DEFAULT_MULTIPLIER_SWEEP,
    DEFAULT_PLAYER_LUCK_SWEEP,
    DEFAULT_CATALOGUE,
)


class CatalogueError(ValueError):
    """Raised when catalogue or table configuration data is invalid."""


@dataclass(slots=True, frozen=True)
class Outcome:
    """A single rollable outcome.

    Attributes:
        odds: "1 in N" denominator of the unboosted frequency (bigger = rarer).
        rarity: The rarity tier (one of RARITIES).
    """

    odds: float
    rarity: str

    def __post_init__(self) -> None:
        if not isinstance(self.odds, (int, float)) or isinstance(self.odds, bool):
            raise CatalogueError(f"odds must be a number, got {self.odds!r}")
        if not math.isfinite(self.odds) or self.odds <= 0:
            raise CatalogueError(f"odds must be finite and > 0, got {self.odds!r}")
        if self.rarity not in RARITIES:
            raise CatalogueError(
                f"unknown rarity {self.rarity!r} (expected one of {', '.join(RARITIES)})"
            )

    def __repr__(self) -> str:
        return f"Outcome(odds={self.odds}, rarity='{self.rarity}')"


Catalogue = Tuple[Outcome, ...]


def build_catalogue(entries: Iterable[Outcome | tuple[float, str]]) -> Catalogue:
    """Freeze (odds, rarity) pairs or Outcomes into a validated catalogue."""
    out: list[Outcome] = []
    for entry in entries:
        if isinstance(entry, Outcome):
            out.append(entry)
        else:
            odds, rarity = entry
            out.append(Outcome(odds=odds, rarity=rarity))
    if not out:
        raise CatalogueError("catalogue must contain at least one outcome")
    return tuple(out)


@dataclass(slots=True, frozen=True)
class Distribution:
    """Probability of landing in each rarity tier.

    Always holds every tier of RARITIES, in order, even when a tier has no
    outcomes (probability 0.0).
    """

    chances: Dict[str, float]

    def __getitem__(self, rarity: str) -> float:
        return self.chances[rarity]

    def __iter__(self) -> Iterator[str]:
        return iter(self.chances)

    def items(self):
        return self.chances.items()

    def total(self) -> float:
        return sum(self.chances.values())

    def or_better(self, rarity: str) -> float:
        """Combined chance of `rarity` and every rarer tier."""
        try:
            idx = RARITIES.index(rarity)
        except ValueError:
            raise KeyError(rarity) from None
        return sum(self.chances[r] for r in RARITIES[idx:])


@dataclass(slots=True, frozen=True)
class LuckPolicy:
    """Maps the player-facing luck stat onto a luck multiplier.

    multiplier = base + floor(luck / luck_per_percent) / 100 + crate_bonus

    Attributes:
        name: Label shown in the table heading (e.g., 'Case 7').
        base: Multiplier with no luck and no crate.
        crate_bonus: Flat bonus granted by the crate being opened.
        luck_per_percent: Luck points needed for +1% multiplier.
    """

    name: str = DEFAULT_POLICY_NAME
    base: float = DEFAULT_BASE_MULTIPLIER
    crate_bonus: float = DEFAULT_CRATE_BONUS
    luck_per_percent: int = DEFAULT_LUCK_PER_PERCENT

    def __post_init__(self) -> None:
        if (
            not isinstance(self.luck_per_percent, int)
            or isinstance(self.luck_per_percent, bool)
            or self.luck_per_percent <= 0
        ):
            raise CatalogueError(
                f"luck_per_percent must be an int > 0, got {self.luck_per_percent!r}"
            )
        if not (math.isfinite(self.base) and math.isfinite(self.crate_bonus)):
            raise CatalogueError("policy base and crate_bonus must be finite")

    def player_percent(self, luck: float) -> float:
        return math.floor(luck / self.luck_per_percent) / 100

    def multiplier(self, luck: float) -> float:
        return self.base + self.player_percent(luck) + self.crate_bonus


@dataclass(slots=True, frozen=True)
class TableConfig:
    """Everything the table driver needs for both sweeps."""

    catalogue: Catalogue = field(default_factory=lambda: build_catalogue(DEFAULT_CATALOGUE))
    multipliers: Tuple[float, ...] = tuple(DEFAULT_MULTIPLIER_SWEEP)
    player_luck: Tuple[float, ...] = tuple(DEFAULT_PLAYER_LUCK_SWEEP)
    policy: LuckPolicy = field(default_factory=LuckPolicy)
