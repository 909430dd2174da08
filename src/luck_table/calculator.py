"""Rarity weight calculator (same weighting the spin service uses)

- Base weight of an outcome is 1 / odds ("1 in N" model, unnormalized).
- When the luck multiplier L > 1 the weight is boosted by L ** (1 + rf), where
  rf in [0, 1] is the outcome's log-scaled position between odds 1 and the
  rarity ceiling (1e7). Commons gain ~L, the rarest entries ~L ** 2.
- L <= 1 applies no boost at all, so L = 0 and L = 1 give the same table.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Iterable, TYPE_CHECKING

from .defaults import RARITIES, DEFAULT_MAX_ODDS
from .models import Outcome, Distribution, Catalogue, CatalogueError, build_catalogue

if TYPE_CHECKING:
    from logging import Logger

LOG_MAX_ODDS = math.log(DEFAULT_MAX_ODDS)


# ----------------------------- helpers -----------------------------

def rarity_factor(odds: float, log_max_odds: float = LOG_MAX_ODDS) -> float:
    """Log-scaled rarity position of `odds`, clamped to [0, 1]."""
    rf = math.log(max(odds, 1)) / log_max_odds
    return max(0.0, min(1.0, rf))


def compute_weight(odds: float, luck: float, log_max_odds: float = LOG_MAX_ODDS) -> float:
    """Unnormalized weight of one outcome under luck multiplier `luck`."""
    if not math.isfinite(odds) or odds <= 0:
        raise ValueError(f"odds must be finite and > 0, got {odds!r}")
    if not math.isfinite(luck):
        raise ValueError(f"luck multiplier must be finite, got {luck!r}")

    w = 1 / odds
    if luck > 1:
        try:
            w *= luck ** (1 + rarity_factor(odds, log_max_odds))
        except OverflowError:
            raise ValueError(f"luck multiplier too large, got {luck!r}") from None
    if not math.isfinite(w):
        raise ValueError(f"weight overflows for odds={odds!r}, luck multiplier={luck!r}")
    return w


def compute_distribution(
    catalogue: Iterable[Outcome],
    luck: float,
    log_max_odds: float = LOG_MAX_ODDS,
) -> Distribution:
    """Normalized chance of each rarity tier under luck multiplier `luck`."""
    outcomes = tuple(catalogue)
    if not outcomes:
        raise CatalogueError("catalogue must contain at least one outcome")

    weights = [compute_weight(o.odds, luck, log_max_odds) for o in outcomes]
    total = sum(weights)
    if not math.isfinite(total):
        raise ValueError(f"total weight overflows for luck multiplier {luck!r}")

    by_rarity: dict[str, float] = defaultdict(float)
    for o, w in zip(outcomes, weights):
        by_rarity[o.rarity] += w

    return Distribution(chances={r: by_rarity[r] / total for r in RARITIES})


# ------------------------ RarityWeightCalculator ------------------------

class RarityWeightCalculator:
    """Computes tier distributions over one fixed, validated catalogue."""

    def __init__(
        self,
        catalogue: Iterable[Outcome | tuple[float, str]],
        *,
        max_odds: float = DEFAULT_MAX_ODDS,
        logger: "Logger | None" = None,
    ) -> None:
        if not math.isfinite(max_odds) or max_odds <= 1:
            raise CatalogueError(f"max_odds must be finite and > 1, got {max_odds!r}")
        self.catalogue: Catalogue = build_catalogue(catalogue)
        self.log_max_odds = math.log(max_odds)
        self.logger = logger

        if self.logger:
            counts = {r: sum(1 for o in self.catalogue if o.rarity == r) for r in RARITIES}
            self.logger.debug(f"📘 Catalogue: {len(self.catalogue)} outcomes {counts}")

    def weight(self, odds: float, luck: float) -> float:
        return compute_weight(odds, luck, self.log_max_odds)

    def distribution(self, luck: float) -> Distribution:
        dist = compute_distribution(self.catalogue, luck, self.log_max_odds)
        if self.logger:
            self.logger.debug(
                f"🎲 L={luck:g}: "
                + ", ".join(f"{r}={p:.6f}" for r, p in dist.items())
            )
        return dist
