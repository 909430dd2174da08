"""Table printer for the luck sweeps.

Usage from CLI:
    from .reporter import TableReporter

    reporter = TableReporter()
    reporter.emit_multiplier_table(calculator, config.multipliers)
    reporter.emit_player_table(calculator, config.player_luck, config.policy)

Row formatting lives in plain functions so it can be checked without a
terminal; the reporter only decides what gets printed and how it is colored.
"""

from __future__ import annotations

from typing import Iterable

import click

from .calculator import RarityWeightCalculator
from .models import Distribution, LuckPolicy


MULTIPLIER_HEADER = (
    "Luck mult | Common  | Rare   | Epic    | Legendary | Mythic   | Rare+   | Epic+   | Leg+"
)
MULTIPLIER_RULE = (
    "---------|---------|--------|---------|-----------|----------|---------|--------|------"
)
PLAYER_HEADER = "Player luck | Total mult | Common  | Rare+   | Epic+    | Leg+"


# ------------------------------- rows -------------------------------

def _pct(value: float, decimals: int, width: int) -> str:
    return f"{value * 100:.{decimals}f}".rjust(width) + "%"


def _luck_label(luck: float) -> str:
    return str(int(luck)) if float(luck).is_integer() else f"{luck:g}"


def format_multiplier_row(luck: float, dist: Distribution) -> str:
    """One row of the luck-multiplier table."""
    return " | ".join(
        [
            f"{luck:.2f}".rjust(8),
            _pct(dist["Common"], 1, 6),
            _pct(dist["Rare"], 1, 5),
            _pct(dist["Epic"], 2, 6),
            _pct(dist["Legendary"], 3, 8),
            _pct(dist["Mythic"], 4, 7),
            _pct(dist.or_better("Rare"), 1, 6),
            _pct(dist.or_better("Epic"), 2, 6),
            _pct(dist.or_better("Legendary"), 3, 5),
        ]
    )


def format_player_row(luck: float, multiplier: float, dist: Distribution) -> str:
    """One row of the player-luck table."""
    return " | ".join(
        [
            _luck_label(luck).rjust(11),
            f"{multiplier:.2f}".rjust(10),
            _pct(dist["Common"], 1, 6),
            _pct(dist.or_better("Rare"), 1, 6),
            _pct(dist.or_better("Epic"), 2, 7),
            _pct(dist.or_better("Legendary"), 3, 6),
        ]
    )


def player_table_title(policy: LuckPolicy) -> str:
    return f"--- Player luck (with {policy.name} = {policy.crate_bonus * 100:g}% crate) ---"


# ----------------------------- reporter -----------------------------

class TableReporter:
    """Prints the sweep tables (and single distributions) to stdout."""

    def __init__(self, *, use_colors: bool = True):
        self.use_colors = use_colors

    # ---- public ----
    def emit_multiplier_table(
        self, calculator: RarityWeightCalculator, multipliers: Iterable[float]
    ) -> None:
        self._print_header(MULTIPLIER_HEADER, color="blue", bold=True)
        self._println(MULTIPLIER_RULE)
        for luck in multipliers:
            self._println(format_multiplier_row(luck, calculator.distribution(luck)))

    def emit_player_table(
        self,
        calculator: RarityWeightCalculator,
        player_luck: Iterable[float],
        policy: LuckPolicy,
    ) -> None:
        self._print_header(player_table_title(policy), color="yellow")
        self._print_header(PLAYER_HEADER, color="blue", bold=True)
        for luck in player_luck:
            mult = policy.multiplier(luck)
            self._println(format_player_row(luck, mult, calculator.distribution(mult)))

    def emit_distribution(self, luck: float, dist: Distribution) -> None:
        self._print_header(f"🎲 Luck multiplier {luck:.2f}", color="green", bold=True)
        for rarity, p in dist.items():
            self._println(
                f"  • {rarity.ljust(9)} {p * 100:9.4f}%   "
                f"(or better {dist.or_better(rarity) * 100:9.4f}%)"
            )

    # ---- printing primitives ----
    def _print_header(self, text: str, *, color: str | None = None, bold: bool = False) -> None:
        if self.use_colors and color:
            click.secho(text, fg=color, bold=bold)
        else:
            self._println(text)

    def _println(self, text: str = "") -> None:
        click.echo(text)
