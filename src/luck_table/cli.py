"""Command-line interface for the luck table"""

from __future__ import annotations

from typing import Any, Dict

import click

from .calculator import RarityWeightCalculator
from .io.loader import Loader
from .models import CatalogueError
from .reporter import TableReporter
from .utils import setup_logger, parse_multiplier


class MultiplierParam(click.ParamType):
    """Accepts 2.5 or 250%."""

    name = "multiplier"

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            return value
        try:
            return parse_multiplier(value)
        except ValueError:
            self.fail(f"{value!r} is not a multiplier (try 2.5 or 250%)", param, ctx)


# ---------- Sweeps ----------
def _print_tables(shared: Dict[str, Any], *, multipliers: bool = False, player: bool = False) -> None:
    """Print the requested sweep tables; numeric failures become a clean CLI error."""
    config = shared["config"]
    calculator = shared["calculator"]
    reporter = shared["reporter"]
    try:
        if multipliers:
            reporter.emit_multiplier_table(calculator, config.multipliers)
        if multipliers and player:
            click.echo()
        if player:
            reporter.emit_player_table(calculator, config.player_luck, config.policy)
    except ValueError as e:
        shared["logger"].error(f"❌ Sweep failed: {e}")
        raise click.ClickException(str(e)) from e


# ---------- Root group: loads everything once ----------
@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str),
    default=None,
    show_default=True,
    help="Optional JSON with outcomes / multipliers / player_luck / policy.",
)
@click.option(
    "--crate-bonus",
    type=MultiplierParam(),
    default=None,
    help="Override the crate bonus of the luck policy (e.g. 2.5 or 250%).",
)
@click.option("--no-color", is_flag=True, help="Print table headings without ANSI colors.")
@click.option("--verbose", is_flag=True, help="Enable detailed debug logs.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    crate_bonus: float | None,
    no_color: bool,
    verbose: bool,
):
    """🎰 Rarity chances vs luck multiplier"""
    logger = setup_logger(verbose)
    loader = Loader(logger)

    try:
        config = loader.load_config(config_path)
        config = loader.with_crate_bonus(config, crate_bonus)
        calculator = RarityWeightCalculator(config.catalogue, logger=logger)
    except CatalogueError as e:
        logger.error(f"❌ Invalid table config: {e}")
        raise click.ClickException(str(e)) from e

    ctx.obj = {
        "logger": logger,
        "config": config,
        "calculator": calculator,
        "reporter": TableReporter(use_colors=not no_color),
    }

    # No subcommand: print both tables
    if ctx.invoked_subcommand is None:
        _print_tables(ctx.obj, multipliers=True, player=True)


# ---------- Subcommand: luck multiplier sweep ----------
@cli.command("multipliers")
@click.pass_obj
def cmd_multipliers(shared: Dict[str, Any]):
    """Print the luck-multiplier table only."""
    _print_tables(shared, multipliers=True)


# ---------- Subcommand: player luck sweep ----------
@cli.command("player")
@click.pass_obj
def cmd_player(shared: Dict[str, Any]):
    """Print the player-luck table only."""
    _print_tables(shared, player=True)


# ---------- Subcommand: one distribution ----------
@cli.command("chances")
@click.argument("luck", type=MultiplierParam())
@click.pass_obj
def cmd_chances(shared: Dict[str, Any], luck: float):
    """Print the tier chances for a single luck multiplier."""
    try:
        dist = shared["calculator"].distribution(luck)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="LUCK") from e
    shared["reporter"].emit_distribution(luck, dist)


def main() -> None:
    cli(prog_name="luck-table")


if __name__ == "__main__":
    main()
