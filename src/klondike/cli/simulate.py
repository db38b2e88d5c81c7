# src/klondike/cli/simulate.py
"""CLI command for headless batch playouts."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from klondike.players import PLAYERS
from klondike.simulation import SimulationConfig, simulate_batch

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=int, default=100, help="Number of games to play")
@click.option("--seed", type=int, default=None, help="Base random seed for reproducibility")
@click.option(
    "-p", "--player",
    type=click.Choice(sorted(PLAYERS)),
    default="greedy",
    help="Automated player strategy",
)
@click.option("--max-steps", type=int, default=1000, help="Step limit per game")
@click.option("-o", "--output", type=click.Path(), default=None, help="Write a JSON summary here")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    games: int,
    seed: int | None,
    player: str,
    max_steps: int,
    output: str | None,
    verbose: bool,
):
    """Play seeded Klondike games with an automated player and report results."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SimulationConfig(
        num_games=games,
        seed=seed,
        player=player,
        max_steps=max_steps,
    )
    click.echo(f"Playing {config.num_games} games (seed {config.seed}, {config.player} player)...")

    summary = simulate_batch(config)

    click.echo(
        f"Won {summary.wins}/{summary.games} ({summary.win_rate:.1%}), "
        f"average completion {summary.average_completion:.1f}%"
    )

    if output:
        path = Path(output)
        with open(path, "w") as f:
            json.dump({"seed": config.seed, "player": config.player, **summary.to_dict()}, f, indent=2)
        logger.info(f"Summary written to {path}")


if __name__ == "__main__":
    main()
