"""CLI command for printing one game turn by turn."""

from __future__ import annotations

import json
import logging
import sys

import click

from warsim.simulation.display import describe_event, format_status
from warsim.simulation.engine import Game
from warsim.simulation.events import event_to_dict

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--max-turns", type=click.IntRange(min=1), default=None,
              help="Stop after this many turns")
@click.option("-q", "--quiet", is_flag=True, help="Only print the final result")
@click.option("--jsonl", is_flag=True, help="Print events as JSON lines")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(seed: int | None, max_turns: int | None, quiet: bool, jsonl: bool, verbose: bool):
    """Play one game of War and print what happens each turn."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    game = Game(seed=seed)
    logger.debug(f"Dealt: {format_status(game)}")

    while max_turns is None or game.turn_number < max_turns:
        events = game.step()
        if events is None:
            break
        if quiet:
            continue
        if jsonl:
            for event in events:
                record = event_to_dict(event)
                record["turn"] = game.turn_number
                click.echo(json.dumps(record))
            continue
        click.echo(f"--- Turn {game.turn_number} ---")
        for event in events:
            click.echo(describe_event(event))
        click.echo(format_status(game))

    winner = game.winner()
    if winner is None:
        click.echo(f"No winner after {game.turn_number} turns: {format_status(game)}", err=True)
        sys.exit(1)
    click.echo(f"Player {winner} won after {game.turn_number} turns")


if __name__ == "__main__":
    main()
