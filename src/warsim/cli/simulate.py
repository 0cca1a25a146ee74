"""CLI command for building the game-length histogram."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from warsim.analysis.report import plot_histogram, print_summary, save_json
from warsim.histogram.runner import HistogramSimulator, SimulationConfig
from warsim.histogram.storage import load_state, save_state

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--num", "num_games", type=click.IntRange(min=0), required=True,
              help="Number of games to simulate")
@click.option(
    "--state-dir",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory holding state.bin / state.csv",
)
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None,
              help="Worker processes (default: min(cpu_count, 8))")
@click.option("--batch-size", type=click.IntRange(min=1), default=1000,
              help="Games per worker task")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--max-turns", type=click.IntRange(min=1), default=100_000,
              help="Turn limit before a game is abandoned")
@click.option("--report-interval", type=float, default=5.0,
              help="Seconds between progress lines")
@click.option("--summary/--no-summary", default=True, help="Print statistics when done")
@click.option("--json", "json_path", type=click.Path(dir_okay=False), default=None,
              help="Also save histogram and statistics as JSON")
@click.option("--plot", "plot_path", type=click.Path(dir_okay=False), default=None,
              help="Save a histogram bar chart (needs matplotlib)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    num_games: int,
    state_dir: str,
    workers: int | None,
    batch_size: int,
    seed: int | None,
    max_turns: int,
    report_interval: float,
    summary: bool,
    json_path: str | None,
    plot_path: str | None,
    verbose: bool,
):
    """Simulate N games of War and add their lengths to the saved histogram."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO, format='%(message)s')

    state_path = Path(state_dir)
    histogram = load_state(state_path)

    config = SimulationConfig(
        num_games=num_games,
        num_workers=workers,
        batch_size=batch_size,
        seed=seed,
        max_turns=max_turns,
        report_interval=report_interval,
    )
    simulator = HistogramSimulator(config)

    click.echo(f"Simulating {num_games} games")
    try:
        run = simulator.run(histogram=histogram)
    except KeyboardInterrupt:
        logger.warning("Simulation interrupted, nothing saved")
        sys.exit(1)

    click.echo("Done! Saving to disk.")
    try:
        save_state(histogram, state_path)
    except OSError as e:
        logger.error(f"Failed to save state to {state_path}: {e}")
        sys.exit(1)

    if summary:
        print_summary(histogram, run)
    if json_path:
        save_json(histogram, Path(json_path))
    if plot_path:
        plot_histogram(histogram, Path(plot_path))


if __name__ == "__main__":
    main()
