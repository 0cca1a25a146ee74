"""Output generation for game-length histograms (terminal, JSON, plots)."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import numpy as np

from warsim.histogram.runner import SimulationSummary
from warsim.histogram.state import TurnHistogram


@dataclass
class HistogramSummary:
    """Descriptive statistics of game length in turns."""

    games: int
    min_turns: int
    max_turns: int
    mean_turns: float
    std_turns: float
    median_turns: float
    p90_turns: float
    p99_turns: float
    mode_turns: int


def summarize(histogram: TurnHistogram) -> Optional[HistogramSummary]:
    """Weighted statistics over the histogram, or None if it is empty."""
    if histogram.total_games() == 0:
        return None

    items = histogram.items()
    lengths = np.array([length for length, _ in items], dtype=np.float64)
    weights = np.array([count for _, count in items], dtype=np.float64)

    mean = float(np.average(lengths, weights=weights))
    variance = float(np.average((lengths - mean) ** 2, weights=weights))
    cumulative = np.cumsum(weights) / weights.sum()

    def percentile(q: float) -> float:
        # Smallest length whose cumulative share reaches q
        return float(lengths[np.searchsorted(cumulative, q, side="left")])

    return HistogramSummary(
        games=int(weights.sum()),
        min_turns=int(lengths[0]),
        max_turns=int(lengths[-1]),
        mean_turns=mean,
        std_turns=variance ** 0.5,
        median_turns=percentile(0.5),
        p90_turns=percentile(0.9),
        p99_turns=percentile(0.99),
        mode_turns=int(lengths[int(np.argmax(weights))]),
    )


def print_summary(
    histogram: TurnHistogram,
    run: Optional[SimulationSummary] = None,
) -> None:
    """Print human-readable histogram summary."""
    print("\n" + "=" * 50)
    print("War Game Length Report")
    print("=" * 50)

    if run is not None:
        print("\n--- This Run ---")
        print(f"  Games simulated: {run.games}")
        print(f"  Elapsed: {run.elapsed_s:.1f}s ({run.games_per_second:.1f} games/s)")
        decided = run.player0_wins + run.player1_wins
        if decided:
            print(f"  Player 0 wins: {run.player0_wins} ({run.player0_wins / decided:.1%})")
            print(f"  Player 1 wins: {run.player1_wins} ({run.player1_wins / decided:.1%})")
        if run.truncated:
            print(f"  Truncated (turn limit): {run.truncated}")

    summary = summarize(histogram)
    print("\n--- All Recorded Games ---")
    if summary is None:
        print("  No games recorded")
        return

    print(f"  Games: {summary.games}")
    print(f"  Turns: min {summary.min_turns}, max {summary.max_turns}, "
          f"mode {summary.mode_turns}")
    print(f"  Mean: {summary.mean_turns:.1f} +/- {summary.std_turns:.1f}")
    print(f"  Median: {summary.median_turns:.0f}  p90: {summary.p90_turns:.0f}  "
          f"p99: {summary.p99_turns:.0f}")


def save_json(histogram: TurnHistogram, output_path: Path) -> None:
    """Save the histogram and its summary statistics as JSON."""
    summary = summarize(histogram)
    data = {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "games": histogram.total_games(),
        },
        "summary": asdict(summary) if summary is not None else None,
        "histogram": {str(length): count for length, count in histogram.items()},
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"JSON saved to: {output_path}")


def plot_histogram(histogram: TurnHistogram, output_path: Path) -> bool:
    """Bar chart of games per length. Returns False if nothing was drawn."""
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not available, skipping histogram plot")
        return False

    if histogram.total_games() == 0:
        print("Histogram is empty, skipping plot")
        return False

    items = histogram.items()
    lengths = [length for length, _ in items]
    counts = [count for _, count in items]

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.bar(lengths, counts, width=1.0, color='steelblue')
    ax.set_xlabel('Game length (turns)')
    ax.set_ylabel('Games')
    ax.set_title(f'War game length ({histogram.total_games()} games)')

    summary = summarize(histogram)
    if summary is not None:
        ax.axvline(summary.mean_turns, color='red', linestyle='--',
                   label=f'mean {summary.mean_turns:.0f}')
        ax.axvline(summary.median_turns, color='orange', linestyle=':',
                   label=f'median {summary.median_turns:.0f}')
        ax.legend()

    plt.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"Histogram plot saved to: {output_path}")
    return True
