"""Run many independent games and collect their lengths.

Games are grouped into fixed-size batches. Each batch gets its own seed
drawn from the run seed, and each game inside a batch gets its own
random.Random drawn from the batch seed. A seeded run therefore produces the
same histogram whether batches run serially or across a process pool.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from warsim.histogram.state import TurnHistogram
from warsim.simulation.engine import Game

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a histogram run."""

    num_games: int
    num_workers: Optional[int] = None  # None = min(cpu_count, 8)
    batch_size: int = 1000
    seed: Optional[int] = None
    max_turns: Optional[int] = 100_000  # Safety valve, None = unlimited
    report_interval: float = 5.0  # Seconds between progress lines

    def __post_init__(self) -> None:
        if self.num_games < 0:
            raise ValueError(f"num_games must be non-negative, got {self.num_games}")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")


@dataclass(frozen=True)
class GameResult:
    """Outcome of one simulated game."""

    winner: Optional[int]  # None if truncated
    turn_count: int
    truncated: bool = False


@dataclass
class BatchResult:
    """Aggregated outcome of a batch of games."""

    histogram: TurnHistogram = field(default_factory=TurnHistogram)
    games: int = 0
    truncated: int = 0
    wins: List[int] = field(default_factory=lambda: [0, 0])

    def merge(self, other: "BatchResult") -> None:
        self.histogram.merge(other.histogram)
        self.games += other.games
        self.truncated += other.truncated
        self.wins[0] += other.wins[0]
        self.wins[1] += other.wins[1]


@dataclass
class SimulationSummary:
    """What a histogram run produced."""

    histogram: TurnHistogram
    games: int
    truncated: int
    player0_wins: int
    player1_wins: int
    elapsed_s: float

    @property
    def games_per_second(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.games / self.elapsed_s


def play_game(game: Game, max_turns: Optional[int] = None) -> GameResult:
    """Step a game until it ends or reaches ``max_turns`` turns."""
    while game.step() is not None:
        if max_turns is not None and game.turn_number >= max_turns and not game.is_over():
            return GameResult(winner=None, turn_count=game.turn_number, truncated=True)
    return GameResult(winner=game.winner(), turn_count=game.turn_number)


def simulate_batch(seed: int, num_games: int, max_turns: Optional[int] = None) -> BatchResult:
    """Play ``num_games`` games from one batch seed.

    Top-level so it can be pickled into worker processes.
    """
    rng = random.Random(seed)
    result = BatchResult()
    for _ in range(num_games):
        game = Game(rng=random.Random(rng.getrandbits(64)))
        outcome = play_game(game, max_turns)
        result.games += 1
        if outcome.truncated:
            result.truncated += 1
            continue
        result.histogram.add(outcome.turn_count)
        if outcome.winner is not None:
            result.wins[outcome.winner] += 1
    return result


class ProgressReporter:
    """Logs throughput and time remaining at most once per interval."""

    def __init__(
        self,
        total: int,
        interval: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.total = total
        self.interval = interval
        self.clock = clock
        self.start = clock()
        self._last_time = self.start
        self._last_count = 0

    def update(self, completed: int) -> bool:
        """Report progress if the interval has passed. Returns True if logged."""
        now = self.clock()
        since_last = now - self._last_time
        if since_last < self.interval or since_last <= 0:
            return False

        throughput = (completed - self._last_count) / since_last
        percent = completed / self.total * 100 if self.total else 100.0
        remaining_m = (self.total - completed) / throughput / 60 if throughput > 0 else float("inf")
        logger.info(
            f"Running for {now - self.start:.1f}s, simulating {throughput:.1f} games per second "
            f"({percent:.1f}% of run complete, {remaining_m:.1f}m remaining)"
        )
        self._last_time = now
        self._last_count = completed
        return True

    def elapsed(self) -> float:
        return self.clock() - self.start


class HistogramSimulator:
    """Simulates many games, serially or on a process pool.

    Usage:
        simulator = HistogramSimulator(SimulationConfig(num_games=100_000, seed=1))
        summary = simulator.run(histogram=load_state("."))
    """

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        # Cap default workers at 8
        default_workers = min(mp.cpu_count(), 8)
        self.num_workers = config.num_workers or default_workers

    def batches(self) -> List[Tuple[int, int]]:
        """(seed, game count) for every batch of the run."""
        base = random.Random(self.config.seed)
        result = []
        remaining = self.config.num_games
        while remaining > 0:
            size = min(self.config.batch_size, remaining)
            result.append((base.getrandbits(64), size))
            remaining -= size
        return result

    def run(self, histogram: Optional[TurnHistogram] = None) -> SimulationSummary:
        """Simulate the configured number of games.

        Args:
            histogram: Existing histogram to add this run's lengths into

        Returns:
            Summary of this run alone (its histogram excludes prior counts)
        """
        batches = self.batches()
        total = self.config.num_games
        progress = ProgressReporter(total, self.config.report_interval)
        combined = BatchResult()

        logger.info(f"Simulating {total} games in {len(batches)} batches "
                    f"using {self.num_workers} workers")

        if self.num_workers == 1 or len(batches) <= 1:
            for seed, size in batches:
                combined.merge(simulate_batch(seed, size, self.config.max_turns))
                progress.update(combined.games)
        else:
            with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
                futures = [
                    executor.submit(simulate_batch, seed, size, self.config.max_turns)
                    for seed, size in batches
                ]
                for future in as_completed(futures):
                    combined.merge(future.result())
                    progress.update(combined.games)

        if combined.truncated:
            logger.warning(f"{combined.truncated} games hit the {self.config.max_turns}-turn "
                           f"limit and were left out of the histogram")

        if histogram is not None:
            histogram.merge(combined.histogram)

        summary = SimulationSummary(
            histogram=combined.histogram,
            games=combined.games,
            truncated=combined.truncated,
            player0_wins=combined.wins[0],
            player1_wins=combined.wins[1],
            elapsed_s=progress.elapsed(),
        )
        logger.info(f"Done! {summary.games} games in {summary.elapsed_s:.1f}s "
                    f"({summary.games_per_second:.1f} games/s)")
        return summary
