"""Benchmark War simulation throughput, serial and parallel."""

import time

from warsim.histogram.runner import HistogramSimulator, SimulationConfig, play_game
from warsim.simulation.engine import Game


def benchmark_single_games(num_games: int = 200) -> dict:
    """Benchmark stepping games one at a time in this process."""
    start_time = time.perf_counter()

    results = [play_game(Game(seed=seed)) for seed in range(num_games)]

    total_duration_s = time.perf_counter() - start_time

    avg_turns = sum(r.turn_count for r in results) / len(results)
    player0_wins = sum(1 for r in results if r.winner == 0)
    player1_wins = sum(1 for r in results if r.winner == 1)

    return {
        "total_games": num_games,
        "total_duration_s": total_duration_s,
        "avg_ms_per_game": (total_duration_s * 1000) / num_games,
        "games_per_second": num_games / total_duration_s,
        "avg_turns": avg_turns,
        "player0_wins": player0_wins,
        "player1_wins": player1_wins,
    }


def benchmark_runner(num_games: int, num_workers: int) -> dict:
    """Benchmark the histogram runner with a given worker count."""
    config = SimulationConfig(num_games=num_games, num_workers=num_workers, batch_size=250, seed=0)
    summary = HistogramSimulator(config).run()
    return {
        "total_games": summary.games,
        "num_workers": num_workers,
        "total_duration_s": summary.elapsed_s,
        "games_per_second": summary.games_per_second,
    }


def main():
    """Run simulation benchmarks."""
    print("=" * 60)
    print("WAR SIMULATION BENCHMARK")
    print("=" * 60)
    print()

    # Warm-up run
    print("Warming up...")
    benchmark_single_games(num_games=10)
    print()

    num_games = 200
    print(f"Running {num_games} games one by one...")
    single = benchmark_single_games(num_games=num_games)
    print(f"  Avg per game: {single['avg_ms_per_game']:.2f}ms")
    print(f"  Throughput: {single['games_per_second']:.1f} games/sec")
    print(f"  Avg turns: {single['avg_turns']:.1f}")
    print(f"  Wins: P0={single['player0_wins']} P1={single['player1_wins']}")
    print()

    print("Runner scaling (2000 games):")
    baseline = None
    for workers in (1, 2, 4):
        result = benchmark_runner(2000, workers)
        if baseline is None:
            baseline = result["games_per_second"]
        speedup = result["games_per_second"] / baseline if baseline else 0.0
        print(f"  {workers} worker(s): {result['games_per_second']:.1f} games/sec "
              f"({speedup:.2f}x)")


if __name__ == "__main__":
    main()
