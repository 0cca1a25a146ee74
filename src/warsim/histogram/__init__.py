"""Game-length histograms: accumulation, persistence and the simulation driver."""

from warsim.histogram.state import TurnHistogram
from warsim.histogram.storage import (
    HistogramFormatError,
    encode_histogram,
    decode_histogram,
    histogram_to_csv,
    load_state,
    save_state,
)
from warsim.histogram.runner import (
    SimulationConfig,
    GameResult,
    BatchResult,
    SimulationSummary,
    HistogramSimulator,
    play_game,
    simulate_batch,
)

__all__ = [
    # State
    "TurnHistogram",
    # Storage
    "HistogramFormatError",
    "encode_histogram",
    "decode_histogram",
    "histogram_to_csv",
    "load_state",
    "save_state",
    # Runner
    "SimulationConfig",
    "GameResult",
    "BatchResult",
    "SimulationSummary",
    "HistogramSimulator",
    "play_game",
    "simulate_batch",
]
