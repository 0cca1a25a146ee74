"""Analysis tools: shuffle uniformity and game-length reporting."""

from warsim.analysis.uniformity import (
    UniformityResult,
    shuffle_position_counts,
    shuffle_uniformity,
)
from warsim.analysis.report import (
    HistogramSummary,
    summarize,
    print_summary,
    save_json,
    plot_histogram,
)

__all__ = [
    # Uniformity
    "UniformityResult",
    "shuffle_position_counts",
    "shuffle_uniformity",
    # Reporting
    "HistogramSummary",
    "summarize",
    "print_summary",
    "save_json",
    "plot_histogram",
]
