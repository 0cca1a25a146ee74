"""Statistical check that deck shuffling is uniform over positions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy import stats

from warsim.simulation.cards import STANDARD_DECK_SIZE, shuffled_deck, standard_deck


@dataclass
class UniformityResult:
    """Chi-square goodness-of-fit of card positions against uniform."""

    num_trials: int
    chi2_statistic: float
    p_value: float
    all_decks_complete: bool  # Every shuffle held each card exactly once
    max_deviation: float  # Largest |observed - expected| / expected over cells

    def is_uniform(self, alpha: float = 0.001) -> bool:
        """True unless uniformity is rejected at significance ``alpha``."""
        return self.all_decks_complete and self.p_value >= alpha


def shuffle_position_counts(num_trials: int, rng: random.Random) -> np.ndarray:
    """Count how often each card lands in each position.

    Returns:
        (52, 52) int array; entry [i, j] counts card i of the standard deck
        order landing at position j
    """
    index = {card: i for i, card in enumerate(standard_deck())}
    counts = np.zeros((STANDARD_DECK_SIZE, STANDARD_DECK_SIZE), dtype=np.int64)
    positions = np.arange(STANDARD_DECK_SIZE)
    for _ in range(num_trials):
        deck = shuffled_deck(rng)
        cards = np.fromiter((index[c] for c in deck), dtype=np.int64, count=len(deck))
        counts[cards, positions] += 1
    return counts


def shuffle_uniformity(
    num_trials: int = 10_000,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> UniformityResult:
    """Shuffle ``num_trials`` decks and test positions for uniformity.

    Each row of the position-count matrix should be flat: every card is
    equally likely in every position.
    """
    if num_trials < 1:
        raise ValueError(f"num_trials must be positive, got {num_trials}")
    rng = rng if rng is not None else random.Random(seed)

    counts = shuffle_position_counts(num_trials, rng)

    # Each shuffle places every card once and fills every position once
    all_complete = bool(
        np.all(counts.sum(axis=0) == num_trials) and np.all(counts.sum(axis=1) == num_trials)
    )

    expected = num_trials / STANDARD_DECK_SIZE
    observed = counts.flatten()
    # Row and column totals are fixed, leaving (52 - 1) ** 2 degrees of freedom
    chi2, p_value = stats.chisquare(
        observed,
        f_exp=np.full(observed.shape, expected),
        ddof=2 * (STANDARD_DECK_SIZE - 1),
    )
    max_deviation = float(np.max(np.abs(observed - expected)) / expected)

    return UniformityResult(
        num_trials=num_trials,
        chi2_statistic=float(chi2),
        p_value=float(p_value),
        all_decks_complete=all_complete,
        max_deviation=max_deviation,
    )
