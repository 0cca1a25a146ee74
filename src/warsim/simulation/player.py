"""Player piles and draw semantics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from warsim.simulation.cards import Card, STANDARD_DECK_SIZE


@dataclass
class Player:
    """A War player holding a draw pile and a winnings pile.

    The top of each pile is the end of its list. Captured cards are appended
    to the winnings pile, which becomes the draw pile (unshuffled) once the
    draw pile runs out.
    """

    draw_pile: List[Card] = field(default_factory=list)
    winnings_pile: List[Card] = field(default_factory=list)

    def draw(self) -> Optional[Card]:
        """Take the top card, rotating the winnings pile in if needed.

        Returns None when both piles are empty.
        """
        if not self.draw_pile and self.winnings_pile:
            self.draw_pile, self.winnings_pile = self.winnings_pile, self.draw_pile
        if not self.draw_pile:
            return None
        return self.draw_pile.pop()

    def capture(self, cards: Iterable[Card]) -> None:
        """Add won cards to the bottom of the player's holdings."""
        self.winnings_pile.extend(cards)

    def count_cards(self) -> int:
        return len(self.draw_pile) + len(self.winnings_pile)

    def measure_strength(self) -> int:
        """Sum of battle strengths over every card the player owns."""
        return sum(card.battle_strength() for card in self.draw_pile) + sum(
            card.battle_strength() for card in self.winnings_pile
        )

    def is_dead(self) -> bool:
        return self.count_cards() == 0

    def is_winner(self) -> bool:
        return self.count_cards() == STANDARD_DECK_SIZE
