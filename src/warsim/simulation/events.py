"""Immutable records of what happened during a turn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from warsim.simulation.cards import Card


@dataclass(frozen=True)
class GameOver:
    """The other player has no cards left."""

    winning_player_id: int


@dataclass(frozen=True)
class ShortBattle:
    """Two different faces met; the stronger card took both."""

    winning_player_id: int
    winning_card: Card
    losing_card: Card
    pot: Tuple[Card, ...]


@dataclass(frozen=True)
class WarStart:
    """Tied faces opened a war round."""

    top_cards: Tuple[Card, Card]
    expected_length: int


@dataclass(frozen=True)
class WarShortened:
    """A player ran out of cards before the war round drew its full length."""

    player_id_with_insufficient_cards: int
    length_of_war_after_shortening: int
    initial_length_of_war: int


@dataclass(frozen=True)
class WarEnd:
    """A war was decided (by comparison or by elimination)."""

    winning_player_id: int
    final_top_cards: Tuple[Card, Card]


Event = Union[GameOver, ShortBattle, WarStart, WarShortened, WarEnd]

EVENT_TYPES = (GameOver, ShortBattle, WarStart, WarShortened, WarEnd)


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert an event to a JSON-serializable dict."""
    if isinstance(event, GameOver):
        return {"type": "GameOver", "winning_player_id": event.winning_player_id}
    if isinstance(event, ShortBattle):
        return {
            "type": "ShortBattle",
            "winning_player_id": event.winning_player_id,
            "winning_card": str(event.winning_card),
            "losing_card": str(event.losing_card),
            "pot": [str(c) for c in event.pot],
        }
    if isinstance(event, WarStart):
        return {
            "type": "WarStart",
            "top_cards": [str(c) for c in event.top_cards],
            "expected_length": event.expected_length,
        }
    if isinstance(event, WarShortened):
        return {
            "type": "WarShortened",
            "player_id_with_insufficient_cards": event.player_id_with_insufficient_cards,
            "length_of_war_after_shortening": event.length_of_war_after_shortening,
            "initial_length_of_war": event.initial_length_of_war,
        }
    if isinstance(event, WarEnd):
        return {
            "type": "WarEnd",
            "winning_player_id": event.winning_player_id,
            "final_top_cards": [str(c) for c in event.final_top_cards],
        }
    raise TypeError(f"Unknown event type: {type(event).__name__}")
