"""Terminal text for cards, events and game status."""

from __future__ import annotations

from typing import Sequence

from warsim.simulation.cards import Card
from warsim.simulation.engine import Game
from warsim.simulation.events import (
    Event,
    GameOver,
    ShortBattle,
    WarEnd,
    WarShortened,
    WarStart,
)

# Unicode card symbols
SUIT_SYMBOLS = {"H": "\u2665", "D": "\u2666", "C": "\u2663", "S": "\u2660"}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.face.value}{suit_symbol}"


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(format_card(c) for c in cards)


def describe_event(event: Event) -> str:
    """One line of text for an event."""
    if isinstance(event, ShortBattle):
        return (
            f"Player {event.winning_player_id} wins battle: "
            f"{format_card(event.winning_card)} beats {format_card(event.losing_card)} "
            f"(pot: {format_cards(event.pot)})"
        )
    if isinstance(event, WarStart):
        a, b = event.top_cards
        return (
            f"WAR! {format_card(a)} ties {format_card(b)}, "
            f"{event.expected_length} cards each"
        )
    if isinstance(event, WarShortened):
        return (
            f"  Player {event.player_id_with_insufficient_cards} ran out: war cut to "
            f"{event.length_of_war_after_shortening} of {event.initial_length_of_war} cards"
        )
    if isinstance(event, WarEnd):
        a, b = event.final_top_cards
        return (
            f"Player {event.winning_player_id} wins the war "
            f"({format_card(a)} vs {format_card(b)})"
        )
    if isinstance(event, GameOver):
        return f"GAME OVER: player {event.winning_player_id} wins"
    raise TypeError(f"Unknown event type: {type(event).__name__}")


def format_status(game: Game) -> str:
    """Compact one-line status: turn, then per-player piles, totals and strength."""
    parts = []
    for player_id in (0, 1):
        draw, winnings = game.pile_sizes(player_id)
        player = game.players[player_id]
        parts.append(
            f"[{draw}:{winnings} cards, {player.count_cards()} total, "
            f"valued {player.measure_strength()}]"
        )
    return f"Game{{ round {game.turn_number} {parts[0]}, {parts[1]} }}"
