"""War game state machine: cards, players, turn resolution and events."""

from warsim.simulation.cards import (
    Card,
    Face,
    Suit,
    STANDARD_DECK_SIZE,
    standard_deck,
    shuffled_deck,
)
from warsim.simulation.player import Player
from warsim.simulation.events import (
    Event,
    GameOver,
    ShortBattle,
    WarStart,
    WarShortened,
    WarEnd,
    event_to_dict,
)
from warsim.simulation.war import WarInvariantError, resolve_war
from warsim.simulation.engine import Game, GameStats

__all__ = [
    # cards
    "Card",
    "Face",
    "Suit",
    "STANDARD_DECK_SIZE",
    "standard_deck",
    "shuffled_deck",
    # player
    "Player",
    # events
    "Event",
    "GameOver",
    "ShortBattle",
    "WarStart",
    "WarShortened",
    "WarEnd",
    "event_to_dict",
    # war
    "WarInvariantError",
    "resolve_war",
    # engine
    "Game",
    "GameStats",
]
