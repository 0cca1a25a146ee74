"""Card model and deck construction."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

STANDARD_DECK_SIZE = 52


class Suit(Enum):
    """Playing card suits (decorative, never compared)."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


class Face(Enum):
    """Playing card faces."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def battle_strength(self) -> int:
        """Strength used to decide battles and war-ending comparisons."""
        return BATTLE_STRENGTH[self]

    def war_length(self) -> int:
        """Number of extra cards each side draws when this face ties."""
        return WAR_LENGTH[self]


# Face to battle strength
BATTLE_STRENGTH: Dict[Face, int] = {
    Face.TWO: 2, Face.THREE: 3, Face.FOUR: 4, Face.FIVE: 5,
    Face.SIX: 6, Face.SEVEN: 7, Face.EIGHT: 8, Face.NINE: 9,
    Face.TEN: 10, Face.JACK: 11, Face.QUEEN: 12, Face.KING: 13, Face.ACE: 14,
}

# Face to war length (Ace is short, court cards run long)
WAR_LENGTH: Dict[Face, int] = {
    Face.TWO: 2, Face.THREE: 3, Face.FOUR: 4, Face.FIVE: 5,
    Face.SIX: 6, Face.SEVEN: 7, Face.EIGHT: 8, Face.NINE: 9,
    Face.TEN: 10, Face.ACE: 1, Face.JACK: 12, Face.QUEEN: 13, Face.KING: 14,
}

DECK_SUITS = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
DECK_FACES = tuple(Face)


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    face: Face

    def battle_strength(self) -> int:
        return self.face.battle_strength()

    def war_length(self) -> int:
        return self.face.war_length()

    def __str__(self) -> str:
        return f"{self.face.value}{self.suit.value}"


def standard_deck() -> List[Card]:
    """Build the 52-card deck in a fixed order (suit by suit, Ace to King)."""
    return [Card(suit, face) for suit in DECK_SUITS for face in DECK_FACES]


def shuffled_deck(rng: random.Random) -> List[Card]:
    """Uniformly shuffled standard deck drawn from the caller's rng."""
    deck = standard_deck()
    rng.shuffle(deck)
    return deck
