"""War game engine: setup and one-turn transitions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from warsim.simulation.cards import Card, shuffled_deck
from warsim.simulation.events import Event, GameOver, ShortBattle
from warsim.simulation.player import Player
from warsim.simulation.war import resolve_war


@dataclass
class GameStats:
    """Running counters for a game."""

    turn_number: int = 0


class Game:
    """A two-player game of War.

    The game owns its random source, used for the initial shuffle and for
    ordering pots. Drive it by calling step() until it returns None.

    Usage:
        game = Game(seed=7)
        while game.step() is not None:
            pass
        print(game.turn_number, game.winner())
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        players: Optional[Tuple[Player, Player]] = None,
    ) -> None:
        """Create a game.

        Args:
            seed: Seed for a fresh random.Random (ignored if rng is given)
            rng: Random source to own (default: random.Random(seed))
            players: Prepared players; when omitted, a shuffled deck is dealt
                alternately starting with player 0
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.stats = GameStats()

        if players is None:
            players = (Player(), Player())
            for position, card in enumerate(shuffled_deck(self.rng)):
                players[position % 2].draw_pile.append(card)
        self.players: Tuple[Player, Player] = players

    @classmethod
    def from_players(
        cls,
        player0: Player,
        player1: Player,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Game":
        """Create a game from already-populated players."""
        return cls(seed=seed, rng=rng, players=(player0, player1))

    @property
    def turn_number(self) -> int:
        return self.stats.turn_number

    def pile_sizes(self, player_id: int) -> Tuple[int, int]:
        """(draw pile, winnings pile) sizes for a player."""
        player = self.players[player_id]
        return len(player.draw_pile), len(player.winnings_pile)

    def card_counts(self) -> Tuple[int, int]:
        return self.players[0].count_cards(), self.players[1].count_cards()

    def strengths(self) -> Tuple[int, int]:
        return self.players[0].measure_strength(), self.players[1].measure_strength()

    def is_over(self) -> bool:
        return self.players[0].is_dead() or self.players[1].is_dead()

    def winner(self) -> Optional[int]:
        """Id of the player holding every card, if any."""
        for player_id, player in enumerate(self.players):
            if player.is_winner():
                return player_id
        return None

    def step(self) -> Optional[List[Event]]:
        """Play one turn.

        Returns:
            None if the game was already over (nothing is mutated), otherwise
            the events of this turn, ending with GameOver if it decided the game
        """
        if self.is_over():
            return None
        self.stats.turn_number += 1

        events: List[Event] = []
        card0, card1 = self.players[0].draw(), self.players[1].draw()

        # A missing card means a player is out; the death check below handles it
        if card0 is not None and card1 is not None:
            if card0.face != card1.face:
                events.append(self._battle(card0, card1))
            else:
                events.extend(resolve_war(self, ([card0], [card1])))

        for player_id, player in enumerate(self.players):
            if player.is_dead():
                events.append(GameOver(winning_player_id=1 - player_id))

        return events

    def _battle(self, card0: Card, card1: Card) -> ShortBattle:
        """Resolve two different faces; the stronger card takes the pot."""
        pot = [card0, card1]
        self.rng.shuffle(pot)

        if card0.battle_strength() > card1.battle_strength():
            winner, winning_card, losing_card = 0, card0, card1
        else:
            winner, winning_card, losing_card = 1, card1, card0

        self.players[winner].capture(pot)
        return ShortBattle(
            winning_player_id=winner,
            winning_card=winning_card,
            losing_card=losing_card,
            pot=tuple(pot),
        )
