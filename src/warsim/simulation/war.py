"""War resolution for tied turns."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from warsim.simulation.cards import Card
from warsim.simulation.events import Event, WarEnd, WarShortened, WarStart

if TYPE_CHECKING:
    from warsim.simulation.engine import Game


class WarInvariantError(RuntimeError):
    """War resolution was entered or continued in an impossible state."""

    pass


def resolve_war(game: "Game", pot: Tuple[List[Card], List[Card]]) -> List[Event]:
    """Play war rounds until the pot has an owner.

    Each player's stack in ``pot`` starts with the tied card on top. Every
    round draws up to ``war_length`` extra cards per side onto the stacks,
    then compares the new top cards. A repeated tie starts another round with
    the same (grown) stacks while both players still hold cards.

    If both players run dry on a tie, the round's coin flip (the same flip
    that orders the merged pot) picks the winner: whoever's stack goes first.

    Args:
        game: Game whose players and rng are used (mutated in place)
        pot: Per-player card stacks, player 0 then player 1

    Returns:
        Events in the order they happened

    Raises:
        WarInvariantError: If the stacks' top cards do not share a face, or
            a draw fails after both players were seen holding cards
    """
    events: List[Event] = []
    player0, player1 = game.players

    while True:
        top_cards = (pot[0][-1], pot[1][-1])
        if top_cards[0].face != top_cards[1].face:
            raise WarInvariantError(
                f"Cards cannot start a war: {top_cards[0]} vs {top_cards[1]}"
            )

        expected_length = top_cards[0].war_length()
        events.append(WarStart(top_cards=top_cards, expected_length=expected_length))

        for drawn in range(expected_length):
            if player0.is_dead() or player1.is_dead():
                events.append(WarShortened(
                    player_id_with_insufficient_cards=0 if player0.is_dead() else 1,
                    length_of_war_after_shortening=drawn,
                    initial_length_of_war=expected_length,
                ))
                break
            card0, card1 = player0.draw(), player1.draw()
            if card0 is None or card1 is None:
                raise WarInvariantError(
                    "Draw failed after both players were checked to hold cards"
                )
            pot[0].append(card0)
            pot[1].append(card1)

        final_top_cards = (pot[0][-1], pot[1][-1])

        # One coin flip per round orders the whole pot
        first = 0 if game.rng.random() < 0.5 else 1
        merged = pot[first] + pot[1 - first]

        strength0 = final_top_cards[0].battle_strength()
        strength1 = final_top_cards[1].battle_strength()
        if strength0 != strength1:
            winner = 0 if strength0 > strength1 else 1
        elif not player0.is_dead() and not player1.is_dead():
            continue
        elif player0.is_dead() and player1.is_dead():
            winner = first
        else:
            winner = 1 if player0.is_dead() else 0

        game.players[winner].capture(merged)
        events.append(WarEnd(winning_player_id=winner, final_top_cards=final_top_cards))
        return events
