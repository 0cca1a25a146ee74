"""Tests for war resolution on tied turns."""

from typing import List

import pytest

from warsim.simulation.cards import Card, Face, Suit, standard_deck
from warsim.simulation.engine import Game
from warsim.simulation.events import GameOver, WarEnd, WarShortened, WarStart
from warsim.simulation.player import Player
from warsim.simulation.war import WarInvariantError, resolve_war


def card(text: str) -> Card:
    """Parse "10H", "KS" style text."""
    return Card(Suit(text[-1]), Face(text[:-1]))


def filler(exclude: List[Card], n: int) -> List[Card]:
    """First ``n`` deck cards not already used by a test."""
    cards = [c for c in standard_deck() if c not in exclude]
    return cards[:n]


def test_uninterrupted_jack_war_draws_twelve_each() -> None:
    """Tied Jacks: 12 more cards per side, 26-card pot to the stronger final card."""
    used = [card(t) for t in ("JH", "JS", "AH", "2S", "3H", "3S")]
    extra = filler(used, 22)
    f0, f1 = extra[:11], extra[11:]
    game = Game.from_players(
        Player([card("3H"), card("AH"), *f0, card("JH")]),
        Player([card("3S"), card("2S"), *f1, card("JS")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("JH"), card("JS")), expected_length=12),
        WarEnd(winning_player_id=0, final_top_cards=(card("AH"), card("2S"))),
    ]
    stack0 = [card("JH"), *reversed(f0), card("AH")]
    stack1 = [card("JS"), *reversed(f1), card("2S")]
    winnings = game.players[0].winnings_pile
    assert len(winnings) == 26
    assert winnings in (stack0 + stack1, stack1 + stack0)
    assert game.card_counts() == (27, 1)


def test_ace_war_is_one_card_long() -> None:
    game = Game.from_players(
        Player([card("2C"), card("KC"), card("AH")]),
        Player([card("2D"), card("QC"), card("AS")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("AH"), card("AS")), expected_length=1),
        WarEnd(winning_player_id=0, final_top_cards=(card("KC"), card("QC"))),
    ]
    assert game.card_counts() == (5, 1)


def test_war_shortened_when_player_runs_out() -> None:
    """Fives want 5 cards, player 1 only has 3: shortened, then compared."""
    game = Game.from_players(
        Player([card("7C"), card("7D"), card("KC"), card("4H"), card("6H"), card("5H")]),
        Player([card("2C"), card("8D"), card("9D"), card("5S")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("5H"), card("5S")), expected_length=5),
        WarShortened(
            player_id_with_insufficient_cards=1,
            length_of_war_after_shortening=3,
            initial_length_of_war=5,
        ),
        WarEnd(winning_player_id=0, final_top_cards=(card("KC"), card("2C"))),
        GameOver(winning_player_id=0),
    ]
    assert game.card_counts() == (10, 0)


def test_shortened_war_can_be_won_by_the_short_player() -> None:
    game = Game.from_players(
        Player([card("7C"), card("7D"), card("2C"), card("4H"), card("6H"), card("5H")]),
        Player([card("KC"), card("8D"), card("9D"), card("5S")]),
        seed=0,
    )

    events = game.step()

    assert isinstance(events[1], WarShortened)
    assert events[2] == WarEnd(winning_player_id=1, final_top_cards=(card("2C"), card("KC")))
    assert GameOver(winning_player_id=0) not in events
    assert game.card_counts() == (2, 8)


def test_war_drawing_exactly_the_last_cards_is_not_shortened() -> None:
    """Tied twos, player 1 holds exactly two more cards: full-length war."""
    game = Game.from_players(
        Player([card("9C"), card("4C"), card("3H"), card("2H")]),
        Player([card("8D"), card("6S"), card("2S")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("2H"), card("2S")), expected_length=2),
        WarEnd(winning_player_id=1, final_top_cards=(card("4C"), card("8D"))),
    ]
    assert game.card_counts() == (1, 6)


def test_tie_on_the_last_exact_card_ends_the_game() -> None:
    """Player 1 empties on the final war card and ties: player 0 wins, unshortened."""
    game = Game.from_players(
        Player([card("9C"), card("7C"), card("3H"), card("2H")]),
        Player([card("7D"), card("6S"), card("2S")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("2H"), card("2S")), expected_length=2),
        WarEnd(winning_player_id=0, final_top_cards=(card("7C"), card("7D"))),
        GameOver(winning_player_id=0),
    ]
    assert not any(isinstance(e, WarShortened) for e in events)
    assert game.card_counts() == (7, 0)

def test_tie_with_one_player_out_goes_to_the_other() -> None:
    """A repeated tie cannot continue once a player is empty."""
    game = Game.from_players(
        Player([card("7C"), card("KC"), card("4H"), card("6H"), card("5H")]),
        Player([card("KD"), card("8D"), card("9D"), card("5S")]),
        seed=0,
    )

    events = game.step()

    assert events[-2:] == [
        WarEnd(winning_player_id=0, final_top_cards=(card("KC"), card("KD"))),
        GameOver(winning_player_id=0),
    ]
    assert game.card_counts() == (9, 0)


def test_war_with_no_cards_left_to_draw() -> None:
    """Player 0's tied card was its last: zero-length war, player 1 wins."""
    game = Game.from_players(
        Player([card("5H")]),
        Player([card("2C"), card("5S")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("5H"), card("5S")), expected_length=5),
        WarShortened(
            player_id_with_insufficient_cards=0,
            length_of_war_after_shortening=0,
            initial_length_of_war=5,
        ),
        WarEnd(winning_player_id=1, final_top_cards=(card("5H"), card("5S"))),
        GameOver(winning_player_id=1),
    ]
    assert game.card_counts() == (0, 3)


def test_nested_war_keeps_growing_the_pot() -> None:
    """Jacks tie, then the twelfth cards (threes) tie, then a 3-card war decides."""
    used = [card(t) for t in ("JH", "JS", "3C", "3D", "AH", "2S", "4C", "4D")]
    extra = filler(used, 26)
    f0, f1, g0, g1 = extra[:11], extra[11:22], extra[22:24], extra[24:26]
    game = Game.from_players(
        Player([card("4C"), card("AH"), *g0, card("3C"), *f0, card("JH")]),
        Player([card("4D"), card("2S"), *g1, card("3D"), *f1, card("JS")]),
        seed=0,
    )

    events = game.step()

    assert events == [
        WarStart(top_cards=(card("JH"), card("JS")), expected_length=12),
        WarStart(top_cards=(card("3C"), card("3D")), expected_length=3),
        WarEnd(winning_player_id=0, final_top_cards=(card("AH"), card("2S"))),
    ]
    assert len(game.players[0].winnings_pile) == 2 * (1 + 12 + 3)
    assert game.card_counts() == (33, 1)


def test_both_players_exhausted_on_tie_has_one_winner() -> None:
    """The round's coin flip awards the pot; only one GameOver is emitted."""
    winners = set()
    for seed in range(40):
        game = Game.from_players(Player([card("5H")]), Player([card("5S")]), seed=seed)

        events = game.step()

        game_overs = [e for e in events if isinstance(e, GameOver)]
        assert len(game_overs) == 1
        winner = game_overs[0].winning_player_id
        assert events[-2] == WarEnd(winning_player_id=winner,
                                    final_top_cards=(card("5H"), card("5S")))
        assert game.players[winner].count_cards() == 2
        assert game.players[1 - winner].is_dead()
        winners.add(winner)
    assert winners == {0, 1}


def test_resolve_war_rejects_unequal_faces() -> None:
    game = Game.from_players(Player([card("2C")]), Player([card("3C")]), seed=0)
    with pytest.raises(WarInvariantError):
        resolve_war(game, ([card("AH")], [card("KS")]))
