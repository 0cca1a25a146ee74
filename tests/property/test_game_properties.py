"""Property-based tests for the War engine."""

from hypothesis import given, settings, strategies as st

from warsim.simulation.cards import STANDARD_DECK_SIZE, standard_deck
from warsim.simulation.engine import Game
from warsim.simulation.events import GameOver
from warsim.simulation.player import Player

DECK = standard_deck()


@settings(max_examples=25, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_cards_conserved_property(seed: int) -> None:
    """Property: both players hold 52 cards between every turn."""
    game = Game(seed=seed)
    while game.step() is not None:
        assert sum(game.card_counts()) == STANDARD_DECK_SIZE


@settings(max_examples=25, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_determinism_property(seed: int) -> None:
    """Property: same seed always produces the same game length and winner."""
    a, b = Game(seed=seed), Game(seed=seed)
    while a.step() is not None:
        pass
    while b.step() is not None:
        pass
    assert a.turn_number == b.turn_number
    assert a.winner() == b.winner()


@settings(max_examples=25, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_single_game_over_property(seed: int) -> None:
    """Property: a game emits exactly one GameOver and its winner holds the deck."""
    game = Game(seed=seed)
    game_overs = []
    while True:
        events = game.step()
        if events is None:
            break
        game_overs.extend(e for e in events if isinstance(e, GameOver))

    assert len(game_overs) == 1
    assert game.winner() == game_overs[0].winning_player_id


@given(
    draw=st.lists(st.sampled_from(DECK), max_size=10, unique=True),
    winnings=st.lists(st.sampled_from(DECK), max_size=10, unique=True),
)
def test_draw_order_property(draw, winnings) -> None:
    """Property: a player draws its draw pile top-down, then its winnings top-down."""
    player = Player(list(draw), list(winnings))
    drawn = []
    card = player.draw()
    while card is not None:
        drawn.append(card)
        card = player.draw()
    assert drawn == list(reversed(draw)) + list(reversed(winnings))
    assert player.is_dead()


@settings(max_examples=50, deadline=None)
@given(
    deal=st.permutations(DECK),
    split=st.integers(min_value=1, max_value=STANDARD_DECK_SIZE - 1),
    seed=st.integers(min_value=0, max_value=1000),
)
def test_uneven_deal_step_property(deal, split, seed) -> None:
    """Property: any single turn from any deal keeps cards and ends the game at most once."""
    game = Game.from_players(Player(list(deal[:split])), Player(list(deal[split:])), seed=seed)

    events = game.step()

    assert events is not None
    assert sum(game.card_counts()) == STANDARD_DECK_SIZE
    assert sum(isinstance(e, GameOver) for e in events) <= 1
