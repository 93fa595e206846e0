"""Pytest fixtures for blackjack tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from config import GameConfig
from core.cards import Card, Rank, Suit
from core.deck import Deck
from core.hand import Hand
from core.game.engine import BlackjackGame


def make_hand(*tokens: str) -> Hand:
    """Build a hand from card strings like 'Ah', '10c'."""
    hand = Hand()
    for token in tokens:
        hand.add_card(Card.from_string(token))
    return hand


def stack_deck(deck: Deck, *tokens: str) -> None:
    """Replace the deck's contents so cards come off in the given order."""
    deck.cards[:] = [Card.from_string(token) for token in reversed(tokens)]


class ScriptedDecisions:
    """Hit decision provider that replays canned answers, then stands."""

    def __init__(self, *answers: bool) -> None:
        self._answers = list(answers)
        self.asked: list[str] = []

    def __call__(self, player) -> bool:
        self.asked.append(player.name)
        if self._answers:
            return self._answers.pop(0)
        return False


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """Ace and King."""
    return make_hand("As", "Kh")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("As", "6h")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10s", "6h")


@pytest.fixture
def bust_hand():
    """King, Queen, Five."""
    return make_hand("Ks", "Qh", "5c")


@pytest.fixture
def table_config():
    """Table settings independent of the environment."""
    return GameConfig(reshuffle_threshold=0, seed=None)


@pytest.fixture
def decisions():
    """A decision provider that always stands unless given answers."""
    return ScriptedDecisions()


@pytest.fixture
def game(rng, decisions, table_config):
    """A one-player game with a seeded deck."""
    return BlackjackGame(["Alice"], decide=decisions, rng=rng, game_config=table_config)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw, face_up=st.just(True)):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit, draw(face_up))


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=6):
    """Generate a random face-up hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards=cards)
