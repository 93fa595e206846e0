"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Rank, Suit
from core.hand import Hand, Outcome, evaluate_hands
from core.players import GenericPlayer, House, Player
from core.deck import Deck

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "GenericPlayer",
    "House",
    "Player",
    "Deck",
]
