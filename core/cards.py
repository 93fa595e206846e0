"""Card, Rank and Suit - immutable card representations."""

from dataclasses import dataclass, replace
from enum import Enum


class Suit(Enum):
    """Card suits, in deck population order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "c",
            Suit.DIAMONDS: "d",
            Suit.HEARTS: "h",
            Suit.SPADES: "s",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value with Ace = 1 and face cards = 10."""
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


# Shown in place of rank and suit while a card is face down
HIDDEN_TOKEN = "XX"


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card with a visibility flag."""

    rank: Rank
    suit: Suit
    face_up: bool = True

    def __post_init__(self) -> None:
        """Reject anything that is not a real rank or suit."""
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")

    def __str__(self) -> str:
        if not self.face_up:
            return HIDDEN_TOKEN
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        state = "" if self.face_up else ", face_down"
        return f"Card({self.rank.name}, {self.suit.name}{state})"

    @property
    def value(self) -> int:
        """
        Return the raw point value of the card.

        A face-down card is worth 0 and an Ace is worth 1; choosing between
        1 and 11 for an Ace is up to the hand holding it.
        """
        if not self.face_up:
            return 0
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    def flipped(self) -> "Card":
        """Return this card turned over."""
        return replace(self, face_up=not self.face_up)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a face-up card from a string like 'Ah', '10c', 'TS'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "A": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "S": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])
