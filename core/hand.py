"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from core.cards import Card

BLACKJACK = 21

# Promoting one Ace from 1 to 11 adds this much
ACE_BONUS = 10


class Outcome(Enum):
    """Result of a player's hand against the house."""

    WIN = auto()
    LOSE = auto()
    PUSH = auto()
    BUST = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(eq=False)
class Hand:
    """An ordered blackjack hand that owns its cards."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def _hard_total(self) -> int:
        """Sum of raw card values, every Ace counted as 1."""
        return sum(card.value for card in self.cards)

    @property
    def _has_visible_ace(self) -> bool:
        return any(card.is_ace and card.face_up for card in self.cards)

    @property
    def is_revealed(self) -> bool:
        """Check if the hand has cards and its first card is face up."""
        return bool(self.cards) and self.cards[0].face_up

    @property
    def total(self) -> int:
        """
        Calculate the hand total.

        An empty hand, or one whose first card is face down, totals 0.
        Otherwise every Ace counts as 1, and if the hand holds an Ace and
        that sum is 11 or less, exactly one Ace is promoted to 11.
        """
        if not self.is_revealed:
            return 0

        total = self._hard_total
        if self._has_visible_ace and total <= BLACKJACK - ACE_BONUS:
            total += ACE_BONUS
        return total

    @property
    def is_soft(self) -> bool:
        """Check if the total counts one Ace as 11."""
        return (
            self.is_revealed
            and self._has_visible_ace
            and self._hard_total <= BLACKJACK - ACE_BONUS
        )

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        if not self.cards:
            return "<empty>"
        cards_str = " ".join(str(card) for card in self.cards)
        if self.total:
            return f"{cards_str} ({self.total})"
        return cards_str

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"


def evaluate_hands(player_hand: Hand, house_hand: Hand) -> Outcome:
    """
    Compare a player's hand against the house.

    A busted player is out regardless of the house. Otherwise a busted
    house loses to everyone still standing, and totals decide the rest.
    """
    if player_hand.is_busted:
        return Outcome.BUST

    if house_hand.is_busted:
        return Outcome.WIN

    player_total = player_hand.total
    house_total = house_hand.total

    if player_total > house_total:
        return Outcome.WIN
    if player_total < house_total:
        return Outcome.LOSE
    return Outcome.PUSH
