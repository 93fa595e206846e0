"""The deck: a hand of undealt cards that deals into other hands."""

import logging
from random import Random

from core.cards import Card, Rank, Suit
from core.events import EventEmitter, EventType
from core.hand import Hand
from core.players import GenericPlayer

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class Deck(Hand):
    """
    A standard 52-card deck.

    Cards leave from the end of the list (the top of the deck) and are
    moved, not copied, into the receiving hand.
    """

    def __init__(
        self,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a populated, unshuffled deck.

        Args:
            rng: Random number generator for shuffling
            events: Emitter that receives out-of-cards and display events
        """
        super().__init__()
        self._rng = rng or Random()
        self.events = events or EventEmitter()
        self.populate()

    def populate(self) -> None:
        """Discard whatever is left and create all 52 cards face up."""
        self.clear()
        self.cards.extend(Card(rank, suit) for suit in Suit for rank in Rank)

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self.cards)
        logger.debug("Shuffled %d cards", len(self.cards))

    def deal(self, hand: Hand) -> bool:
        """
        Move the top card into a hand.

        An empty deck is not an error: the hand is left unchanged and an
        OUT_OF_CARDS event is emitted instead.

        Returns:
            True if a card was dealt
        """
        if not self.cards:
            logger.warning("Out of cards, unable to deal")
            self.events.emit_new(EventType.OUT_OF_CARDS)
            return False

        card = self.cards.pop()
        hand.add_card(card)
        logger.debug("Dealt %r, %d left", card, len(self.cards))
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            name=getattr(hand, "name", None),
        )
        return True

    def additional_cards(self, player: GenericPlayer) -> int:
        """
        Keep dealing to a player until they stand, bust, or the deck runs out.

        The hand is shown after every card. Works for any role; the role's
        ``is_hitting`` decides when to stop.

        Returns:
            Number of cards dealt
        """
        dealt = 0
        while not player.is_busted and player.is_hitting():
            if not self.deal(player):
                break
            dealt += 1
            self.show(player)

            if player.is_busted:
                self.events.emit_new(
                    EventType.PLAYER_BUSTS,
                    name=player.name,
                    total=player.total,
                )
        return dealt

    def show(self, player: GenericPlayer) -> None:
        """Emit what the hand looks like right now: name, card tokens and total."""
        self.events.emit_new(
            EventType.HAND_SHOWN,
            name=player.name,
            cards=tuple(str(card) for card in player.cards),
            total=player.total,
        )

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self.cards)
