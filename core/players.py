"""Player roles: human players and the house."""

from abc import ABC, abstractmethod
from typing import Callable

from core.hand import Hand

# House draws on any total below this
DEALER_STANDS_ON = 17


class GenericPlayer(Hand, ABC):
    """
    A named hand that decides for itself whether to take another card.

    The round controller only relies on ``is_hitting`` and ``is_busted``,
    never on the concrete role.
    """

    def __init__(self, name: str = "") -> None:
        """Initialize an empty hand with a display name."""
        super().__init__()
        self.name = name

    @abstractmethod
    def is_hitting(self) -> bool:
        """Return True if this participant wants another card."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.cards!r}, total={self.total})"


# Asked once per hit decision; True means hit, False means stand
HitDecision = Callable[["Player"], bool]


def always_stand(player: "Player") -> bool:
    """Decision provider that never asks for a card."""
    return False


class Player(GenericPlayer):
    """A human seat whose hit decisions come from an outside provider."""

    def __init__(self, name: str = "", decide: HitDecision = always_stand) -> None:
        """
        Initialize a player.

        Args:
            name: Name shown next to the hand
            decide: Called with this player each time a hit decision is needed
        """
        super().__init__(name)
        self._decide = decide

    def is_hitting(self) -> bool:
        """Ask the decision provider whether to take another card."""
        return bool(self._decide(self))


class House(GenericPlayer):
    """The dealer: hits on 16 or less, stands otherwise."""

    def __init__(self, name: str = "House") -> None:
        super().__init__(name)

    def is_hitting(self) -> bool:
        """Return True while the total is below the standing threshold."""
        return self.total < DEALER_STANDS_ON

    def flip_first_card(self) -> bool:
        """
        Turn the hole card over.

        Returns:
            False if there is no card to flip
        """
        if not self.cards:
            return False
        self.cards[0] = self.cards[0].flipped()
        return True
