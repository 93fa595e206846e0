"""Blackjack round controller with state machine."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Callable, Sequence

from transitions import Machine

from config import GameConfig, config
from core.deck import Deck
from core.events import EventEmitter, EventType, GameEvent
from core.hand import Outcome, evaluate_hands
from core.players import GenericPlayer, HitDecision, House, Player, always_stand
from core.game.state import RoundState

logger = logging.getLogger(__name__)

_OUTCOME_EVENTS = {
    Outcome.WIN: EventType.PLAYER_WINS,
    Outcome.LOSE: EventType.PLAYER_LOSES,
    Outcome.PUSH: EventType.PUSH,
}


@dataclass(frozen=True)
class PlayerResult:
    """How one player finished a round."""

    name: str
    total: int
    outcome: Outcome


@dataclass(frozen=True)
class RoundResult:
    """Summary of a settled round."""

    round_number: int
    house_total: int
    house_busted: bool
    players: list[PlayerResult] = field(default_factory=list)

    def outcome_for(self, name: str) -> Outcome | None:
        """Return the outcome of the first player with this name."""
        for result in self.players:
            if result.name == name:
                return result.outcome
        return None


class BlackjackGame:
    """
    Blackjack game engine using a state machine.

    Plays complete rounds for a fixed table of players against the house.
    Completely UI-agnostic: hit decisions come in through a callable and
    everything worth showing goes out as events.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_deal", "source": "init", "dest": "initial_deal"},
        {"trigger": "show_hands", "source": "initial_deal", "dest": "reveal_players"},
        {"trigger": "begin_player_turns", "source": "reveal_players", "dest": "player_turns"},
        {"trigger": "reveal_hole_card", "source": "player_turns", "dest": "dealer_reveal"},
        {"trigger": "begin_dealer_turn", "source": "dealer_reveal", "dest": "dealer_turn"},
        {"trigger": "settle_round", "source": "dealer_turn", "dest": "settle"},
        {"trigger": "reset_round", "source": "settle", "dest": "reset"},
        {"trigger": "finish_round", "source": "reset", "dest": "init"},
    ]

    def __init__(
        self,
        names: Sequence[str],
        decide: HitDecision = always_stand,
        rng: Random | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            names: Player names in seating order
            decide: Hit decision provider shared by all players
            rng: Random number generator for reproducible games
            game_config: Table settings (uses the global config if not provided)
        """
        self.config = game_config or config.game

        if not self.config.min_players <= len(names) <= self.config.max_players:
            raise ValueError(
                f"Need between {self.config.min_players} and "
                f"{self.config.max_players} players, got {len(names)}"
            )

        if rng is None and self.config.seed is not None:
            rng = Random(self.config.seed)

        self.events = EventEmitter()
        self.players = [Player(name, decide) for name in names]
        self.house = House()
        self.deck = Deck(rng=rng, events=self.events)
        self.deck.shuffle()
        self.round_number = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="init",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state_change",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def participants(self) -> list[GenericPlayer]:
        """Players in seating order, then the house."""
        return [*self.players, self.house]

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _log_state_change(self) -> None:
        logger.debug("Round %d: %s", self.round_number, self.state)

    def play(self) -> RoundResult:
        """
        Play one full round.

        Returns:
            The settled outcome of every player
        """
        self.round_number += 1

        self.start_deal()
        # History covers the current round only
        self.events.clear_history()
        self._reshuffle_if_needed()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round_number=self.round_number,
            cards_remaining=self.deck.cards_remaining,
        )
        self._deal_initial_cards()

        self.show_hands()
        self._hide_hole_card()
        for participant in self.participants:
            self.deck.show(participant)

        self.begin_player_turns()
        for player in self.players:
            self.deck.additional_cards(player)

        self.reveal_hole_card()
        self._reveal_hole_card()

        self.begin_dealer_turn()
        self.deck.additional_cards(self.house)

        self.settle_round()
        result = self._settle()

        self.reset_round()
        self._clear_hands()

        self.finish_round()
        self.events.emit_new(
            EventType.ROUND_ENDED,
            round_number=self.round_number,
            cards_remaining=self.deck.cards_remaining,
        )
        return result

    def _reshuffle_if_needed(self) -> None:
        """Start over with a full deck once it runs below the threshold."""
        threshold = self.config.reshuffle_threshold
        if threshold and self.deck.cards_remaining < threshold:
            logger.info(
                "Deck down to %d cards, repopulating", self.deck.cards_remaining
            )
            self.deck.populate()
            self.deck.shuffle()
            self.events.emit_new(
                EventType.DECK_SHUFFLED,
                cards_remaining=self.deck.cards_remaining,
            )

    def _deal_initial_cards(self) -> None:
        """Deal two cards each: every player, then the house, twice over."""
        for _ in range(2):
            for player in self.players:
                self.deck.deal(player)
            self.deck.deal(self.house)

    def _hide_hole_card(self) -> None:
        if self.house.flip_first_card():
            self.events.emit_new(EventType.HOUSE_HIDES, name=self.house.name)

    def _reveal_hole_card(self) -> None:
        if self.house.flip_first_card():
            self.events.emit_new(
                EventType.HOUSE_REVEALS,
                name=self.house.name,
                card=str(self.house.cards[0]),
                total=self.house.total,
            )
        self.deck.show(self.house)

    def _settle(self) -> RoundResult:
        """Decide every player's outcome against the house."""
        results = []
        for player in self.players:
            outcome = evaluate_hands(player, self.house)
            results.append(PlayerResult(player.name, player.total, outcome))

            # Busted players were already announced during their turn
            if outcome in _OUTCOME_EVENTS:
                self.events.emit_new(
                    _OUTCOME_EVENTS[outcome],
                    name=player.name,
                    total=player.total,
                    house_total=self.house.total,
                )

        return RoundResult(
            round_number=self.round_number,
            house_total=self.house.total,
            house_busted=self.house.is_busted,
            players=results,
        )

    def _clear_hands(self) -> None:
        for participant in self.participants:
            participant.clear()
        logger.debug("Hands cleared, %d cards left in deck", self.deck.cards_remaining)
