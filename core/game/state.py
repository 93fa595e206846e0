"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: INIT → INITIAL_DEAL → REVEAL_PLAYERS → PLAYER_TURNS → DEALER_REVEAL
    → DEALER_TURN → SETTLE → RESET → INIT
    """

    # Idle, ready for the next round
    INIT = auto()

    # Two cards to every player and the house
    INITIAL_DEAL = auto()

    # Hole card hidden, hands shown
    REVEAL_PLAYERS = auto()

    # Each player draws until standing or busting
    PLAYER_TURNS = auto()

    # Hole card turned back over
    DEALER_REVEAL = auto()

    # House draws by the fixed rule
    DEALER_TURN = auto()

    # Outcomes decided
    SETTLE = auto()

    # Hands cleared
    RESET = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions; strictly sequential, no branching back
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.INIT: [RoundState.INITIAL_DEAL],
    RoundState.INITIAL_DEAL: [RoundState.REVEAL_PLAYERS],
    RoundState.REVEAL_PLAYERS: [RoundState.PLAYER_TURNS],
    RoundState.PLAYER_TURNS: [RoundState.DEALER_REVEAL],
    RoundState.DEALER_REVEAL: [RoundState.DEALER_TURN],
    RoundState.DEALER_TURN: [RoundState.SETTLE],
    RoundState.SETTLE: [RoundState.RESET],
    RoundState.RESET: [RoundState.INIT],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
