"""
High-level rules API for driving a game from user input.
This module provides token parsing, legal move detection and action dispatch.
"""

from enum import Enum
from typing import Any, List

from bowling.config import NUM_PINS
from bowling.exceptions import InvalidActionError, InvalidTokenError
from bowling.game import ScoringEngine


class ActionType(Enum):
    """Types of actions a bowler can take."""

    ROLL = "roll"
    STRIKE = "strike"
    SPARE = "spare"
    RESET = "reset"
    QUIT = "quit"


STRIKE_TOKENS = {"x"}
SPARE_TOKENS = {"/"}
RESET_TOKENS = {"r", "reset", "restart"}
QUIT_TOKENS = {"q", "quit", "exit", "stop"}


class Action:
    """Represents a game action that can be taken."""

    def __init__(self, action_type: ActionType, **params: Any):
        self.action_type = action_type
        self.params = params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.action_type == other.action_type and self.params == other.params

    def __repr__(self) -> str:
        return f"Action({self.action_type.value}, {self.params})"


def parse_token(token: str) -> Action:
    """
    Translate a single user token into an Action.

    Digits roll that many pins (range is checked by the engine), ``x`` is a
    strike, ``/`` a spare, and the reset/quit words map to front-end actions.

    Raises:
        InvalidTokenError: The token is not recognized.
    """
    text = token.strip().lower()

    if text in QUIT_TOKENS:
        return Action(ActionType.QUIT)
    if text in RESET_TOKENS:
        return Action(ActionType.RESET)
    if text in STRIKE_TOKENS:
        return Action(ActionType.STRIKE)
    if text in SPARE_TOKENS:
        return Action(ActionType.SPARE)
    if text.isascii() and text.isdigit():
        return Action(ActionType.ROLL, pins=int(text))

    raise InvalidTokenError(token)


def get_legal_actions(engine: ScoringEngine) -> List[Action]:
    """
    Get all rolls the engine will accept right now.

    Returns:
        List of legal Action objects (empty once the game is complete)
    """
    if engine.is_complete():
        return []

    frame = engine.get_frame(engine.get_active_frame_index())
    if not frame.has_first_roll():
        actions = [Action(ActionType.ROLL, pins=pins) for pins in range(NUM_PINS + 1)]
        actions.append(Action(ActionType.STRIKE))
        return actions

    standing = NUM_PINS - frame.pins_roll1
    actions = [Action(ActionType.ROLL, pins=pins) for pins in range(standing + 1)]
    actions.append(Action(ActionType.SPARE))
    return actions


def apply_action(engine: ScoringEngine, action: Action) -> None:
    """
    Apply a roll action to the engine.

    Engine errors propagate unchanged. Reset and quit belong to the front end
    and are rejected here.
    """
    if action.action_type == ActionType.ROLL:
        engine.record_roll(action.params["pins"])
    elif action.action_type == ActionType.STRIKE:
        engine.roll_strike()
    elif action.action_type == ActionType.SPARE:
        engine.roll_spare()
    else:
        raise InvalidActionError(f"{action.action_type.value} is handled by the front end")
