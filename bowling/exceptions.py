"""
Exception hierarchy for the bowling engine and its front ends.

All errors are recoverable: the engine validates before it mutates, so a
caller can report the message and try again with corrected input.
"""


class BowlingError(Exception):
    """Base exception for all game-related errors."""


class GameCompleteError(BowlingError):
    """A roll was attempted after the game finished."""

    def __init__(self) -> None:
        super().__init__("Game complete.")


class InvalidRollCountError(BowlingError):
    """Pin count is out of range or exceeds the pins still standing."""

    def __init__(self, pin_count) -> None:
        self.pin_count = pin_count
        super().__init__(f"Invalid roll - Pin count: {pin_count}")


class InvalidSpareRollError(BowlingError):
    """Spare requested for a frame with no first roll on record."""

    def __init__(self) -> None:
        super().__init__("Invalid spare roll")


class InvalidTokenError(BowlingError):
    """Front-end input could not be parsed into an action."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid input: {token!r}")


class InvalidActionError(BowlingError):
    """Action is not something the engine can apply."""
