"""
Bowling Scoring Engine

A deterministic implementation of ten-pin bowling scoring rules.
"""

from .game import ScoringEngine, create_game
from .frame import Frame
from .exceptions import (
    BowlingError,
    GameCompleteError,
    InvalidRollCountError,
    InvalidSpareRollError,
)

__all__ = [
    "ScoringEngine",
    "create_game",
    "Frame",
    "BowlingError",
    "GameCompleteError",
    "InvalidRollCountError",
    "InvalidSpareRollError",
]
