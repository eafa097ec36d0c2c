"""
Frame state.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Frame:
    """A single frame slot: ten playable frames plus two bonus slots."""

    pins_roll1: Optional[int] = None
    pins_roll2: Optional[int] = None
    is_strike: bool = False
    is_spare: bool = False
    pending_bonus_rolls: int = 0
    round_score: int = 0
    cumulative_score: int = 0

    def has_first_roll(self) -> bool:
        return self.pins_roll1 is not None
