"""
Public snapshot serialization of a ScoringEngine.

Produces a UI-friendly view of the current game covering the ten playable
frames and the tenth frame's bonus rolls.
"""

from __future__ import annotations

from typing import Any, Dict, List

from bowling.config import FINAL_FRAME
from bowling.frame import Frame
from bowling.game import ScoringEngine


def serialize_frame(index: int, frame: Frame) -> Dict[str, Any]:
    """Serialize a single frame, numbering frames from 1."""
    return {
        "frame": index + 1,
        "pins_roll1": frame.pins_roll1,
        "pins_roll2": frame.pins_roll2,
        "is_strike": frame.is_strike,
        "is_spare": frame.is_spare,
        "pending_bonus_rolls": frame.pending_bonus_rolls,
        "round_score": frame.round_score,
        "cumulative_score": frame.cumulative_score,
    }


def serialize_snapshot(engine: ScoringEngine) -> Dict[str, Any]:
    """Serialize a ScoringEngine into a public, stable JSON dict.

    The snapshot includes:
    - active_frame_index, is_complete and total_score
    - the ten playable frames
    - bonus_rolls: pins of the tenth frame's extra rolls in roll order
    """
    frames: List[Dict[str, Any]] = [
        serialize_frame(index, engine.get_frame(index)) for index in range(FINAL_FRAME)
    ]

    return {
        "active_frame_index": engine.get_active_frame_index(),
        "is_complete": engine.is_complete(),
        "total_score": engine.get_total_score(),
        "frames": frames,
        "bonus_rolls": engine.get_bonus_rolls(),
    }
