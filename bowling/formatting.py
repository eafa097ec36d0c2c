"""
Text rendering for the score table.

This module turns engine state into the console-style table shown by the CLI.
It only reads from the engine.
"""

from typing import List, Optional

from bowling.config import FINAL_FRAME, FINAL_FRAME_INDEX, NUM_PINS
from bowling.frame import Frame
from bowling.game import ScoringEngine

MARKER_WIDTH = 48


def format_roll(pins: Optional[int]) -> str:
    """
    Format a single roll for display.

    Examples:
        >>> format_roll(10)
        'X'
        >>> format_roll(None)
        '0'
    """
    if pins == NUM_PINS:
        return "X"
    return str(pins or 0)


def format_bonus_rolls(rolls: List[int]) -> str:
    """
    Format the tenth frame's extra rolls, marking a spare between them.

    Examples:
        >>> format_bonus_rolls([])
        '0'
        >>> format_bonus_rolls([10, 10])
        'X X'
        >>> format_bonus_rolls([3, 7])
        '3 /'
    """
    if not rolls:
        return "0"

    marks = [format_roll(rolls[0])]
    if len(rolls) > 1:
        if rolls[0] != NUM_PINS and rolls[0] + rolls[1] == NUM_PINS:
            marks.append("/")
        else:
            marks.append(format_roll(rolls[1]))
    return " ".join(marks)


def format_frame_rolls(frame: Frame) -> str:
    """Format the two roll columns of a frame."""
    if frame.is_strike:
        return " X,  _"

    first = f"{frame.pins_roll1 or 0:>2}"
    if frame.is_spare:
        second = f"{'/':>2}"
    else:
        second = f"{frame.pins_roll2 or 0:>2}"
    return f"{first}, {second}"


def format_score(engine: ScoringEngine) -> str:
    """
    Render the per-frame score table.

    The active frame is wrapped in marker lines; the tenth frame carries an
    extra column with its bonus rolls.
    """
    active = engine.get_active_frame_index()
    lines: List[str] = []

    for index in range(FINAL_FRAME):
        frame = engine.get_frame(index)
        if index == active:
            lines.append("v" * MARKER_WIDTH)

        line = f"Round {index + 1:>2} - [{format_frame_rolls(frame)}"
        if index == FINAL_FRAME_INDEX:
            line += f", {format_bonus_rolls(engine.get_bonus_rolls())}] "
        else:
            line += "]    "
        line += f"Current: {frame.round_score:>3}, Total: {frame.cumulative_score:>3}"
        lines.append(line)

        if index == active:
            lines.append("^" * MARKER_WIDTH)

    return "\n".join(lines) + "\n"


def format_summary(engine: ScoringEngine) -> str:
    """Render a one-line total and game status."""
    if engine.is_complete():
        status = "complete"
    elif engine.get_active_frame_index() > FINAL_FRAME_INDEX:
        status = "bonus roll"
    else:
        status = f"frame {engine.get_active_frame_index() + 1}"
    return f"Total: {engine.get_total_score()} ({status})"
