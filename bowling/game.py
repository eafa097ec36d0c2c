"""
Main scoring engine and state management.
"""

import logging
from dataclasses import replace
from typing import List, Tuple

from bowling.config import (
    BONUS_LOOKBACK,
    FINAL_FRAME,
    FINAL_FRAME_INDEX,
    FIRST_BONUS_INDEX,
    MAX_FRAMES,
    NUM_PINS,
    SECOND_BONUS_INDEX,
    SPARE_BONUS_ROLLS,
    STRIKE_BONUS_ROLLS,
)
from bowling.events import EventLog, EventType
from bowling.exceptions import GameCompleteError, InvalidRollCountError, InvalidSpareRollError
from bowling.frame import Frame

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Tracks the score of a single game of ten-pin bowling.

    The engine owns twelve frame slots: the ten playable frames and two bonus
    slots that hold the tenth frame's extra rolls. A cursor points at the frame
    awaiting its next roll. Strike and spare bonuses are deferred: each frame
    keeps a count of the rolls it is still owed and is finalized once that
    count reaches zero.

    Rolls cannot be undone; start a new game with ``create_game()``.
    """

    def __init__(self):
        self._frames: List[Frame] = [Frame() for _ in range(MAX_FRAMES)]
        self._current_frame = 0
        self.event_log = EventLog()

        self.event_log.log(EventType.GAME_START, frames=FINAL_FRAME, pins=NUM_PINS)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        """Detached copies of all frame slots, bonus slots included."""
        return tuple(replace(frame) for frame in self._frames)

    def get_frame(self, index: int) -> Frame:
        """Get a copy of the frame at ``index``."""
        if not 0 <= index < MAX_FRAMES:
            raise IndexError(f"frame index out of range: {index}")
        return replace(self._frames[index])

    def get_active_frame_index(self) -> int:
        """Get the index of the frame awaiting the next roll."""
        return self._current_frame

    def get_bonus_rolls(self) -> List[int]:
        """Get the pins of the tenth frame's extra rolls, in roll order."""
        first = self._frames[FIRST_BONUS_INDEX]
        second = self._frames[SECOND_BONUS_INDEX]
        rolls = [first.pins_roll1, first.pins_roll2, second.pins_roll1]
        return [pins for pins in rolls if pins is not None]

    def get_total_score(self) -> int:
        """
        Get the most recently finalized cumulative score.

        Falls back to the first frame's running score while nothing has been
        finalized yet.
        """
        for frame in reversed(self._frames):
            if frame.cumulative_score > 0:
                return frame.cumulative_score
        return self._frames[0].round_score

    def is_complete(self) -> bool:
        """Check whether the game has finished."""
        if self._current_frame <= FINAL_FRAME_INDEX:
            return False

        final = self._frames[FINAL_FRAME_INDEX]
        if self._current_frame == FIRST_BONUS_INDEX:
            return not final.is_spare and not final.is_strike
        if self._current_frame == SECOND_BONUS_INDEX:
            return not (final.is_strike and final.pending_bonus_rolls > 0)

        return True

    def check_roll(self, pin_count: int) -> bool:
        """Check whether ``pin_count`` pins can still fall in the active frame."""
        frame = self._frames[self._current_frame]
        if not frame.has_first_roll():
            return pin_count <= NUM_PINS
        return frame.pins_roll1 + pin_count <= NUM_PINS

    def record_roll(self, pin_count: int) -> None:
        """
        Record the number of pins knocked down by the latest roll.

        Raises:
            GameCompleteError: The game has already finished.
            InvalidRollCountError: The pin count is out of range or exceeds
                the pins still standing. State is left untouched.
        """
        if self.is_complete():
            logger.debug("Rejected roll of %s: game complete", pin_count)
            raise GameCompleteError()
        if (
            isinstance(pin_count, bool)
            or not isinstance(pin_count, int)
            or pin_count < 0
            or pin_count > NUM_PINS
            or not self.check_roll(pin_count)
        ):
            logger.debug("Rejected roll of %s in frame %d", pin_count, self._current_frame + 1)
            raise InvalidRollCountError(pin_count)

        index = self._current_frame
        frame = self._frames[index]

        self.event_log.log(
            EventType.ROLL,
            frame_index=index,
            roll=1 if not frame.has_first_roll() else 2,
            pins=pin_count,
        )

        # Bonus slots are never scored standalone
        if index < FINAL_FRAME:
            frame.round_score += pin_count

        self._apply_bonus(pin_count)

        if not frame.has_first_roll():
            self._first_roll(frame, pin_count)
        else:
            self._second_roll(frame, pin_count)

        logger.debug(
            "Rolled %d in frame %d, total %d", pin_count, index + 1, self.get_total_score()
        )

        if self.is_complete():
            total = self.get_total_score()
            self.event_log.log(EventType.GAME_END, total_score=total)
            logger.info("Game complete with a total of %d", total)

    def roll_spare(self) -> None:
        """Knock over whatever pins remain standing in the active frame."""
        if self.is_complete():
            raise GameCompleteError()

        frame = self._frames[self._current_frame]
        if not frame.has_first_roll():
            raise InvalidSpareRollError()

        self.record_roll(NUM_PINS - frame.pins_roll1)

    def roll_strike(self) -> None:
        """Knock over all pins."""
        self.record_roll(NUM_PINS)

    def _apply_bonus(self, pin_count: int) -> None:
        """Credit the roll to earlier frames still owed bonus pins, oldest first."""
        for back in range(BONUS_LOOKBACK, 0, -1):
            prior_index = self._current_frame - back
            if prior_index < 0:
                continue

            prior = self._frames[prior_index]
            if prior.pending_bonus_rolls <= 0:
                continue

            prior.round_score += pin_count
            prior.pending_bonus_rolls -= 1
            if prior.pending_bonus_rolls == 0:
                self._finalize(prior_index)

    def _first_roll(self, frame: Frame, pin_count: int) -> None:
        frame.pins_roll1 = pin_count

        if pin_count == NUM_PINS:
            frame.is_strike = True
            frame.pending_bonus_rolls = STRIKE_BONUS_ROLLS
            self.event_log.log(EventType.STRIKE, frame_index=self._current_frame)
            self._current_frame += 1
            return

        final = self._frames[FINAL_FRAME_INDEX]

        # A spare in the tenth frame earns a single bonus roll
        if self._current_frame == FIRST_BONUS_INDEX and final.is_spare:
            self._current_frame += 1
            return

        # Two strikes in the tenth frame leave room for one more roll only
        if (
            self._current_frame == SECOND_BONUS_INDEX
            and final.is_strike
            and self._frames[FIRST_BONUS_INDEX].is_strike
        ):
            self._current_frame += 1

    def _second_roll(self, frame: Frame, pin_count: int) -> None:
        frame.pins_roll2 = pin_count

        if self._current_frame < FINAL_FRAME and frame.pins_roll1 + pin_count == NUM_PINS:
            frame.is_spare = True
            frame.pending_bonus_rolls = SPARE_BONUS_ROLLS
            self.event_log.log(EventType.SPARE, frame_index=self._current_frame)
        else:
            self._finalize(self._current_frame)

        self._current_frame += 1

    def _finalize(self, index: int) -> None:
        """Set the cumulative score of the frame at ``index``."""
        frame = self._frames[index]
        previous = self._frames[index - 1].cumulative_score if index > 0 else 0
        frame.cumulative_score = previous + frame.round_score

        if index < FINAL_FRAME:
            self.event_log.log(
                EventType.FRAME_SCORED,
                frame_index=index,
                round_score=frame.round_score,
                cumulative_score=frame.cumulative_score,
            )
            logger.debug(
                "Frame %d scored %d (cumulative %d)",
                index + 1,
                frame.round_score,
                frame.cumulative_score,
            )

    def __repr__(self) -> str:
        return (
            f"ScoringEngine(frame={self._current_frame + 1}, "
            f"total={self.get_total_score()}, complete={self.is_complete()})"
        )


def create_game() -> ScoringEngine:
    """
    Create a new game.

    Returns:
        A fresh ScoringEngine with every frame empty
    """
    return ScoringEngine()
