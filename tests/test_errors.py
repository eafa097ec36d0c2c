"""
Tests for rejected rolls. A rejected roll must leave the game untouched.
"""

import pytest
from bowling import (
    BowlingError,
    GameCompleteError,
    InvalidRollCountError,
    InvalidSpareRollError,
)
from bowling.exceptions import InvalidActionError, InvalidTokenError


def test_second_roll_exceeding_pins_rejected(game):
    game.record_roll(8)
    frames_before = game.frames
    total_before = game.get_total_score()
    events_before = len(game.event_log)

    with pytest.raises(InvalidRollCountError) as excinfo:
        game.record_roll(6)

    assert excinfo.value.pin_count == 6
    assert str(excinfo.value) == "Invalid roll - Pin count: 6"
    assert game.frames == frames_before
    assert game.get_total_score() == total_before
    assert game.get_active_frame_index() == 0
    assert len(game.event_log) == events_before


@pytest.mark.parametrize("pins", [11, -1, 100])
def test_out_of_range_roll_rejected(game, pins):
    with pytest.raises(InvalidRollCountError) as excinfo:
        game.record_roll(pins)

    assert excinfo.value.pin_count == pins
    assert game.get_frame(0).pins_roll1 is None


def test_non_integer_roll_rejected(game):
    with pytest.raises(InvalidRollCountError):
        game.record_roll("5")


@pytest.mark.parametrize("pins", [True, False, 4.0])
def test_bool_and_float_rolls_rejected(game, pins):
    with pytest.raises(InvalidRollCountError) as excinfo:
        game.record_roll(pins)

    assert excinfo.value.pin_count is pins
    assert game.get_frame(0).pins_roll1 is None
    assert len(game.event_log) == 1


def test_strike_after_first_roll_rejected(game):
    game.record_roll(3)

    with pytest.raises(InvalidRollCountError) as excinfo:
        game.roll_strike()

    assert excinfo.value.pin_count == 10
    assert game.get_frame(0).pins_roll2 is None


def test_spare_without_first_roll_rejected(game):
    with pytest.raises(InvalidSpareRollError):
        game.roll_spare()

    assert game.get_frame(0).pins_roll1 is None


def test_roll_after_completion_rejected(perfect_game):
    frames_before = perfect_game.frames
    index_before = perfect_game.get_active_frame_index()

    with pytest.raises(GameCompleteError):
        perfect_game.record_roll(0)
    with pytest.raises(GameCompleteError):
        perfect_game.roll_strike()
    with pytest.raises(GameCompleteError):
        perfect_game.roll_spare()

    assert perfect_game.frames == frames_before
    assert perfect_game.get_active_frame_index() == index_before
    assert perfect_game.get_total_score() == 300


def test_completion_checked_before_pin_count(example_game):
    """A bad pin count after the game ends still reports completion."""
    with pytest.raises(GameCompleteError):
        example_game.record_roll(42)


def test_error_hierarchy():
    for error in (
        GameCompleteError(),
        InvalidRollCountError(11),
        InvalidSpareRollError(),
        InvalidTokenError("?"),
        InvalidActionError("nope"),
    ):
        assert isinstance(error, BowlingError)
