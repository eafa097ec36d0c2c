"""
Tests for token parsing, legal actions and action dispatch.
"""

import pytest
from bowling.exceptions import InvalidActionError, InvalidRollCountError, InvalidTokenError
from bowling.rules import Action, ActionType, apply_action, get_legal_actions, parse_token


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", Action(ActionType.ROLL, pins=0)),
        ("7", Action(ActionType.ROLL, pins=7)),
        ("10", Action(ActionType.ROLL, pins=10)),
        ("x", Action(ActionType.STRIKE)),
        (" X ", Action(ActionType.STRIKE)),
        ("/", Action(ActionType.SPARE)),
        ("r", Action(ActionType.RESET)),
        ("Restart", Action(ActionType.RESET)),
        ("q", Action(ActionType.QUIT)),
        ("EXIT", Action(ActionType.QUIT)),
    ],
)
def test_parse_token(token, expected):
    assert parse_token(token) == expected


@pytest.mark.parametrize("token", ["?", "strike", "-1", "3.5", "²", "", "  "])
def test_parse_token_rejects_unknown(token):
    with pytest.raises(InvalidTokenError) as excinfo:
        parse_token(token)
    assert excinfo.value.token == token


def test_out_of_range_digits_parse_but_fail_to_roll(game):
    """Range checking belongs to the engine, not the parser."""
    action = parse_token("11")
    assert action == Action(ActionType.ROLL, pins=11)

    with pytest.raises(InvalidRollCountError) as excinfo:
        apply_action(game, action)
    assert excinfo.value.pin_count == 11


def test_legal_actions_on_first_roll(game):
    actions = get_legal_actions(game)

    rolls = [a.params["pins"] for a in actions if a.action_type == ActionType.ROLL]
    assert rolls == list(range(11))
    assert Action(ActionType.STRIKE) in actions
    assert Action(ActionType.SPARE) not in actions


def test_legal_actions_on_second_roll(game):
    game.record_roll(3)
    actions = get_legal_actions(game)

    rolls = [a.params["pins"] for a in actions if a.action_type == ActionType.ROLL]
    assert rolls == list(range(8))
    assert Action(ActionType.SPARE) in actions
    assert Action(ActionType.STRIKE) not in actions


def test_no_legal_actions_when_complete(perfect_game):
    assert get_legal_actions(perfect_game) == []


def test_apply_action_dispatches_rolls(game):
    apply_action(game, Action(ActionType.ROLL, pins=6))
    apply_action(game, Action(ActionType.SPARE))
    apply_action(game, Action(ActionType.STRIKE))

    assert game.get_frame(0).is_spare
    assert game.get_frame(1).is_strike
    assert game.get_frame(0).cumulative_score == 20


@pytest.mark.parametrize("action_type", [ActionType.RESET, ActionType.QUIT])
def test_apply_action_rejects_front_end_actions(game, action_type):
    with pytest.raises(InvalidActionError):
        apply_action(game, Action(action_type))
    assert game.get_frame(0).pins_roll1 is None


def test_action_repr():
    assert repr(Action(ActionType.ROLL, pins=4)) == "Action(roll, {'pins': 4})"
