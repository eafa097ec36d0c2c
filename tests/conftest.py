"""Shared test fixtures for bowling tests."""

import pytest
from bowling import create_game
from play_bowling import EXAMPLE_ROLLS, run_tokens


@pytest.fixture
def game():
    """Fresh game."""
    return create_game()


@pytest.fixture
def example_game():
    """The reference game: 8 / 5 4 9 0 X X 5 / 5 3 6 3 9 / 9 / X."""
    return run_tokens(EXAMPLE_ROLLS.split())


@pytest.fixture
def perfect_game():
    """Twelve strikes."""
    game = create_game()
    for _ in range(12):
        game.roll_strike()
    return game
