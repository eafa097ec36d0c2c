"""
Server package exposing the FastAPI app and the game lane.
"""

from .app import app  # noqa: F401
from .lane import GameLane  # noqa: F401
