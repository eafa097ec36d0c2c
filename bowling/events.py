"""
Engine event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    ROLL = "roll"
    STRIKE = "strike"
    SPARE = "spare"
    FRAME_SCORED = "frame_scored"
    GAME_END = "game_end"

@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    frame_index: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        frame_str = f"F{self.frame_index + 1}" if self.frame_index is not None else "Game"
        return f"[{frame_str}] {self.event_type.value}: {self.details}"

class EventLog:
    """Append-only record of what happened during one game."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, frame_index: Optional[int] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, frame_index, details))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_frame_events(self, frame_index: int) -> List[GameEvent]:
        """Get the events for one frame slot, bonus slots included, in order."""
        return [event for event in self.events if event.frame_index == frame_index]

    def __len__(self) -> int:
        return len(self.events)
