"""
JSONL logger for bowling game events.

Writes every engine event to a JSONL file, one object per line.
"""

import json
from datetime import datetime
from typing import Any, Optional

from bowling.game import ScoringEngine
from events.mapper import map_events


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"bowling_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self.game_number = 1
        self._engine_last_idx = 0  # last flushed index from engine's internal EventLog

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> None:
        """
        Log a game event to JSONL file.

        Args:
            event_type: Type of event (e.g., "roll", "frame_scored", "game_end")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "game_number": self.game_number,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def flush_engine_events(self, engine: ScoringEngine) -> int:
        """Flush new internal engine events to JSONL using the event mapper.

        Returns the number of events written.
        """
        events = engine.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        new_events = events[self._engine_last_idx :]
        wrote = 0
        for mapped in map_events(new_events):
            if mapped["event_type"] == "game_end":
                mapped["active_frame_index"] = engine.get_active_frame_index()
            etype = mapped.pop("event_type")
            self.log_event(etype, **mapped)
            wrote += 1

        self._engine_last_idx = len(events)
        return wrote

    def reset_engine_cursor(self) -> None:
        """Start flushing from the beginning of a new engine's event log."""
        self._engine_last_idx = 0
        self.game_number += 1
