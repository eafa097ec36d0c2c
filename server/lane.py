from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from bowling.exceptions import BowlingError, InvalidActionError
from bowling.frame import Frame
from bowling.game import ScoringEngine, create_game
from bowling.rules import Action, ActionType, apply_action, get_legal_actions, parse_token
from events.mapper import map_events
from snapshot import serialize_snapshot

logger = logging.getLogger(__name__)


class GameLane:
    """Hosts a single game and serializes every call into its engine."""

    def __init__(self):
        self._engine: ScoringEngine = create_game()
        self._lock = asyncio.Lock()

    async def snapshot(self) -> Dict[str, Any]:
        async with self._lock:
            return serialize_snapshot(self._engine)

    async def get_frame(self, index: int) -> Frame:
        async with self._lock:
            return self._engine.get_frame(index)

    async def get_frame_events(self, index: int) -> List[Dict[str, Any]]:
        async with self._lock:
            self._engine.get_frame(index)  # IndexError outside the twelve slots
            events = self._engine.event_log.get_frame_events(index)
        return map_events(events)

    async def get_legal_actions(self) -> List[Dict[str, Any]]:
        async with self._lock:
            actions = get_legal_actions(self._engine)
        return [{"action_type": a.action_type.value, "params": a.params} for a in actions]

    async def roll(
        self, token: Optional[str] = None, pins: Optional[int] = None
    ) -> Tuple[bool, Optional[str], Dict[str, Any]]:
        """
        Apply a roll given either as a front-end token or a pin count.

        Returns (accepted, reason, snapshot). A rejected roll leaves the game
        unchanged.
        """
        async with self._lock:
            try:
                if pins is not None:
                    action = Action(ActionType.ROLL, pins=pins)
                else:
                    action = parse_token(token or "")
                if action.action_type in (ActionType.RESET, ActionType.QUIT):
                    raise InvalidActionError("use POST /game/reset to start a new game")
                apply_action(self._engine, action)
            except BowlingError as e:
                logger.info("Rejected roll (token=%r, pins=%r): %s", token, pins, e)
                return False, str(e), serialize_snapshot(self._engine)
            return True, None, serialize_snapshot(self._engine)

    async def reset(self) -> Dict[str, Any]:
        async with self._lock:
            self._engine = create_game()
            logger.info("Lane reset")
            return serialize_snapshot(self._engine)
