"""
Mapping from internal EventLog objects to canonical public JSON events.

The internal engine emits GameEvent objects where:
- event_type is bowling.events.EventType
- frame_index is 0-based and optional
- details holds the event-specific keyword arguments

This module produces stable, JSONL-friendly dicts with consistent
event_type strings, 1-based frame numbers and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from bowling.config import FINAL_FRAME
from bowling.events import EventType, GameEvent


def _frame_fields(frame_index: int) -> Dict[str, Any]:
    """Describe where a roll landed: a numbered frame or a bonus roll."""
    if frame_index < FINAL_FRAME:
        return {"frame": frame_index + 1, "is_bonus": False}
    return {"frame": FINAL_FRAME, "is_bonus": True}


def map_event(event: GameEvent) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Returns:
        dict with keys: event_type (str) and event-specific fields
    """
    d = event.details
    base: Dict[str, Any] = {"event_type": event.event_type.value}

    if event.event_type == EventType.GAME_START:
        base.update(frames=d.get("frames"), pins=d.get("pins"))
        return base

    if event.event_type == EventType.ROLL:
        base.update(_frame_fields(event.frame_index))
        base.update(roll=d.get("roll"), pins=d.get("pins"))
        return base

    if event.event_type in (EventType.STRIKE, EventType.SPARE):
        base.update(_frame_fields(event.frame_index))
        return base

    if event.event_type == EventType.FRAME_SCORED:
        base.update(
            frame=event.frame_index + 1,
            round_score=d.get("round_score"),
            cumulative_score=d.get("cumulative_score"),
        )
        return base

    if event.event_type == EventType.GAME_END:
        base.update(total_score=d.get("total_score"))
        return base

    # Fallback: pass through details
    if event.frame_index is not None:
        base["frame"] = event.frame_index + 1
    base.update(d)
    return base


def map_events(events: Iterable[GameEvent]) -> List[Dict[str, Any]]:
    """Map a sequence of GameEvents to canonical JSON dicts."""
    return [map_event(event) for event in events]
