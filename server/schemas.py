from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class RollRequest(BaseModel):
    token: Optional[str] = None
    pins: Optional[int] = None

    @model_validator(mode="after")
    def exactly_one_input(self) -> "RollRequest":
        if (self.token is None) == (self.pins is None):
            raise ValueError("provide exactly one of 'token' or 'pins'")
        return self


class RollResponse(BaseModel):
    accepted: bool
    reason: Optional[str] = None
    snapshot: Dict[str, Any] = Field(default_factory=dict)


class FrameDTO(BaseModel):
    frame: int
    pins_roll1: Optional[int] = None
    pins_roll2: Optional[int] = None
    is_strike: bool
    is_spare: bool
    pending_bonus_rolls: int
    round_score: int
    cumulative_score: int


class LegalActionsResponse(BaseModel):
    actions: List[Dict[str, Any]]
