from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from snapshot import serialize_frame
from .lane import GameLane
from .schemas import FrameDTO, LegalActionsResponse, RollRequest, RollResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    logger.info("Starting bowling lane server")
    yield
    logger.info("Bowling lane server stopped")


app = FastAPI(
    title="Bowling Lane Server",
    version="0.1.0",
    lifespan=lifespan,
)
lane = GameLane()


@app.get("/game")
async def get_game():
    return await lane.snapshot()


@app.get("/game/frames/{index}", response_model=FrameDTO)
async def get_frame(index: int):
    try:
        frame = await lane.get_frame(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Frame not found")
    return FrameDTO(**serialize_frame(index, frame))


@app.get("/game/frames/{index}/events")
async def get_frame_events(index: int):
    try:
        events = await lane.get_frame_events(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Frame not found")
    return {"index": index, "events": events}


@app.get("/game/legal_actions", response_model=LegalActionsResponse)
async def legal_actions():
    return LegalActionsResponse(actions=await lane.get_legal_actions())


@app.post("/game/rolls", response_model=RollResponse)
async def roll(req: RollRequest):
    ok, reason, snap = await lane.roll(token=req.token, pins=req.pins)
    return RollResponse(accepted=ok, reason=reason, snapshot=snap)


@app.post("/game/reset")
async def reset():
    return await lane.reset()


if __name__ == "__main__":
    # Convenience entrypoint for running directly: python -m server.app
    import uvicorn

    from bowling.settings import get_server_settings

    settings = get_server_settings()
    uvicorn.run("server.app:app", host=settings.host, port=settings.port)
