"""Status API routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

status_router = APIRouter(tags=["Status"])


class DispatchStatsModel(BaseModel):
    received: int
    acknowledged: int
    skipped: int
    translated: int
    replied: int
    translation_failures: int
    reply_failures: int
    ack_failures: int


class StatusResponse(BaseModel):
    bot_user_id: Optional[str] = None
    queue_depth: Optional[int] = None
    stats: DispatchStatsModel


@status_router.get("/health")
async def health():
    return {"status": "ok"}


@status_router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(status_code=503, detail="Dispatcher not running")
    source = getattr(request.app.state, "source", None)
    return StatusResponse(
        bot_user_id=dispatcher.bot_user_id,
        queue_depth=source.qsize() if source is not None else None,
        stats=DispatchStatsModel(**dispatcher.stats.as_dict()),
    )
