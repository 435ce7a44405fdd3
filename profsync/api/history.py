# Role: Read-only transparency endpoint. Does NOT change any flow logic; only exposes
# the recent conversation window that FlowController computes on every message.

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from profsync.api.deps import get_flow_controller
from profsync.core.flow_controller import FlowController


router = APIRouter(prefix="/api", tags=["history"])


class TurnSnapshot(BaseModel):
    message: str
    classification: str


class HistorySnapshot(BaseModel):
    turn_count: int
    recent: list[TurnSnapshot]


@router.get("/history", response_model=HistorySnapshot)
def get_history(flow_controller: FlowController = Depends(get_flow_controller)) -> HistorySnapshot:
    history = flow_controller.history
    return HistorySnapshot(
        turn_count=len(history),
        recent=[TurnSnapshot(message=t.message, classification=t.classification) for t in history.recent_window()],
    )
