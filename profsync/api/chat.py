# Role: Thin HTTP adapter for the chat endpoint. Validates the request shape and delegates the whole
# message to FlowController (business logic lives in core, not in the API layer).

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from profsync.api.deps import get_flow_controller
from profsync.core.errors import ValidationError
from profsync.core.flow_controller import FlowController

logger = logging.getLogger("profsync.api")

router = APIRouter(prefix="/api", tags=["chat"])


class SendMessageRequest(BaseModel):
    message: Optional[str] = None


class SendMessageResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


def require_message(req: Optional[SendMessageRequest] = None) -> str:
    # Key line: declared before the FlowController dependency, so a missing message is a 400
    # even when the controller cannot be built (e.g. no API keys).
    if req is None or not req.message:
        raise ValidationError("Message is required")
    return req.message


@router.post(
    "/send-message",
    response_model=SendMessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def send_message(
    message: str = Depends(require_message),
    flow_controller: FlowController = Depends(get_flow_controller),
):
    # 1) require_message rejected missing/empty message already (400 via the ValidationError handler)
    # 2) Forward to the orchestrator; upstream failures already come back as apology text
    # 3) Anything escaping the orchestrator -> 500
    try:
        response = flow_controller.handle_message(message)
    except Exception:
        logger.exception("Chat processing failed")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    return SendMessageResponse(response=response)
