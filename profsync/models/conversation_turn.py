# Role: One entry of the in-process conversation log: the user's message and the label it was classified as.
# The label is kept exactly as the model produced it, so unexpected labels stay visible in history.

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ConversationTurn(BaseModel):
    message: str
    classification: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
