"""Shared fakes for the Gemini and Pinecone collaborators."""

from __future__ import annotations

from types import SimpleNamespace
from typing import List, Optional

import pytest

from profsync.core.errors import UpstreamError
from profsync.core.history_store import ConversationHistoryStore


class FakeGeminiClient:
    """Stand-in for ``GeminiClient``: replays queued replies and records prompts."""

    def __init__(self, replies: Optional[List[object]] = None) -> None:
        self.replies = list(replies or [])
        self.prompts: List[str] = []

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeEmbeddingClient:
    def __init__(self, vector: Optional[List[float]] = None, calls: Optional[list] = None) -> None:
        self.vector = vector or [0.1, 0.2, 0.3]
        self.messages: List[str] = []
        self.calls = calls

    def embed(self, message: str) -> List[float]:
        self.messages.append(message)
        if self.calls is not None:
            self.calls.append("embed")
        return self.vector


class FakeIndex:
    def __init__(self, matches: list, calls: Optional[list] = None) -> None:
        self.matches = matches
        self.queries: list = []
        self.calls = calls

    def query(self, **kwargs):
        self.queries.append(kwargs)
        if self.calls is not None:
            self.calls.append("search")
        return SimpleNamespace(matches=self.matches)


class FakePinecone:
    def __init__(self, index: FakeIndex) -> None:
        self.index = index
        self.opened: List[str] = []

    def Index(self, name: str) -> FakeIndex:
        self.opened.append(name)
        return self.index


def pinecone_match(identifier: str, review: str, subject: str, stars) -> SimpleNamespace:
    return SimpleNamespace(
        id=identifier,
        metadata={"review": review, "subject": subject, "stars": stars},
    )


@pytest.fixture
def history() -> ConversationHistoryStore:
    return ConversationHistoryStore()


@pytest.fixture
def upstream_error() -> UpstreamError:
    return UpstreamError("Gemini API call failed: boom")
