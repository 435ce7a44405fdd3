# Role: Turns a user message into an embedding vector with the Gemini embedding model.
# The vector is handed straight to ReviewSearchClient and never stored.

from __future__ import annotations

import os
from typing import List, Optional

from google import genai

import profsync.config as config
from profsync.core.errors import UpstreamError


class EmbeddingClient:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None) -> None:
        self.api_key = api_key or config.gemini_api_key()
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_EMBEDDING_MODEL", "text-embedding-004")
        self.client = genai.Client(api_key=self.api_key)

    def embed(self, message: str) -> List[float]:
        try:
            resp = self.client.models.embed_content(model=self.model_name, contents=message)
        except Exception as e:
            raise UpstreamError(f"Gemini embedding call failed: {e}") from e

        embeddings = getattr(resp, "embeddings", None) or []
        values = getattr(embeddings[0], "values", None) if embeddings else None
        if not values:
            raise UpstreamError("Gemini returned an empty embedding.")

        return list(values)
