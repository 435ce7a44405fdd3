# Role: Wrapper around Gemini generate-content. Every failure mode (empty prompt, SDK/network error,
# a response without text at candidates[0].content.parts[0].text) surfaces as UpstreamError.

from __future__ import annotations

import os
from typing import Any, Optional

from google import genai

import profsync.config as config
from profsync.core.errors import UpstreamError


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> None:
        # GEMINI_API_KEY, falling back to GOOGLE_API_KEY (see config.gemini_api_key).
        self.api_key = api_key or config.gemini_api_key()
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        self.temperature = temperature

        self.client = genai.Client(api_key=self.api_key)

    def generate_text(self, prompt: str) -> str:
        # 1) Refuse to send an empty prompt
        # 2) Call Gemini (single text completion)
        # 3) Read the first candidate's first text part, trimmed
        if not prompt or not prompt.strip():
            raise UpstreamError("Refusing to send an empty prompt to Gemini.")

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config={"temperature": self.temperature},
            )
        except Exception as e:
            raise UpstreamError(f"Gemini API call failed: {e}") from e

        text = self._first_text(resp)
        if not text or not text.strip():
            raise UpstreamError("Gemini response has no text in its first candidate.")

        return text.strip()

    @staticmethod
    def _first_text(resp: Any) -> Optional[str]:
        # Blocked or truncated responses can lack any level of the path.
        candidates = getattr(resp, "candidates", None) or []
        if not candidates:
            return None
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        if not parts:
            return None
        return getattr(parts[0], "text", None)
