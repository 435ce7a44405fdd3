# Role: Produces the assistant text for both branches: a casual reply, or a summary of retrieved reviews.
# Output is the raw model text; HTML formatting happens in FlowController.

from __future__ import annotations

import logging
from typing import Optional

from profsync.llm.gemini_client import GeminiClient
from profsync.prompts.casual_prompt import build_casual_prompt
from profsync.prompts.summary_prompt import build_summary_prompt

logger = logging.getLogger("profsync.responder")


class ResponseGenerator:
    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        self.client = client if client is not None else GeminiClient()

    def casual_reply(self, message: str) -> str:
        response = self.client.generate_text(build_casual_prompt(message))
        logger.debug("Casual reply (%s chars)", len(response))
        return response

    def summarize(self, search_results: str, message: str) -> str:
        # search_results is the flattened block from ReviewSearchClient.format_matches().
        response = self.client.generate_text(build_summary_prompt(search_results, message))

        preview = response.strip()
        logger.debug(
            "Summary response (preview):\n%s",
            preview[:600] + ("..." if len(preview) > 600 else ""),
        )
        return response
