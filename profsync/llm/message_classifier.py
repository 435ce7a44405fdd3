# Role: LLM-backed message classification. Asks Gemini for one of the two Classification labels
# and returns the model's text as-is (trimmed). No normalization: FlowController decides what matches.

from __future__ import annotations

import logging
from typing import Optional

from profsync.llm.gemini_client import GeminiClient
from profsync.models.classification import Classification
from profsync.prompts.classification_prompt import build_classification_prompt

logger = logging.getLogger("profsync.classifier")


class MessageClassifier:
    """
    Contract:
    - The prompt asks for exactly "Professor-Specific" or "Casual Conversation".
    - Models sometimes add punctuation or extra words; those labels are returned unchanged
      and simply fail the exact match downstream (casual branch).
    """

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        self.client = client if client is not None else GeminiClient()

    def classify(self, message: str) -> str:
        label = self.client.generate_text(build_classification_prompt(message))

        logger.debug("Classified message=%r as %r", message, label)
        if label not in {c.value for c in Classification}:
            logger.debug("Label %r is not a known classification; casual branch will be used.", label)

        return label
