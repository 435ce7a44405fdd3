# Role: Orchestrator for one chat message. It glues together:
# classification, history, retrieval (embedding + review search), response generation, and HTML formatting.

from __future__ import annotations

import logging
from typing import Optional

from profsync.core.history_store import ConversationHistoryStore
from profsync.llm.embedding_client import EmbeddingClient
from profsync.llm.message_classifier import MessageClassifier
from profsync.llm.response_generator import ResponseGenerator
from profsync.models.classification import Classification
from profsync.tools.review_search_client import ReviewSearchClient
from profsync.utils.markup import to_html

logger = logging.getLogger("profsync.flow")

APOLOGY_MESSAGE = "Sorry, I encountered an error while processing your request."


class FlowController:
    def __init__(
        self,
        history: Optional[ConversationHistoryStore] = None,
        classifier: Optional[MessageClassifier] = None,
        embedding_client: Optional[EmbeddingClient] = None,
        search_client: Optional[ReviewSearchClient] = None,
        response_generator: Optional[ResponseGenerator] = None,
        top_k: int = ReviewSearchClient.DEFAULT_TOP_K,
    ) -> None:
        # Key line: dependencies are injectable; "is not None" because an empty history store is falsy.
        self.history = history if history is not None else ConversationHistoryStore()
        self.classifier = classifier if classifier is not None else MessageClassifier()
        self.embedding_client = embedding_client if embedding_client is not None else EmbeddingClient()
        self.search_client = search_client if search_client is not None else ReviewSearchClient()
        self.response_generator = (
            response_generator
            if response_generator is not None
            else ResponseGenerator(client=self.classifier.client)
        )
        self.top_k = top_k

    def handle_message(self, message: str) -> str:
        # 1) Classify
        # 2) Record (message, label) and compute the recent window
        # 3) Professor-Specific -> embed -> search -> summarize; anything else -> casual reply
        # 4) Format as HTML
        # Any failure degrades to APOLOGY_MESSAGE; the caller never sees upstream details.
        try:
            classification = self.classifier.classify(message)

            self.history.record(message, classification)
            recent = self.history.recent_window()
            logger.debug(
                "Recent window (%s turns): %s",
                len(recent),
                [(t.message, t.classification) for t in recent],
            )

            if classification == Classification.PROFESSOR_SPECIFIC.value:
                reply = self._answer_from_reviews(message)
            else:
                reply = self.response_generator.casual_reply(message)

            return to_html(reply)
        except Exception:
            logger.exception("Error handling the message")
            return APOLOGY_MESSAGE

    def _answer_from_reviews(self, message: str) -> str:
        vector = self.embedding_client.embed(message)
        matches = self.search_client.search(vector, top_k=self.top_k)
        logger.info("Review search returned %s matches", len(matches))
        return self.response_generator.summarize(self.search_client.format_matches(matches), message)
