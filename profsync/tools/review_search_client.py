# Role: External tool adapter for professor reviews. Queries a Pinecone index namespace with an embedding
# and returns SearchMatch rows in the order the index ranked them, plus a text flattener for prompts.

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional, Sequence

from pinecone import Pinecone

from profsync.core.errors import UpstreamError
from profsync.models.search_match import SearchMatch

logger = logging.getLogger("profsync.search")


class ReviewSearchClient:
    DEFAULT_NAMESPACE = "ns1"
    DEFAULT_TOP_K = 5

    def __init__(
        self,
        api_key: Optional[str] = None,
        index_name: Optional[str] = None,
        namespace: Optional[str] = None,
        pinecone_client: Optional[Pinecone] = None,
    ) -> None:
        self.api_key = api_key or os.getenv("PINECONE_API_KEY")
        self.index_name = index_name or os.getenv("PINECONE_INDEX_NAME")
        if pinecone_client is None and not self.api_key:
            raise RuntimeError("Missing PINECONE_API_KEY in environment or .env")
        if not self.index_name:
            raise RuntimeError("Missing PINECONE_INDEX_NAME in environment or .env")

        self.namespace = namespace or os.getenv("PINECONE_NAMESPACE", self.DEFAULT_NAMESPACE)
        self._pc = pinecone_client or Pinecone(api_key=self.api_key)
        self._index = None

    def _get_index(self) -> Any:
        # Key line: resolving the index host is a network call, so it happens on first search (and is cached).
        if self._index is None:
            self._index = self._pc.Index(self.index_name)
        return self._index

    def search(self, vector: Sequence[float], top_k: int = DEFAULT_TOP_K) -> List[SearchMatch]:
        # 1) Query the namespace with metadata included
        # 2) Map each match (id + metadata) to SearchMatch, keeping the index's ranking
        try:
            results = self._get_index().query(
                vector=list(vector),
                top_k=top_k,
                include_metadata=True,
                namespace=self.namespace,
            )
        except Exception as e:
            raise UpstreamError(f"Pinecone query failed: {e}") from e

        matches = getattr(results, "matches", None) or []
        out = [SearchMatch.from_metadata(str(m.id), getattr(m, "metadata", None)) for m in matches]

        logger.debug(
            "Pinecone index=%s namespace=%s top_k=%s returned %s matches",
            self.index_name,
            self.namespace,
            top_k,
            len(out),
        )
        return out

    @staticmethod
    def format_matches(matches: Sequence[SearchMatch]) -> str:
        # Role: flatten matches into the plain-text block the summary prompt expects.
        blocks = []
        for match in matches:
            stars = "" if match.stars is None else f"{match.stars:g}"
            blocks.append(
                f"Professor: {match.identifier}\n"
                f"Review: {match.review}\n"
                f"Subject: {match.subject}\n"
                f"Stars: {stars}"
            )

        header = "Returned Results from Pinecone:"
        if not blocks:
            return f"{header}\n\n(no matching reviews)"
        return header + "\n\n" + "\n\n".join(blocks)
