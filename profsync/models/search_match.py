# Role: One review returned by the vector index. Built from a Pinecone match (id + metadata)
# and consumed immediately when the summarization prompt is assembled.

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

Stars = Union[int, float]


class SearchMatch(BaseModel):
    identifier: str
    review: str = ""
    subject: str = ""
    stars: Optional[Stars] = None

    @classmethod
    def from_metadata(cls, identifier: str, metadata: Optional[Mapping[str, Any]]) -> "SearchMatch":
        # Missing metadata keys degrade to empty values instead of failing the whole search.
        meta = metadata or {}
        return cls(
            identifier=identifier,
            review=str(meta.get("review") or ""),
            subject=str(meta.get("subject") or ""),
            stars=_parse_stars(meta.get("stars")),
        )


def _parse_stars(value: Any) -> Optional[Stars]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
