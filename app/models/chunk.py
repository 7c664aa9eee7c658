"""Chunk-level models used for indexing."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """A knowledge-base chunk ready for embedding."""

    chunk_id: str
    source: str
    text: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def payload(self) -> Dict[str, Any]:
        """Vector-store payload in the shape the retriever reads back."""
        return {
            "content": self.text,
            "metadata": {"chunk_id": self.chunk_id, "source": self.source, **self.metadata},
        }
