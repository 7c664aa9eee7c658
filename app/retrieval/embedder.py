"""Embedding client backed by the OpenAI embeddings endpoint."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional

from openai import OpenAI

from app.config import settings


class OpenAIEmbedder:
    """Turns text into dense vectors."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        api_key = api_key or settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is not configured in the environment.")
        self.model = model or settings.openai_model_embedding
        self.client = OpenAI(api_key=api_key, base_url=base_url or settings.openai_embedding_base_url)

    def embed_documents(self, texts: Iterable[str]) -> List[List[float]]:
        inputs = list(texts)
        if not inputs:
            return []
        response = self.client.embeddings.create(model=self.model, input=inputs)
        ordered = sorted(response.data, key=lambda item: item.index)
        return [list(item.embedding) for item in ordered]

    def embed_query(self, text: str) -> List[float]:
        return self.embed_documents([text])[0]


@lru_cache(maxsize=1)
def get_embedder() -> OpenAIEmbedder:
    """Create the embedding client once per process."""
    return OpenAIEmbedder()
