"""Qdrant-based dense vector store."""

from __future__ import annotations

from typing import List, Sequence

from qdrant_client import QdrantClient

from app.config import settings
from app.models.document import Document


class VectorStore:
    """Wrapper around Qdrant similarity search."""

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        collection: str | None = None,
        client: QdrantClient | None = None,
    ) -> None:
        self.client = client or QdrantClient(
            url=url or settings.qdrant_url,
            api_key=api_key or settings.qdrant_api_key,
        )
        self.collection = collection or settings.qdrant_collection

    def search(self, query_vector: Sequence[float], top_k: int = 4) -> List[Document]:
        response = self.client.query_points(
            collection_name=self.collection,
            query=list(query_vector),
            limit=top_k,
            with_payload=True,
        )
        documents: List[Document] = []
        for point in response.points:
            payload = point.payload or {}
            metadata = dict(payload.get("metadata") or {})
            if point.score is not None:
                metadata.setdefault("score", float(point.score))
            documents.append(
                Document(
                    page_content=payload.get("content", ""),
                    metadata=metadata,
                )
            )
        return documents
