"""Similarity retriever: embed the query, then search the vector store."""

from __future__ import annotations

import logging
from typing import List

from app.config import settings
from app.models.document import Document
from app.retrieval.embedder import OpenAIEmbedder, get_embedder
from app.retrieval.vector_store import VectorStore

logger = logging.getLogger(__name__)


class VectorStoreRetriever:
    """Returns the top-k documents for a query, best match first."""

    def __init__(
        self,
        embedder: OpenAIEmbedder | None = None,
        vector_store: VectorStore | None = None,
        top_k: int | None = None,
    ) -> None:
        self.embedder = embedder or get_embedder()
        self.vector_store = vector_store or VectorStore()
        self.top_k = top_k or settings.retriever_top_k

    def retrieve(self, query: str) -> List[Document]:
        query_vector = self.embedder.embed_query(query)
        documents = self.vector_store.search(query_vector, top_k=self.top_k)
        logger.debug("Vector search for %r returned %s hits", query, len(documents))
        return documents
