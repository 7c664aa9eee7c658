"""Build the knowledge-base embedding index in Qdrant."""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, List

from qdrant_client import QdrantClient
from qdrant_client.http import models as qmodels

from app.config import settings
from app.ingestion.chunking import chunk_files, discover_sources
from app.models.chunk import Chunk
from app.retrieval.embedder import OpenAIEmbedder
from app.utils.tokenization import get_cl100k_encoding

logger = logging.getLogger(__name__)

BATCH_SIZE = 64


def ensure_collection(client: QdrantClient, collection: str, dim: int) -> None:
    vector_params = qmodels.VectorParams(size=dim, distance=qmodels.Distance.COSINE)
    if client.collection_exists(collection):
        logger.info("Re-creating existing Qdrant collection %s", collection)
        client.delete_collection(collection_name=collection)
    client.create_collection(
        collection_name=collection,
        vectors_config=vector_params,
    )


def chunk_batches(items: Iterable[Chunk], batch_size: int) -> Iterable[List[Chunk]]:
    batch: List[Chunk] = []
    for item in items:
        batch.append(item)
        if len(batch) >= batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


def build_points(batch: List[Chunk], vectors: List[List[float]]) -> List[qmodels.PointStruct]:
    return [
        qmodels.PointStruct(
            id=str(uuid.uuid5(uuid.NAMESPACE_URL, chunk.chunk_id)),
            vector=vector,
            payload=chunk.payload(),
        )
        for chunk, vector in zip(batch, vectors)
    ]


def index_chunks(
    chunks: Iterable[Chunk],
    client: QdrantClient,
    embedder: OpenAIEmbedder,
    collection: str,
    batch_size: int = BATCH_SIZE,
) -> int:
    count = 0
    for batch in chunk_batches(chunks, batch_size):
        vectors = embedder.embed_documents(chunk.text for chunk in batch)
        client.upsert(
            collection_name=collection,
            wait=True,
            points=build_points(batch, vectors),
        )
        count += len(batch)
    return count


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    sources = discover_sources()
    if not sources:
        logger.error("No knowledge-base files found at %s", settings.knowledge_base_path)
        return

    encoding = get_cl100k_encoding("chunking the knowledge base")
    client = QdrantClient(url=settings.qdrant_url, api_key=settings.qdrant_api_key or None)
    ensure_collection(client, settings.qdrant_collection, settings.embedding_dim)

    count = index_chunks(
        chunk_files(sources, encoding),
        client,
        OpenAIEmbedder(),
        settings.qdrant_collection,
    )
    logger.info(
        "Indexed %s chunks into Qdrant collection %s",
        count,
        settings.qdrant_collection,
    )


if __name__ == "__main__":
    main()
