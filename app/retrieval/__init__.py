"""Retrieval stack utilities."""

from .documents import combine_documents
from .embedder import OpenAIEmbedder
from .retriever import VectorStoreRetriever
from .vector_store import VectorStore

__all__ = ["OpenAIEmbedder", "VectorStore", "VectorStoreRetriever", "combine_documents"]
