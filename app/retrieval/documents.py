"""Utilities for turning retrieved documents into prompt context."""

from __future__ import annotations

from typing import Iterable

from app.models.document import Document


def combine_documents(documents: Iterable[Document]) -> str:
    """Join document texts with a blank line, keeping retrieval order."""
    return "\n\n".join(document.page_content for document in documents)
