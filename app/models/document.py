"""Document model returned by the retriever."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A piece of knowledge-base text plus whatever metadata was stored with it."""

    page_content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
