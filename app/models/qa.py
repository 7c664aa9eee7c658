"""Request/response models for the public API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Incoming question payload."""

    question: str
    conv_history: List[str] = Field(default_factory=list)


class AskResponse(BaseModel):
    """Answer returned to the caller."""

    question: str
    answer: str
