"""Intermediate values passed between the pipeline stages."""

from __future__ import annotations

from pydantic import BaseModel


class ChainInput(BaseModel):
    """The original question together with the formatted transcript."""

    question: str
    conv_history: str


class StandaloneBundle(BaseModel):
    """Output of the rewrite stage, carrying the original input alongside it."""

    standalone_question: str
    original_input: ChainInput
