"""Turns a follow-up question into one that can be searched on its own."""

from __future__ import annotations

import logging
from typing import Protocol

from app.llm.prompts import build_standalone_question_prompt

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class QuestionRewriter:
    """Asks the language model for a standalone version of the question."""

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    def rewrite(self, question: str, conv_history: str) -> str:
        prompt = build_standalone_question_prompt(conv_history, question)
        standalone_question = self.client.complete(prompt)
        logger.debug("Standalone question: %s", standalone_question)
        return standalone_question
