"""Glue module that turns retrieved context into an answer via the chat model."""

from __future__ import annotations

from app.llm.prompts import build_answer_prompt
from app.llm.question_rewriter import CompletionClient


class AnswerGenerator:
    """Generates answers grounded in the knowledge base and the conversation."""

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    def generate(self, context: str, conv_history: str, question: str) -> str:
        prompt = build_answer_prompt(context, conv_history, question)
        return self.client.complete(prompt)
