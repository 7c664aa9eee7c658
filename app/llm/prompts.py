"""Prompt templates for the rewrite and answer stages."""

from __future__ import annotations

from typing import Optional

from app.config import settings


def build_standalone_question_prompt(conv_history: str, question: str) -> str:
    return f"""Given some conversation history (if any) and a question, convert the question to a standalone question.
conversation history: {conv_history}
question: {question}
standalone question:"""


def build_answer_prompt(
    context: str,
    conv_history: str,
    question: str,
    product_name: Optional[str] = None,
    support_email: Optional[str] = None,
) -> str:
    product_name = product_name or settings.product_name
    support_email = support_email or settings.support_email
    return f"""You are a helpful and enthusiastic support bot who can answer a given question about {product_name} based on the context provided and the conversation history. Try to find the answer in the context. If the answer is not given in the context, find the answer in the conversation history if possible. If you really don't know the answer, say "I'm sorry, I don't know the answer to that." And direct the questioner to email {support_email}. Don't try to make up an answer. Always speak as if you were chatting to a friend.
context: {context}
conversation history: {conv_history}
question: {question}
answer: """
