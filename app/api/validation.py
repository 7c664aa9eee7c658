"""Request body validation for the ask endpoint."""

from __future__ import annotations

from typing import Any

from app.api.errors import BadRequest
from app.models.qa import AskRequest


def parse_ask_request(body: Any) -> AskRequest:
    """Check the required fields before any collaborator is touched.

    An empty ``conv_history`` list is accepted (first turn of a chat); only a
    missing, null or non-list value is rejected.

    This is stricter than a bare truthiness check: a non-string ``question``
    or a truthy non-list ``conv_history`` is also answered with a 400.
    """
    if not isinstance(body, dict):
        body = {}

    question = body.get("question")
    if not question or not isinstance(question, str):
        raise BadRequest("Missing question")

    conv_history = body.get("conv_history")
    if not isinstance(conv_history, list):
        raise BadRequest("Missing conversation history")

    return AskRequest(
        question=question,
        conv_history=[str(message) for message in conv_history],
    )
