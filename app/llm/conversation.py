"""Conversation transcript formatting."""

from __future__ import annotations

from typing import Sequence


def format_conv_history(messages: Sequence[str]) -> str:
    """Label turns by position: even indices are the human, odd ones the assistant.

    A history that does not start with a human turn (e.g. a leading system
    message) will be mislabelled; callers must send strictly alternating turns.
    """
    return "\n".join(
        f"Human: {message}" if i % 2 == 0 else f"AI: {message}"
        for i, message in enumerate(messages)
    )
