"""Typed models shared across the application."""

from .chain import ChainInput, StandaloneBundle
from .chunk import Chunk
from .document import Document
from .qa import AskRequest, AskResponse

__all__ = [
    "AskRequest",
    "AskResponse",
    "ChainInput",
    "Chunk",
    "Document",
    "StandaloneBundle",
]
