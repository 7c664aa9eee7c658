"""LLM integration helpers."""

from .answer_generator import AnswerGenerator
from .chain import SupportChain, get_support_chain
from .conversation import format_conv_history
from .openai_client import OpenAIChatClient
from .question_rewriter import QuestionRewriter

__all__ = [
    "AnswerGenerator",
    "OpenAIChatClient",
    "QuestionRewriter",
    "SupportChain",
    "format_conv_history",
    "get_support_chain",
]
