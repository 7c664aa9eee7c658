"""Rewrite -> retrieve -> answer pipeline."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Protocol, Sequence

from app.llm.answer_generator import AnswerGenerator
from app.llm.conversation import format_conv_history
from app.llm.openai_client import OpenAIChatClient
from app.llm.question_rewriter import CompletionClient, QuestionRewriter
from app.models.chain import ChainInput, StandaloneBundle
from app.models.document import Document
from app.retrieval.documents import combine_documents
from app.retrieval.retriever import VectorStoreRetriever

logger = logging.getLogger(__name__)


class Retriever(Protocol):
    def retrieve(self, query: str) -> List[Document]: ...


class SupportChain:
    """Answers one support question.

    Stages run strictly in order and any failure propagates to the caller:
    the standalone question feeds the retriever, while the original question
    and transcript go straight to the answer stage.
    """

    def __init__(
        self,
        llm: Optional[CompletionClient] = None,
        retriever: Optional[Retriever] = None,
    ) -> None:
        self.llm = llm or OpenAIChatClient()
        self.retriever = retriever or VectorStoreRetriever()
        self.rewriter = QuestionRewriter(self.llm)
        self.answer_generator = AnswerGenerator(self.llm)

    def rewrite(self, chain_input: ChainInput) -> StandaloneBundle:
        standalone_question = self.rewriter.rewrite(chain_input.question, chain_input.conv_history)
        return StandaloneBundle(standalone_question=standalone_question, original_input=chain_input)

    def retrieve_context(self, bundle: StandaloneBundle) -> str:
        documents = self.retriever.retrieve(bundle.standalone_question)
        logger.info("Retrieved %s documents", len(documents))
        return combine_documents(documents)

    def invoke(self, question: str, conv_history: Sequence[str]) -> str:
        chain_input = ChainInput(question=question, conv_history=format_conv_history(conv_history))
        bundle = self.rewrite(chain_input)
        context = self.retrieve_context(bundle)
        return self.answer_generator.generate(
            context=context,
            conv_history=bundle.original_input.conv_history,
            question=bundle.original_input.question,
        )


@lru_cache(maxsize=1)
def get_support_chain() -> SupportChain:
    """Build the production chain once per process."""
    return SupportChain()
