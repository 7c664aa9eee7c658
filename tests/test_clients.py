"""OpenAI chat/embedding wrappers, Qdrant search and the retriever."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from app.config import settings
from app.llm.openai_client import OpenAIChatClient
from app.models.document import Document
from app.retrieval.embedder import OpenAIEmbedder
from app.retrieval.retriever import VectorStoreRetriever
from app.retrieval.vector_store import VectorStore


def _completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content)) for content in contents]
    )


@patch("app.llm.openai_client.OpenAI")
def test_chat_client_sends_single_user_message(openai_cls: MagicMock) -> None:
    create = openai_cls.return_value.chat.completions.create
    create.return_value = _completion("  What is the refund policy?\n")

    client = OpenAIChatClient(api_key="sk-test", base_url="https://llm.example/v1", model="m", temperature=0)

    assert client.complete("prompt text") == "  What is the refund policy?\n"
    openai_cls.assert_called_once_with(api_key="sk-test", base_url="https://llm.example/v1")
    create.assert_called_once_with(
        model="m",
        temperature=0,
        messages=[{"role": "user", "content": "prompt text"}],
    )


@patch("app.llm.openai_client.OpenAI")
def test_chat_client_empty_completion(openai_cls: MagicMock) -> None:
    openai_cls.return_value.chat.completions.create.return_value = _completion(None)

    assert OpenAIChatClient(api_key="sk-test").complete("p") == ""


@patch("app.llm.openai_client.OpenAI")
def test_chat_client_returns_first_choice_only(openai_cls: MagicMock) -> None:
    openai_cls.return_value.chat.completions.create.return_value = _completion("first", "second")

    assert OpenAIChatClient(api_key="sk-test").complete("p") == "first"


@patch("app.llm.openai_client.OpenAI")
def test_chat_client_no_choices(openai_cls: MagicMock) -> None:
    openai_cls.return_value.chat.completions.create.return_value = SimpleNamespace(choices=[])

    assert OpenAIChatClient(api_key="sk-test").complete("p") == ""


@patch("app.retrieval.embedder.OpenAI")
def test_embedder_ignores_chat_base_url(openai_cls: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "openai_base_url", "https://llm-proxy.example/v1")
    monkeypatch.setattr(settings, "openai_embedding_base_url", "https://api.openai.com/v1")

    OpenAIEmbedder(api_key="sk-test")

    openai_cls.assert_called_once_with(api_key="sk-test", base_url="https://api.openai.com/v1")


@patch("app.retrieval.embedder.OpenAI")
def test_embedder_explicit_base_url(openai_cls: MagicMock) -> None:
    OpenAIEmbedder(api_key="sk-test", base_url="https://embeddings.example/v1")

    openai_cls.assert_called_once_with(api_key="sk-test", base_url="https://embeddings.example/v1")


def test_chat_client_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "openai_api_key", None)

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        OpenAIChatClient()


@patch("app.retrieval.embedder.OpenAI")
def test_embedder_orders_vectors_by_index(openai_cls: MagicMock) -> None:
    create = openai_cls.return_value.embeddings.create
    create.return_value = SimpleNamespace(
        data=[
            SimpleNamespace(index=1, embedding=[0.0, 1.0]),
            SimpleNamespace(index=0, embedding=[1.0, 0.0]),
        ]
    )
    embedder = OpenAIEmbedder(api_key="sk-test", model="embed-model")

    assert embedder.embed_documents(["a", "b"]) == [[1.0, 0.0], [0.0, 1.0]]
    create.assert_called_once_with(model="embed-model", input=["a", "b"])


@patch("app.retrieval.embedder.OpenAI")
def test_embedder_skips_empty_batches(openai_cls: MagicMock) -> None:
    assert OpenAIEmbedder(api_key="sk-test").embed_documents([]) == []
    openai_cls.return_value.embeddings.create.assert_not_called()


def test_vector_store_maps_points_to_documents() -> None:
    qdrant = MagicMock()
    qdrant.query_points.return_value = SimpleNamespace(
        points=[
            SimpleNamespace(payload={"content": "first", "metadata": {"source": "faq.txt"}}, score=0.91),
            SimpleNamespace(payload={"content": "second"}, score=0.72),
            SimpleNamespace(payload=None, score=None),
        ]
    )
    store = VectorStore(client=qdrant, collection="documents")

    documents = store.search([0.1, 0.2], top_k=3)

    assert [doc.page_content for doc in documents] == ["first", "second", ""]
    assert documents[0].metadata == {"source": "faq.txt", "score": 0.91}
    assert documents[2].metadata == {}
    qdrant.query_points.assert_called_once_with(
        collection_name="documents",
        query=[0.1, 0.2],
        limit=3,
        with_payload=True,
    )


def test_vector_store_only_uses_query_points() -> None:
    qdrant = MagicMock(spec=["query_points"])
    qdrant.query_points.return_value = SimpleNamespace(
        points=[SimpleNamespace(payload={"content": "only hit"}, score=0.5)]
    )

    documents = VectorStore(client=qdrant, collection="documents").search([0.3], top_k=1)

    assert [doc.page_content for doc in documents] == ["only hit"]
    qdrant.query_points.assert_called_once()


def test_retriever_embeds_then_searches() -> None:
    embedder = MagicMock()
    embedder.embed_query.return_value = [0.5, 0.5]
    store = MagicMock()
    store.search.return_value = [Document(page_content="hit")]

    retriever = VectorStoreRetriever(embedder=embedder, vector_store=store, top_k=2)

    assert retriever.retrieve("cancel subscription") == [Document(page_content="hit")]
    embedder.embed_query.assert_called_once_with("cancel subscription")
    store.search.assert_called_once_with([0.5, 0.5], top_k=2)


def test_retriever_defaults_to_configured_top_k() -> None:
    retriever = VectorStoreRetriever(embedder=MagicMock(), vector_store=MagicMock())

    assert retriever.top_k == settings.retriever_top_k
