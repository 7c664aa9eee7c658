"""Shared fixtures: mocked collaborators and an API client wired to them."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api import main
from app.llm.chain import SupportChain
from app.models.document import Document


@pytest.fixture
def llm() -> MagicMock:
    """Chat model that answers the rewrite call, then the answer call."""
    mock = MagicMock()
    mock.complete.side_effect = ["standalone question X", "You can cancel any time."]
    return mock


@pytest.fixture
def retriever() -> MagicMock:
    mock = MagicMock()
    mock.retrieve.return_value = [
        Document(page_content="Scrimba Pro can be cancelled from the billing page."),
        Document(page_content="Refunds are available within 14 days.", metadata={"source": "faq.txt"}),
    ]
    return mock


@pytest.fixture
def chain(llm: MagicMock, retriever: MagicMock) -> SupportChain:
    return SupportChain(llm=llm, retriever=retriever)


@pytest.fixture
def client(chain: SupportChain, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(main, "get_support_chain", lambda: chain)
    return TestClient(main.app)
