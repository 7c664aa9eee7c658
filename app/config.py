"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    openai_api_key: Optional[str] = Field(
        default=None, description="Secret key for the OpenAI-compatible APIs."
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_chat: str = "gpt-4o-mini"
    openai_embedding_base_url: str = "https://api.openai.com/v1"
    openai_model_embedding: str = "text-embedding-ada-002"
    openai_temperature: float = 0.7

    qdrant_url: str = "http://localhost:6333"
    qdrant_api_key: Optional[str] = None
    qdrant_collection: str = "documents"
    embedding_dim: int = 1536

    retriever_top_k: int = 4

    product_name: str = "Scrimba"
    support_email: str = "help@scrimba.com"

    knowledge_base_path: str = "data/knowledge_base"
    chunk_max_tokens: int = 120
    chunk_overlap_tokens: int = 12

    log_level: str = "INFO"
    allow_tiktoken_fallback: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def knowledge_base_path_obj(self) -> Path:
        return Path(self.knowledge_base_path)


settings = Settings()
