"""Thin wrapper around the OpenAI Chat Completions API."""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from app.config import settings


class OpenAIChatClient:
    """Sends a single prompt to an OpenAI-compatible chat model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        api_key = api_key or settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is not configured in the environment.")
        self.model = model or settings.openai_model_chat
        self.temperature = settings.openai_temperature if temperature is None else temperature
        self.client = OpenAI(api_key=api_key, base_url=base_url or settings.openai_base_url)

    def complete(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response) -> str:
        """Return the first choice's text untouched; no choices or no content gives ''."""
        if not response.choices:
            return ""
        message = getattr(response.choices[0], "message", None)
        return getattr(message, "content", None) or ""
