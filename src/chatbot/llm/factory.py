from __future__ import annotations

from chatbot import config

from .base import LLMClient, LLMConfig
from .errors import LLMError
from .openai_client import OpenAILLM


def build_llm(
    *, provider: str = "openai", model: str = config.OPENAI_MODEL
) -> LLMClient:
    """Factory for provider clients.

    Providers:
    - openai
    """

    p = provider.lower().strip()
    if p == "openai":
        return OpenAILLM(
            LLMConfig(
                provider="openai", model=model, api_key_env=config.OPENAI_API_KEY_ENV
            )
        )

    raise LLMError(f"Unknown LLM provider: {provider}")
