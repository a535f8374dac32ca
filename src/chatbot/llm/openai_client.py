from __future__ import annotations

import os
from typing import Any, Optional

from openai import AsyncOpenAI

from chatbot import logger as logger_mod

from .base import LLMClient, LLMConfig
from .types import LLMMessage

log = logger_mod.get_logger()


class OpenAILLM(LLMClient):
    """OpenAI chat-completions wrapper.

    Without an injected client, a fresh SDK client is opened for each request
    and closed when it returns, so a missing API key surfaces at call time.
    SDK retries are disabled: one call means one HTTP request.
    """

    def __init__(self, config: LLMConfig, client: Any = None):
        self._cfg = config
        self._client = client

    async def _create(self, client: Any, messages: list[LLMMessage]) -> Optional[str]:
        resp = await client.chat.completions.create(
            model=self._cfg.model,
            messages=[{"role": m.role, "content": m.content} for m in messages],
        )
        if not resp.choices:
            return None
        return resp.choices[0].message.content

    async def complete(self, *, messages: list[LLMMessage]) -> Optional[str]:
        try:
            if self._client is not None:
                # Injected clients belong to the caller; leave them open.
                return await self._create(self._client, messages)
            # AsyncOpenAI raises OpenAIError here when the key is unset
            async with AsyncOpenAI(
                api_key=os.getenv(self._cfg.api_key_env), max_retries=0
            ) as client:
                return await self._create(client, messages)
        except Exception as e:
            log.error("Error calling OpenAI API: %s", e)
            raise
