from __future__ import annotations

from typing import Optional

from .llm import build_conversation, build_llm
from .llm.base import LLMClient


async def get_chatbot_response(
    user_input: str, llm: Optional[LLMClient] = None
) -> Optional[str]:
    """Send ``user_input`` after the fixed system instruction and return the reply.

    Returns the first choice's content as-is, or None when the provider gives
    back no choices. Upstream failures are logged by the client and re-raised
    unchanged; nothing is retried.
    """

    client = llm if llm is not None else build_llm(provider="openai")
    return await client.complete(messages=build_conversation(user_input))
