"""LLM provider abstractions.

Provider SDKs stay isolated behind :class:`~chatbot.llm.base.LLMClient`; callers
hand over a list of :class:`LLMMessage` and get back the reply text (or None).
"""

from .factory import build_llm
from .types import LLMMessage, build_conversation

__all__ = ["LLMMessage", "build_conversation", "build_llm"]
