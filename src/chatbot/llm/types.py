from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chatbot import config

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str


def build_conversation(
    prompt: str, system_prompt: str = config.SYSTEM_PROMPT
) -> list[LLMMessage]:
    """System instruction followed by the user's prompt, built fresh per call."""

    return [
        LLMMessage(role="system", content=system_prompt),
        LLMMessage(role="user", content=prompt),
    ]
