from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .types import LLMMessage


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    api_key_env: str


class LLMClient(Protocol):
    """Single-shot "messages -> reply text" interface."""

    async def complete(self, *, messages: list[LLMMessage]) -> Optional[str]:
        raise NotImplementedError
