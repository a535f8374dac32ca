"""Minimal chat-completion example.

Sends one prompt, with a fixed system instruction, to a hosted LLM and returns
the first reply:

    import asyncio
    from chatbot import get_chatbot_response

    text = asyncio.run(get_chatbot_response("Say hello"))
"""

from .chat import get_chatbot_response

__all__ = ["get_chatbot_response"]
