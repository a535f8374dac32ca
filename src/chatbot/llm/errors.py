class LLMError(RuntimeError):
    """Base error for chatbot.llm."""
