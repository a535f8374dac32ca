import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

# OpenAI configuration
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini-2024-07-18")

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

# --- CONFIG --- chat
SYSTEM_PROMPT = "You are a helpful assistant."
EXAMPLE_PROMPT = "Write a haiku about recursion in programming."
