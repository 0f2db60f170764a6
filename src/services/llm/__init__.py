"""LLM services package."""

from src.services.llm.interface import TextGenerator, UpstreamError
from src.services.llm.gemini_service import GeminiTextGenerator

__all__ = ["GeminiTextGenerator", "TextGenerator", "UpstreamError"]
