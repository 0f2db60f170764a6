"""
Text generation using Google Gemini.

DESIGN DECISION: One call per question, no retries.
A failed generation is surfaced immediately as UpstreamError; the caller
decides what the user sees. Every call is bounded by a deadline because
the SDK itself has none.
"""

import asyncio
from typing import Optional

import google.generativeai as genai
import structlog

from src.config import GeminiSettings, get_settings
from src.services.llm.interface import TextGenerator, UpstreamError


logger = structlog.get_logger(__name__)


class GeminiTextGenerator(TextGenerator):
    """
    TextGenerator backed by the Gemini API.

    The model is configured once; the instance is safe to share
    across concurrent requests.
    """

    provider = "gemini"

    def __init__(self, settings: Optional[GeminiSettings] = None):
        self._settings = settings or get_settings().gemini
        self._configure_genai()

    def _configure_genai(self):
        """Configure Google Generative AI."""
        genai.configure(api_key=self._settings.api_key)
        self._model = genai.GenerativeModel(
            model_name=self._settings.model_name,
            generation_config={
                "temperature": self._settings.temperature,
                "max_output_tokens": self._settings.max_tokens,
            }
        )

    @property
    def name(self) -> str:
        return f"{self.provider}:{self._settings.model_name}"

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._model.generate_content_async(prompt),
                timeout=self._settings.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise UpstreamError(
                f"Gemini did not respond within {self._settings.timeout_seconds}s",
                provider=self.provider,
            ) from e
        except Exception as e:
            raise UpstreamError(
                f"Gemini request failed: {e}",
                provider=self.provider,
            ) from e

        # .text raises ValueError when the candidate was blocked or empty
        try:
            text = response.text
        except (ValueError, AttributeError, IndexError) as e:
            raise UpstreamError(
                f"Gemini returned no usable text: {e}",
                provider=self.provider,
            ) from e

        if not isinstance(text, str):
            raise UpstreamError(
                "Gemini returned a non-text response",
                provider=self.provider,
            )

        logger.debug(
            "gemini_generation_completed",
            model=self._settings.model_name,
            prompt_chars=len(prompt),
            response_chars=len(text),
        )
        return text
