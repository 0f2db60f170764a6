"""
Text Generation Interface

DESIGN DECISION: The LLM is injected as a capability, not imported directly.
The chat flow only needs "prompt in, text out", so tests can swap in a
fake generator and assert the exact prompt without touching the network.
"""

from abc import ABC, abstractmethod


class UpstreamError(Exception):
    """
    The generation provider failed.

    Covers network errors, quota errors, blocked or malformed responses
    and timeouts. The original provider exception is chained as __cause__
    for logging; its message is never shown to API callers.
    """

    def __init__(self, message: str, provider: str = "unknown"):
        self.provider = provider
        super().__init__(message)


class TextGenerator(ABC):
    """Anything that turns a fully rendered prompt into text."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Single call, no streaming, no retries.

        Raises:
            UpstreamError: If generation fails for any reason
        """
        pass
