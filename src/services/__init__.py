"""Services package."""

from src.services.llm import (
    GeminiTextGenerator,
    TextGenerator,
    UpstreamError,
)
from src.services.storage import (
    SAMPLE_FINANCIAL_DATA,
    FinancialDataSource,
    InMemoryFinancialStore,
    StorageError,
)

__all__ = [
    # LLM services
    "GeminiTextGenerator",
    "TextGenerator",
    "UpstreamError",
    # Storage services
    "FinancialDataSource",
    "InMemoryFinancialStore",
    "SAMPLE_FINANCIAL_DATA",
    "StorageError",
]
