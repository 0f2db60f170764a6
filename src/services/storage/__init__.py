"""
Storage Services Package

Provides the abstract data source interface and the in-memory implementation
that serves the sample record. Designed to be swappable.
"""

from src.services.storage.interface import (
    FinancialDataSource,
    StorageError,
)
from src.services.storage.in_memory import (
    SAMPLE_FINANCIAL_DATA,
    InMemoryFinancialStore,
)

__all__ = [
    # Interfaces
    "FinancialDataSource",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryFinancialStore",
    "SAMPLE_FINANCIAL_DATA",
]
