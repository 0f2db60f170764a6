"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for the financial data source.
This allows us to:
1. Swap the bundled sample record for a real account aggregator later
2. Use a custom record in tests
3. Keep the query pipeline decoupled from where the data lives

The interface is intentionally tiny - the record is read-only.
"""

from abc import ABC, abstractmethod

from src.models.financial import FinancialRecord


class StorageError(Exception):
    """Base exception for storage errors."""
    pass


class FinancialDataSource(ABC):
    """
    Abstract interface for reading the financial record.

    Implementations MUST return an equal record on every call
    for the lifetime of the process.
    """

    @abstractmethod
    def get_all(self) -> FinancialRecord:
        """
        Return the full, unfiltered financial record.

        Never raises and has no side effects.
        """
        pass
