"""
In-memory financial data source.

Holds the sample household record the demo frontend is built around.
The record is validated into frozen models once, at construction time.
"""

from typing import Any, Optional

from src.models.financial import FinancialRecord
from src.services.storage.interface import FinancialDataSource, StorageError


SAMPLE_FINANCIAL_DATA: dict[str, Any] = {
    "assets": {
        "cash": 25000,
        "bankBalance": 350000,
        "property": 4500000,
        "otherAssets": 80000,
    },
    "liabilities": {
        "homeLoan": 3200000,
        "carLoan": 450000,
        "creditCardDebt": 75000,
        "otherDebts": 20000,
    },
    "transactions": [
        {"id": 1, "date": "2025-09-10", "amount": -12000, "category": "Groceries", "type": "expense"},
        {"id": 2, "date": "2025-09-08", "amount": -4500, "category": "Utilities", "type": "expense"},
        {"id": 3, "date": "2025-09-05", "amount": 85000, "category": "Salary", "type": "income"},
        {"id": 4, "date": "2025-08-25", "amount": -20000, "category": "Rent", "type": "expense"},
        {"id": 5, "date": "2025-08-20", "amount": -3500, "category": "Dining Out", "type": "expense"},
        {"id": 6, "date": "2025-08-05", "amount": 85000, "category": "Salary", "type": "income"},
    ],
    "epfBalance": {
        "currentBalance": 650000,
        "monthlyContribution": 5800,
        "employerMatch": 5800,
    },
    "creditScore": {
        "score": 780,
        "rating": "Excellent",
    },
    "investments": {
        "stocks": 450000,
        "mutualFunds": 220000,
        "bonds": 150000,
        "others": 50000,
    },
}


class InMemoryFinancialStore(FinancialDataSource):
    """
    Serves a single financial record held in process memory.

    Safe for any number of concurrent readers: every call returns a deep
    copy of the record, so nothing a caller does can reach the next request.
    """

    def __init__(self, raw_record: Optional[dict[str, Any]] = None):
        """
        Args:
            raw_record: Record in wire format. Defaults to SAMPLE_FINANCIAL_DATA.

        Raises:
            StorageError: If the record does not match the schema.
        """
        source = SAMPLE_FINANCIAL_DATA if raw_record is None else raw_record
        try:
            self._record = FinancialRecord.model_validate(source)
        except ValueError as e:
            raise StorageError(f"Invalid financial record: {e}") from e

    def get_all(self) -> FinancialRecord:
        # Frozen models still hold plain dicts; callers get their own copy
        return self._record.model_copy(deep=True)
