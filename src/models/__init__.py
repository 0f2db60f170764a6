"""
Data Models Package

This package contains all Pydantic models used in the Finance Chat Backend.
All data flowing through the system must conform to these schemas.
"""

from src.models.financial import (
    Amount,
    CreditScore,
    EpfBalance,
    FilteredView,
    FinancialCategory,
    FinancialRecord,
    FinancialSummary,
    Transaction,
    TransactionType,
    ValidationIssue,
    ValidationResult,
)
from src.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Financial models
    "Amount",
    "CreditScore",
    "EpfBalance",
    "FilteredView",
    "FinancialCategory",
    "FinancialRecord",
    "FinancialSummary",
    "Transaction",
    "TransactionType",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
