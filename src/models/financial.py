"""
Core Data Models for the Finance Chat Backend

These models define the strict schemas for the financial record
and for everything derived from it per request.

DESIGN DECISION: The financial record is frozen.
It is built once at process start and shared by every request,
so no handler can ever mutate what another handler reads.
"""

from datetime import date
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Amounts stay integers when the source data is integral so that
# serialized totals read 4955000, not 4955000.0
Amount = Union[int, float]


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class FinancialCategory(str, Enum):
    """
    Top-level categories of the financial record.

    DESIGN DECISION: This is the ONLY list consulted when filtering by
    permissions. Caller-supplied keys that are not listed here are ignored,
    so an unlisted field can never leak into a prompt.
    """
    ASSETS = "assets"
    LIABILITIES = "liabilities"
    TRANSACTIONS = "transactions"
    EPF_BALANCE = "epfBalance"
    CREDIT_SCORE = "creditScore"
    INVESTMENTS = "investments"


class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


# =============================================================================
# FINANCIAL RECORD
# =============================================================================

class Transaction(BaseModel):
    """A single ledger entry. Expenses carry negative amounts."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: int
    date: date
    amount: Amount
    category: str = Field(..., min_length=1, max_length=100)
    type: TransactionType

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, v: Amount) -> Amount:
        if v == 0:
            raise ValueError("Transaction amount cannot be zero")
        return v


class EpfBalance(BaseModel):
    """Employees' Provident Fund balance and monthly contributions."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_balance: Amount = Field(..., alias="currentBalance")
    monthly_contribution: Amount = Field(..., alias="monthlyContribution")
    employer_match: Amount = Field(..., alias="employerMatch")

    @field_validator("current_balance", "monthly_contribution", "employer_match")
    @classmethod
    def not_negative(cls, v: Amount) -> Amount:
        if v < 0:
            raise ValueError("EPF figures cannot be negative")
        return v


class CreditScore(BaseModel):
    """Bureau credit score with its rating label."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(..., ge=300, le=900)
    rating: str = Field(..., min_length=1, max_length=50)


class FinancialRecord(BaseModel):
    """
    The complete financial record served by this backend.

    Wire format uses the camelCase category names of FinancialCategory.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    assets: dict[str, Amount] = Field(default_factory=dict)
    liabilities: dict[str, Amount] = Field(default_factory=dict)
    transactions: tuple[Transaction, ...] = Field(default_factory=tuple)
    epf_balance: EpfBalance = Field(..., alias="epfBalance")
    credit_score: CreditScore = Field(..., alias="creditScore")
    investments: dict[str, Amount] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        """
        Serialize to a JSON-ready dict keyed by category name.

        Always returns a fresh copy.
        """
        return self.model_dump(mode="json", by_alias=True)

    def category_payload(self, category: FinancialCategory) -> Any:
        """JSON-ready payload of a single category (fresh copy)."""
        return self.to_wire()[category.value]


# =============================================================================
# PER-REQUEST MODELS
# =============================================================================

class FinancialSummary(BaseModel):
    """
    Totals derived from the permission-filtered view.

    Computed exactly once per request and embedded verbatim in the prompt.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_assets: Amount = Field(default=0, alias="totalAssets")
    total_liabilities: Amount = Field(default=0, alias="totalLiabilities")
    net_worth: Amount = Field(default=0, alias="calculatedNetWorth")

    def to_wire(self) -> dict[str, Amount]:
        return self.model_dump(by_alias=True)


class FilteredView(BaseModel):
    """
    The subset of the financial record a request is allowed to see.

    `data` holds only permitted categories, in FinancialCategory order.
    """
    model_config = ConfigDict(frozen=True)

    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def categories(self) -> list[str]:
        return list(self.data.keys())

    @property
    def is_empty(self) -> bool:
        return not self.data

    def amounts(self, category: FinancialCategory) -> list[Amount]:
        """Values of a mapping category, or [] when it is not visible."""
        payload = self.data.get(category.value)
        if not payload:
            return []
        return list(payload.values())

    def with_summary(self, summary: FinancialSummary) -> dict[str, Any]:
        """The exact structure serialized into the prompt."""
        return {**self.data, "summary": summary.to_wire()}


class ValidationIssue(BaseModel):
    """A single problem found in an incoming chat request."""

    field: str
    issue_type: str = Field(description="e.g. missing, empty, invalid_type")
    message: str


class ValidationResult(BaseModel):
    """Outcome of validating a chat request."""

    is_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def fields_with_issues(self) -> list[str]:
        return [issue.field for issue in self.issues]
