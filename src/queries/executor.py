"""
Permission Filter and Summary Engine

DESIGN DECISION: Filtering and arithmetic are DETERMINISTIC and happen here.
The LLM never sees the full record and never computes totals.
It receives the filtered view plus a summary computed from that same view,
and is told to quote the summary rather than add things up itself.

This is the boundary that keeps the model's numbers identical to ours.
"""

from collections.abc import Mapping
from typing import Any, Optional

from src.models.financial import (
    Amount,
    FilteredView,
    FinancialCategory,
    FinancialRecord,
    FinancialSummary,
)


def is_permitted(permissions: Mapping[str, Any], category: FinancialCategory) -> bool:
    """A category is visible only when explicitly granted with True."""
    return permissions.get(category.value) is True


def filter_by_permissions(
    record: FinancialRecord,
    permissions: Optional[Mapping[str, Any]],
) -> FilteredView:
    """
    Build the view of the record a request is allowed to see.

    Walks the known categories in a fixed order. Categories that are
    absent, False or not strictly True are left out entirely (not zeroed).
    Keys in `permissions` that are not known categories are ignored.
    """
    if not permissions:
        return FilteredView()

    wire = record.to_wire()
    data = {
        category.value: wire[category.value]
        for category in FinancialCategory
        if is_permitted(permissions, category)
    }
    return FilteredView(data=data)


def _total(values: list[Amount]) -> Amount:
    # sum() of an empty list is 0, which is the contract for hidden categories
    return sum(values)


def compute_summary(view: FilteredView) -> FinancialSummary:
    """
    Compute totals from the filtered view only.

    A category missing from the view contributes 0.
    """
    total_assets = _total(view.amounts(FinancialCategory.ASSETS))
    total_liabilities = _total(view.amounts(FinancialCategory.LIABILITIES))
    return FinancialSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
    )
