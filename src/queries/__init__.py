"""Permission filtering and summary package."""

from src.queries.executor import compute_summary, filter_by_permissions, is_permitted

__all__ = ["compute_summary", "filter_by_permissions", "is_permitted"]
