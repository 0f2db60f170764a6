"""Tests for permission filtering and summary computation."""

import pytest

from src.models.financial import FinancialCategory
from src.queries import compute_summary, filter_by_permissions, is_permitted
from src.services.storage import SAMPLE_FINANCIAL_DATA, InMemoryFinancialStore


ALL_CATEGORIES = [c.value for c in FinancialCategory]


class TestFilterByPermissions:
    """The filtered view only ever contains explicitly granted categories."""

    @pytest.mark.parametrize("permissions", [
        {},
        None,
        {c: False for c in ALL_CATEGORIES},
        {"assets": False, "liabilities": False},
    ])
    def test_nothing_granted_gives_empty_view(self, record, permissions):
        """Test that granting nothing gives an empty view."""
        view = filter_by_permissions(record, permissions)
        assert view.is_empty
        assert compute_summary(view).to_wire() == {
            "totalAssets": 0,
            "totalLiabilities": 0,
            "calculatedNetWorth": 0,
        }

    def test_granted_categories_carry_full_payload(self, record):
        """Test that granted categories carry their full payload."""
        view = filter_by_permissions(record, {"transactions": True, "creditScore": True})
        assert view.categories == ["transactions", "creditScore"]
        assert view.data["transactions"] == SAMPLE_FINANCIAL_DATA["transactions"]
        assert view.data["creditScore"] == SAMPLE_FINANCIAL_DATA["creditScore"]

    def test_denied_categories_are_absent_not_zeroed(self, record):
        """Test that denied categories are absent, not zeroed."""
        view = filter_by_permissions(record, {"assets": True, "liabilities": False})
        assert "liabilities" not in view.data
        assert "assets" in view.data

    def test_unknown_keys_are_never_mirrored(self, record):
        """Test that unknown permission keys never reach the view."""
        view = filter_by_permissions(record, {"assets": True, "summary": True, "__class__": True, "secret": True})
        assert view.categories == ["assets"]

    @pytest.mark.parametrize("value", [1, "true", "yes", [True], {"x": 1}])
    def test_only_literal_true_grants(self, record, value):
        """Test that only a literal True grants access."""
        view = filter_by_permissions(record, {"assets": value})
        assert view.is_empty

    def test_order_follows_categories_not_request(self, record):
        """Test that view order follows categories, not the request."""
        view = filter_by_permissions(record, {"investments": True, "assets": True, "epfBalance": True})
        assert view.categories == ["assets", "epfBalance", "investments"]

    def test_all_granted_matches_full_record(self, record):
        """Test that granting everything gives the full record."""
        view = filter_by_permissions(record, {c: True for c in ALL_CATEGORIES})
        assert view.data == SAMPLE_FINANCIAL_DATA

    def test_view_is_detached_from_store(self, store):
        """Test that editing the view leaves the store untouched."""
        view = filter_by_permissions(store.get_all(), {"assets": True})
        view.data["assets"]["cash"] = 999
        assert store.get_all().assets["cash"] == 25000

    def test_store_record_is_detached_from_caller(self, store):
        """Test that edits to a returned record never reach the next reader."""
        record = store.get_all()
        record.assets["cash"] = 1
        record.liabilities.pop("homeLoan")
        fresh = store.get_all()
        assert fresh.assets["cash"] == 25000
        assert fresh.liabilities["homeLoan"] == 3200000
        assert fresh.to_wire() == SAMPLE_FINANCIAL_DATA

    def test_is_permitted(self):
        """Test is_permitted."""
        assert is_permitted({"assets": True}, FinancialCategory.ASSETS)
        assert not is_permitted({"assets": True}, FinancialCategory.LIABILITIES)
        assert not is_permitted({"assets": None}, FinancialCategory.ASSETS)


class TestComputeSummary:
    """Totals come from the filtered view only."""

    def test_sample_net_worth(self, record):
        """Test net worth of the sample record."""
        view = filter_by_permissions(record, {"assets": True, "liabilities": True})
        summary = compute_summary(view)
        assert summary.total_assets == 4955000
        assert summary.total_liabilities == 3745000
        assert summary.net_worth == 1210000

    def test_assets_only(self, record):
        """Test totals with only assets granted."""
        summary = compute_summary(filter_by_permissions(record, {"assets": True}))
        assert summary.total_assets == 4955000
        assert summary.total_liabilities == 0
        assert summary.net_worth == 4955000

    def test_liabilities_only_gives_negative_net_worth(self, record):
        """Test that liabilities alone give a negative net worth."""
        summary = compute_summary(filter_by_permissions(record, {"liabilities": True}))
        assert summary.total_assets == 0
        assert summary.net_worth == -3745000

    def test_other_categories_do_not_affect_totals(self, record):
        """Test that other categories do not affect totals."""
        summary = compute_summary(filter_by_permissions(record, {
            "investments": True,
            "epfBalance": True,
            "transactions": True,
        }))
        assert summary.to_wire() == {
            "totalAssets": 0,
            "totalLiabilities": 0,
            "calculatedNetWorth": 0,
        }

    def test_permuting_asset_entries_does_not_change_totals(self):
        """Test that asset order does not change totals."""
        forward = dict(SAMPLE_FINANCIAL_DATA)
        reverse = dict(SAMPLE_FINANCIAL_DATA)
        reverse["assets"] = dict(reversed(list(SAMPLE_FINANCIAL_DATA["assets"].items())))

        permissions = {"assets": True, "liabilities": True}
        a = compute_summary(filter_by_permissions(InMemoryFinancialStore(forward).get_all(), permissions))
        b = compute_summary(filter_by_permissions(InMemoryFinancialStore(reverse).get_all(), permissions))
        assert a == b

    def test_summary_is_idempotent(self, record):
        """Test that summarizing twice gives the same result."""
        view = filter_by_permissions(record, {"assets": True, "liabilities": True})
        assert compute_summary(view) == compute_summary(view)

    def test_net_worth_identity_on_custom_record(self):
        """Test the net worth identity on a custom record."""
        raw = dict(SAMPLE_FINANCIAL_DATA)
        raw["assets"] = {"cash": 100, "gold": 50.5}
        raw["liabilities"] = {"loan": 20}
        record = InMemoryFinancialStore(raw).get_all()
        summary = compute_summary(filter_by_permissions(record, {"assets": True, "liabilities": True}))
        assert summary.total_assets == pytest.approx(150.5)
        assert summary.net_worth == pytest.approx(summary.total_assets - summary.total_liabilities)
