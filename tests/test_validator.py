"""Tests for chat request validation."""

import pytest

from src.validation import ChatRequestValidator, InvalidRequestError


@pytest.fixture
def validator():
    return ChatRequestValidator()


def test_valid_request(validator):
    """Test a valid request."""
    result = validator.validate("What is my net worth?", {"assets": True})
    assert result.is_valid
    assert result.issues == []


def test_both_missing(validator):
    """Test that both fields missing gives two issues."""
    result = validator.validate(None, None)
    assert not result.is_valid
    assert result.fields_with_issues == ["query", "permissions"]


@pytest.mark.parametrize("query,issue_type", [
    (None, "missing"),
    ("", "empty"),
    ("  \n ", "empty"),
    (123, "invalid_type"),
])
def test_query_issues(validator, query, issue_type):
    """Test query issue types."""
    result = validator.validate(query, {})
    assert [i.issue_type for i in result.issues] == [issue_type]


def test_permissions_must_be_mapping(validator):
    """Test that permissions must be a mapping."""
    result = validator.validate("q", ["assets"])
    assert result.issues[0].field == "permissions"
    assert result.issues[0].issue_type == "invalid_type"


def test_empty_permissions_allowed(validator):
    """Test that an empty permissions map is allowed."""
    assert validator.validate("q", {}).is_valid


def test_ensure_valid_raises_with_result(validator):
    """Test that ensure_valid raises with the result attached."""
    with pytest.raises(InvalidRequestError) as exc_info:
        validator.ensure_valid("", None)
    assert str(exc_info.value) == "Query and permissions are required."
    assert len(exc_info.value.result.issues) == 2
