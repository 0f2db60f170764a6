"""
Chat Request Validation

DESIGN DECISION: Requests are checked before anything else happens.
An invalid request never reaches the data store or the LLM.

Validation NEVER silently fixes issues (no default question, no
default permissions). It reports them and the request is rejected.
"""

from collections.abc import Mapping
from typing import Any

from src.models.financial import ValidationIssue, ValidationResult


class InvalidRequestError(Exception):
    """A chat request is missing its question or its permission map."""

    def __init__(self, result: ValidationResult, message: str = "Query and permissions are required."):
        self.result = result
        super().__init__(message)


class ChatRequestValidator:
    """Checks that a chat request carries a question and a permission map."""

    def validate(self, query: Any, permissions: Any) -> ValidationResult:
        issues = []

        if query is None:
            issues.append(ValidationIssue(
                field="query",
                issue_type="missing",
                message="A question is required",
            ))
        elif not isinstance(query, str):
            issues.append(ValidationIssue(
                field="query",
                issue_type="invalid_type",
                message="The question must be text",
            ))
        elif not query.strip():
            issues.append(ValidationIssue(
                field="query",
                issue_type="empty",
                message="The question cannot be empty",
            ))

        # An empty map is allowed: it simply grants nothing
        if permissions is None:
            issues.append(ValidationIssue(
                field="permissions",
                issue_type="missing",
                message="A permission map is required",
            ))
        elif not isinstance(permissions, Mapping):
            issues.append(ValidationIssue(
                field="permissions",
                issue_type="invalid_type",
                message="Permissions must map category names to true/false",
            ))

        return ValidationResult(is_valid=not issues, issues=issues)

    def ensure_valid(self, query: Any, permissions: Any) -> None:
        """
        Raise instead of returning a result.

        Raises:
            InvalidRequestError: If the request is not valid
        """
        result = self.validate(query, permissions)
        if not result.is_valid:
            raise InvalidRequestError(result)
