"""Validation package."""

from src.validation.validator import ChatRequestValidator, InvalidRequestError

__all__ = ["ChatRequestValidator", "InvalidRequestError"]
