"""
Pydantic models for API request/response validation.
Auto-generates OpenAPI documentation.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """
    Body of POST /api/chat.

    Both fields are optional at the schema level so that a missing field
    is reported by the chat flow as a 400, not by FastAPI as a 422.
    """
    model_config = ConfigDict(extra="ignore")

    query: Optional[Any] = Field(
        default=None,
        description="The user's question",
        examples=["What is my net worth?"],
    )
    permissions: Optional[Any] = Field(
        default=None,
        description="Category name -> true/false. Only true grants access.",
        examples=[{"assets": True, "liabilities": True}],
    )


class ChatResponse(BaseModel):
    """Successful chat answer: the model's text, verbatim."""
    response: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""
    error: str


class HealthResponse(BaseModel):
    """Service status."""
    service: str
    version: str
    status: str
    provider: str
    provider_configured: bool
