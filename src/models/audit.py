"""
Audit Models for the Finance Chat Backend

Every significant action in the system is logged for audit purposes.
This provides:
1. A record of which categories each question was allowed to see
2. Debugging information when the LLM call fails
3. Ability to trace one request end to end via its correlation ID

DESIGN DECISION: Audit events never carry the full prompt or the
model's answer, only their sizes and the categories involved.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Data access
    FINANCIAL_DATA_SERVED = "financial_data_served"

    # Chat pipeline
    QUERY_RECEIVED = "query_received"
    QUERY_REJECTED = "query_rejected"
    PROMPT_RENDERED = "prompt_rendered"
    RESPONSE_GENERATED = "response_generated"

    # System events
    SYSTEM_ERROR = "system_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events in one chat request)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.query_received(correlation_id, ["assets"])
        event = AuditEventBuilder.upstream_error("gemini", str(e), correlation_id)
    """

    @staticmethod
    def financial_data_served(categories: list[str]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FINANCIAL_DATA_SERVED,
            description="Full financial record served",
            details={
                "categories": categories,
            },
        )

    @staticmethod
    def query_received(
        correlation_id: UUID,
        question_length: int,
        granted: list[str],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_RECEIVED,
            correlation_id=correlation_id,
            description=f"Chat query received with {len(granted)} granted categories",
            details={
                "question_length": question_length,
                "granted_categories": granted,
            },
        )

    @staticmethod
    def query_rejected(
        correlation_id: UUID,
        issues: list[dict],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Chat query rejected with {len(issues)} issues",
            details={
                "issues": issues,
            },
        )

    @staticmethod
    def prompt_rendered(
        correlation_id: UUID,
        visible_categories: list[str],
        summary: dict,
        prompt_length: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PROMPT_RENDERED,
            correlation_id=correlation_id,
            description=f"Prompt rendered over {len(visible_categories)} categories",
            details={
                "visible_categories": visible_categories,
                "summary": summary,
                "prompt_length": prompt_length,
            },
        )

    @staticmethod
    def response_generated(
        correlation_id: UUID,
        provider: str,
        response_length: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RESPONSE_GENERATED,
            correlation_id=correlation_id,
            description=f"Response generated by {provider}",
            details={
                "provider": provider,
                "response_length": response_length,
            },
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )

    @staticmethod
    def external_service_error(
        service: str,
        error_message: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXTERNAL_SERVICE_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"External service error: {service}",
            error_message=error_message,
            details={
                "service": service,
            },
            correlation_id=correlation_id,
        )
