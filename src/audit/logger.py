"""
Audit Logger

DESIGN DECISION: Every chat request leaves a trail of structured events.
This provides:
1. Traceability of which categories each question could see
2. The real provider error behind every generic 500
3. Correlation IDs to tie one request's events together

Events are written to the local structured log only; nothing is persisted.
"""

import threading
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from src.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Keeps the last emitted events in memory (bounded) so the flow
    can be inspected in tests and debug sessions.
    """

    def __init__(self, history_size: int = 100):
        self._logger = structlog.get_logger("audit")
        self._history: deque[AuditEvent] = deque(maxlen=history_size)
        # Sync routes log from the threadpool, async routes from the event loop
        self._history_lock = threading.Lock()

    @property
    def history(self) -> list[AuditEvent]:
        with self._history_lock:
            return list(self._history)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        with self._history_lock:
            self._history.append(event)

    def log_financial_data_served(self, categories: list[str]) -> None:
        self.log(AuditEventBuilder.financial_data_served(categories))

    def log_query_received(
        self,
        correlation_id: UUID,
        question_length: int,
        granted: list[str],
    ) -> None:
        self.log(AuditEventBuilder.query_received(
            correlation_id=correlation_id,
            question_length=question_length,
            granted=granted,
        ))

    def log_query_rejected(
        self,
        correlation_id: UUID,
        issues: list[dict],
    ) -> None:
        self.log(AuditEventBuilder.query_rejected(
            correlation_id=correlation_id,
            issues=issues,
        ))

    def log_prompt_rendered(
        self,
        correlation_id: UUID,
        visible_categories: list[str],
        summary: dict,
        prompt_length: int,
    ) -> None:
        self.log(AuditEventBuilder.prompt_rendered(
            correlation_id=correlation_id,
            visible_categories=visible_categories,
            summary=summary,
            prompt_length=prompt_length,
        ))

    def log_response_generated(
        self,
        correlation_id: UUID,
        provider: str,
        response_length: int,
    ) -> None:
        self.log(AuditEventBuilder.response_generated(
            correlation_id=correlation_id,
            provider=provider,
            response_length=response_length,
        ))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an error."""
        self.log(AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        ))

    def log_external_service_error(
        self,
        service: str,
        error_message: str,
        correlation_id: UUID,
    ) -> None:
        """Log external service error."""
        self.log(AuditEventBuilder.external_service_error(
            service=service,
            error_message=error_message,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of each request and pass it through
    all subsequent operations.
    """
    return uuid4()
