"""
Main Orchestrator for the Finance Chat Backend

This module ties together all the components and defines the
end-to-end chat flow:

    validate → filter → summarize → render → generate

DESIGN DECISION: The orchestrator enforces the boundaries:
- No request reaches the LLM without a question and a permission map
- The LLM only ever sees the permission-filtered view
- Totals are computed once, here, and handed to the LLM verbatim
- Every step is audited

This is the "glue" that ensures the system works correctly
even when the LLM behaves unexpectedly.
"""

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from src.agents import FinanceChatAgent
from src.audit import AuditLogger, create_correlation_id
from src.config import AppSettings
from src.models.financial import FilteredView, FinancialSummary
from src.queries import compute_summary, filter_by_permissions
from src.services.llm import GeminiTextGenerator, TextGenerator, UpstreamError
from src.services.storage import FinancialDataSource, InMemoryFinancialStore
from src.validation import ChatRequestValidator, InvalidRequestError


@dataclass(frozen=True)
class ChatAnswer:
    """Everything produced while answering one question."""

    correlation_id: UUID
    response: str
    view: FilteredView
    summary: FinancialSummary
    prompt: str


class ChatFlow:
    """
    Answers one question against the permitted slice of the record.

    Flow:
    1. Validate → question and permission map must be present
    2. Filter → keep only granted categories
    3. Summarize → totals from the filtered view only
    4. Render → deterministic prompt embedding the summary
    5. Generate → single provider call
    6. Return → provider text verbatim

    Stateless: one instance serves every request.
    """

    def __init__(
        self,
        store: FinancialDataSource,
        agent: FinanceChatAgent,
        validator: Optional[ChatRequestValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._agent = agent
        self._validator = validator or ChatRequestValidator()
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def generator(self) -> TextGenerator:
        return self._agent.generator

    def prepare(
        self,
        question: Any,
        permissions: Any,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[FilteredView, FinancialSummary, str]:
        """
        Run steps 1-4 without calling the provider.

        Returns:
            (filtered_view, summary, prompt)

        Raises:
            InvalidRequestError: If question or permissions are missing
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            self._validator.ensure_valid(question, permissions)
        except InvalidRequestError as e:
            self._audit_logger.log_query_rejected(
                correlation_id=correlation_id,
                issues=[issue.model_dump() for issue in e.result.issues],
            )
            raise

        view = filter_by_permissions(self._store.get_all(), permissions)
        self._audit_logger.log_query_received(
            correlation_id=correlation_id,
            question_length=len(question),
            granted=view.categories,
        )

        summary = compute_summary(view)
        prompt = self._agent.build_prompt(view, summary, question)
        self._audit_logger.log_prompt_rendered(
            correlation_id=correlation_id,
            visible_categories=view.categories,
            summary=summary.to_wire(),
            prompt_length=len(prompt),
        )
        return view, summary, prompt

    async def answer(
        self,
        question: Any,
        permissions: Any,
        correlation_id: Optional[UUID] = None,
    ) -> ChatAnswer:
        """
        Answer a question using only the permitted data.

        Raises:
            InvalidRequestError: If question or permissions are missing
            UpstreamError: If the provider call fails for any reason
        """
        correlation_id = correlation_id or create_correlation_id()
        view, summary, prompt = self.prepare(question, permissions, correlation_id)

        try:
            response = await self._agent.answer(prompt)
        except UpstreamError as e:
            self._audit_logger.log_external_service_error(
                service=e.provider,
                error_message=str(e),
                correlation_id=correlation_id,
            )
            raise
        except Exception as e:
            # Generators outside this package may raise anything
            self._audit_logger.log_external_service_error(
                service=self.generator.name,
                error_message=str(e),
                correlation_id=correlation_id,
            )
            raise UpstreamError(str(e), provider=self.generator.name) from e

        self._audit_logger.log_response_generated(
            correlation_id=correlation_id,
            provider=self.generator.name,
            response_length=len(response),
        )
        return ChatAnswer(
            correlation_id=correlation_id,
            response=response,
            view=view,
            summary=summary,
            prompt=prompt,
        )


@dataclass
class AppComponents:
    """Long-lived objects shared by all requests."""

    store: FinancialDataSource
    chat_flow: ChatFlow
    audit_logger: AuditLogger


def create_app_components(
    generator: Optional[TextGenerator] = None,
    store: Optional[FinancialDataSource] = None,
    app_settings: Optional[AppSettings] = None,
) -> AppComponents:
    """
    Factory function to create all application components.

    Args:
        generator: Text generator to use. Defaults to Gemini, which
                   requires GEMINI_API_KEY to be configured.
        store: Data source. Defaults to the in-memory sample record.
        app_settings: Prompt/server settings. Defaults to environment.

    Raises:
        pydantic.ValidationError: If the Gemini settings are incomplete
    """
    store = store or InMemoryFinancialStore()
    generator = generator or GeminiTextGenerator()
    audit_logger = AuditLogger()

    agent = FinanceChatAgent(generator=generator, settings=app_settings)
    chat_flow = ChatFlow(
        store=store,
        agent=agent,
        audit_logger=audit_logger,
    )
    return AppComponents(store=store, chat_flow=chat_flow, audit_logger=audit_logger)
