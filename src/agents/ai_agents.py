"""
AI Agent for the Finance Chat Backend

CRITICAL BOUNDARIES:

FINANCE CHAT AGENT:
   - CAN: Explain the permitted data in plain language
   - CAN: Quote the pre-computed summary figures
   - CANNOT: See categories the user has not granted
   - CANNOT: Compute its own totals
   - CANNOT: Answer from outside knowledge

The LLM is a NARRATOR, not a CALCULATOR.
Every number it reports was put in front of it by the server.
"""

import json
from datetime import date
from typing import Optional

from src.config import AppSettings, get_settings
from src.models.financial import FilteredView, FinancialSummary
from src.services.llm import TextGenerator


def format_reference_date(value: date) -> str:
    """e.g. 'September 13, 2025'."""
    return f"{value:%B} {value.day}, {value.year}"


class FinanceChatAgent:
    """
    Renders the prompt for a question and hands it to the generator.

    The prompt is fully deterministic: the same view, summary and
    question always produce byte-identical text.
    """

    def __init__(
        self,
        generator: TextGenerator,
        settings: Optional[AppSettings] = None,
    ):
        self._generator = generator
        self._settings = settings or get_settings().app

    @property
    def generator(self) -> TextGenerator:
        return self._generator

    def system_prompt(self) -> str:
        symbol = self._settings.currency_symbol
        code = self._settings.currency_code
        today = format_reference_date(self._settings.reference_date)
        return f"""You are a friendly and insightful AI personal finance assistant.
**CRITICAL RULE:** When asked for "Net Worth", you MUST use the pre-calculated values from the 'summary' object in the provided data. Use the 'summary.calculatedNetWorth' for the final answer. Use 'summary.totalAssets' and 'summary.totalLiabilities' to explain the calculation. DO NOT calculate these totals yourself by summing the individual items.
All financial values are in {code}. You MUST use the "{symbol}" symbol for all monetary values.
Base your answers ONLY on the data provided. Do not invent information. If the data needed to answer is not provided, say so. Be helpful and clear. Use markdown for formatting. Today's date is {today}."""

    def user_prompt(
        self,
        view: FilteredView,
        summary: FinancialSummary,
        question: str,
    ) -> str:
        data_json = json.dumps(view.with_summary(summary), indent=2, ensure_ascii=False)
        return (
            "Based on the following financial data, please answer the user's question.\n\n"
            f"**Financial Data:**\n```json\n{data_json}\n```\n\n"
            f'**User Question:** "{question}"'
        )

    def build_prompt(
        self,
        view: FilteredView,
        summary: FinancialSummary,
        question: str,
    ) -> str:
        """Assemble the single text payload sent to the model."""
        return f"{self.system_prompt()}\n\n{self.user_prompt(view, summary, question)}"

    async def answer(self, prompt: str) -> str:
        """
        Send a rendered prompt and return the model's text verbatim.

        Raises:
            UpstreamError: If the generator fails
        """
        return await self._generator.generate(prompt)
