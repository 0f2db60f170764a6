"""AI Agents package."""

from src.agents.ai_agents import FinanceChatAgent, format_reference_date

__all__ = [
    "FinanceChatAgent",
    "format_reference_date",
]
