"""Shared fixtures for the test suite."""

from datetime import date
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from src.agents import FinanceChatAgent
from src.api import create_app
from src.audit import AuditLogger
from src.config import AppSettings
from src.orchestrator import AppComponents, ChatFlow, create_app_components
from src.services.llm import TextGenerator
from src.services.storage import InMemoryFinancialStore


class FakeTextGenerator(TextGenerator):
    """Records every prompt; returns canned text or raises."""

    def __init__(self, response: str = "Your net worth is ₹12,10,000.", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def app_settings():
    """App settings pinned to the values the sample data is built around."""
    return AppSettings(
        _env_file=None,
        reference_date=date(2025, 9, 13),
        currency_code="INR",
        currency_symbol="₹",
        cors_origins="*",
    )


@pytest.fixture
def store():
    return InMemoryFinancialStore()


@pytest.fixture
def record(store):
    return store.get_all()


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()


@pytest.fixture
def agent(fake_generator, app_settings):
    return FinanceChatAgent(generator=fake_generator, settings=app_settings)


@pytest.fixture
def audit_logger():
    return AuditLogger()


@pytest.fixture
def chat_flow(store, agent, audit_logger):
    return ChatFlow(store=store, agent=agent, audit_logger=audit_logger)


@pytest.fixture
def make_client(app_settings):
    """Factory: TestClient wired to the given generator."""
    def _make(generator: TextGenerator) -> tuple[TestClient, AppComponents]:
        components = create_app_components(generator=generator, app_settings=app_settings)
        app = create_app(components=components, app_settings=app_settings)
        return TestClient(app), components
    return _make


@pytest.fixture
def client(make_client, fake_generator):
    test_client, _ = make_client(fake_generator)
    return test_client
