"""Shared test fixtures for the form relay test suite."""

from __future__ import annotations

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from form_relay.app import create_app
from form_relay.config import Settings, SmtpConfig
from form_relay.errors import DeliveryError, StartupVerificationWarning
from form_relay.models import EmailMessage

ADMIN = "admin@example.com"
ACCOUNT = "relay@example.com"
SUPPORT = "support@example.com"


class FakeTransport:
    """Records every message instead of talking SMTP.

    Sends addressed to anything in ``fail_for`` raise ``DeliveryError``.
    """

    def __init__(
        self,
        *,
        fail_for: set[str] | None = None,
        verify_error: Exception | None = None,
    ) -> None:
        self.sent: list[EmailMessage] = []
        self.fail_for = fail_for or set()
        self.verify_error = verify_error
        self.verify_calls = 0
        self.in_flight = 0
        self.max_in_flight = 0

    async def send(self, message: EmailMessage) -> str:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if message.to in self.fail_for:
                raise DeliveryError(
                    "Mailbox unavailable",
                    response="550 Mailbox unavailable",
                    response_code=550,
                )
            self.sent.append(message)
            return f"<msg-{len(self.sent)}@example.com>"
        finally:
            self.in_flight -= 1

    async def verify(self) -> None:
        self.verify_calls += 1
        if self.verify_error is not None:
            raise self.verify_error


def make_settings(**overrides) -> Settings:
    """Create Settings with test defaults."""
    defaults = {
        "app_name": "Acme Widgets",
        "admin_email": ADMIN,
        "support_email": SUPPORT,
        "smtp": SmtpConfig(
            host="smtp.test.com",
            port=465,
            username=ACCOUNT,
            password="secret",
        ),
    }
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def app(settings: Settings, transport: FakeTransport):
    return create_app(settings, transport=transport)  # type: ignore[arg-type]


@pytest.fixture
async def client(app):
    """Async HTTP test client. Lifespan is not started."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def failing_verify() -> StartupVerificationWarning:
    return StartupVerificationWarning(
        "(535, b'Authentication failed')",
        response="535 Authentication failed",
        response_code=535,
    )


# ------------------------------------------------------------------
# Sample submissions
# ------------------------------------------------------------------


def legacy_contact(**overrides) -> dict:
    payload = {
        "name": "Jane Doe",
        "email": "jane@customer.com",
        "message": "Hello there",
        "inquiryType": "general",
    }
    payload.update(overrides)
    return payload


def contact(**overrides) -> dict:
    payload = {
        "name": "Jane Doe",
        "email": "jane@customer.com",
        "message": "Need a quote",
        "subject": "Pricing",
        "enquiryType": "sales",
        "activeTab": "business",
    }
    payload.update(overrides)
    return payload


def demo_request(**overrides) -> dict:
    payload = {"name": "Jane Doe", "email": "jane@customer.com", "sector": "Automotive"}
    payload.update(overrides)
    return payload


def welcome(**overrides) -> dict:
    payload = {"userName": "Jane", "userEmail": "jane@customer.com"}
    payload.update(overrides)
    return payload


def subscription(**overrides) -> dict:
    payload = {"email": "a@b.com"}
    payload.update(overrides)
    return payload
