"""Form descriptors and the registry that maps form names to them."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from .builders import (
    build_contact,
    build_demo_request,
    build_legacy_contact,
    build_subscription,
    build_welcome,
)
from .config import Settings
from .models import EmailMessage

logger = structlog.get_logger()

Builder = Callable[[Mapping[str, Any], Settings], list[EmailMessage]]


@dataclass(frozen=True)
class FormDescriptor:
    """Everything that distinguishes one form endpoint from another.

    ``success_message`` may reference submission fields with ``str.format``
    placeholders (e.g. ``{userEmail}``); it is rendered only after validation.
    """

    name: str
    required: tuple[str, ...]
    build: Builder
    missing_message: str
    success_message: str
    failure_message: str

    def render_success(self, submission: Mapping[str, Any]) -> str:
        return self.success_message.format_map(
            {key: submission.get(key) for key in self.required}
        )


LEGACY_CONTACT = FormDescriptor(
    name="legacy_contact",
    required=("name", "email", "message", "inquiryType"),
    build=build_legacy_contact,
    missing_message="Name, email, message, and inquiryType are required.",
    success_message="Email sent successfully!",
    failure_message="Failed to send email. Server error.",
)

CONTACT = FormDescriptor(
    name="contact",
    required=("name", "email", "message", "subject", "enquiryType", "activeTab"),
    build=build_contact,
    missing_message=(
        "Missing required fields: name, email, subject, enquiryType, message, "
        "and activeTab are required."
    ),
    success_message="Email sent successfully! We will get back to you shortly.",
    failure_message="Failed to send email. Please try again later.",
)

DEMO_REQUEST = FormDescriptor(
    name="demo_request",
    required=("name", "email", "sector"),
    build=build_demo_request,
    missing_message="All fields are required.",
    success_message="Demo request sent successfully!",
    failure_message="Failed to send demo request.",
)

WELCOME = FormDescriptor(
    name="welcome",
    required=("userName", "userEmail"),
    build=build_welcome,
    missing_message="User name and email are required for welcome email.",
    success_message="Welcome email sent successfully to {userEmail}!",
    failure_message="Failed to send welcome email.",
)

SUBSCRIPTION = FormDescriptor(
    name="subscription",
    required=("email",),
    build=build_subscription,
    missing_message="Email is required to subscribe.",
    success_message="Subscription successful! Check your inbox for a welcome email.",
    failure_message="Failed to process subscription.",
)


class FormRegistry:
    """Registry of form descriptors, keyed by form name."""

    def __init__(self) -> None:
        self._forms: dict[str, FormDescriptor] = {}

    def register(self, form: FormDescriptor) -> None:
        self._forms[form.name] = form
        logger.debug("form_registered", form=form.name)

    def get(self, name: str) -> FormDescriptor | None:
        """Look up a form by name. Returns None if unknown."""
        return self._forms.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._forms.keys())


def default_registry() -> FormRegistry:
    registry = FormRegistry()
    for form in (LEGACY_CONTACT, CONTACT, DEMO_REQUEST, WELCOME, SUBSCRIPTION):
        registry.register(form)
    return registry
