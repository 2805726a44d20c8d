"""Tests for form_relay.forms."""

from __future__ import annotations

from form_relay.forms import (
    CONTACT,
    LEGACY_CONTACT,
    SUBSCRIPTION,
    WELCOME,
    FormRegistry,
    default_registry,
)


class TestFormRegistry:
    def test_register_and_get(self):
        registry = FormRegistry()
        registry.register(WELCOME)
        assert registry.get("welcome") is WELCOME

    def test_get_unknown_returns_none(self):
        assert FormRegistry().get("welcome") is None

    def test_default_registry_has_every_form(self):
        assert default_registry().names == [
            "legacy_contact",
            "contact",
            "demo_request",
            "welcome",
            "subscription",
        ]


class TestFormDescriptor:
    def test_required_fields(self):
        assert LEGACY_CONTACT.required == ("name", "email", "message", "inquiryType")
        assert CONTACT.required == (
            "name", "email", "message", "subject", "enquiryType", "activeTab",
        )
        assert SUBSCRIPTION.required == ("email",)

    def test_render_success_interpolates_submission(self):
        message = WELCOME.render_success({"userName": "Jane", "userEmail": "jane@customer.com"})
        assert message == "Welcome email sent successfully to jane@customer.com!"

    def test_render_success_plain_text(self):
        assert LEGACY_CONTACT.render_success({"name": "{oops}"}) == "Email sent successfully!"
