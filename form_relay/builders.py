"""Message builders: map a validated submission to outbound email messages.

Builders are pure and assume the validator already ran. Submitted text is
interpolated into the HTML as-is (no escaping); only ``\\n`` in free-text
message fields is rewritten to ``<br>``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import Settings
from .models import EmailMessage
from .validation import is_present

Submission = Mapping[str, Any]

SERVICE_LABELS = {
    "business": "Partnership Type / Service of Interest",
    "support": "Issue Category / Service",
}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def capitalize_first(value: str) -> str:
    """Upper-case the first character only (``"b2b"`` -> ``"B2b"``, ``"aBC"`` -> ``"ABC"``)."""
    return value[:1].upper() + value[1:]


def line_breaks_to_html(value: str) -> str:
    return value.replace("\n", "<br>")


def _field(label: str, value: Any) -> str:
    return f"<p><strong>{label}:</strong> {_text(value)}</p>"


def _message_section(message: Any) -> str:
    return f"<h3>Message:</h3><p>{line_breaks_to_html(_text(message))}</p>"


# ----------------------------------------------------------------------
# Admin-bound forms
# ----------------------------------------------------------------------


def build_legacy_contact(submission: Submission, settings: Settings) -> list[EmailMessage]:
    """Original contact form: ``inquiryType`` picks the optional detail line."""
    inquiry_type = _text(submission["inquiryType"])
    email = _text(submission["email"])

    parts = [
        "<h2>New Contact Form Submission</h2>",
        _field("Inquiry Type", inquiry_type),
        _field("Name", submission["name"]),
        _field("Email", email),
    ]
    if is_present(submission.get("company")):
        parts.append(_field("Company", submission["company"]))
    if is_present(submission.get("phone")):
        parts.append(_field("Phone", submission["phone"]))

    if inquiry_type == "general":
        if is_present(submission.get("subject")):
            parts.append(_field("Subject", submission["subject"]))
    elif inquiry_type in SERVICE_LABELS and is_present(submission.get("service")):
        parts.append(_field(SERVICE_LABELS[inquiry_type], submission["service"]))

    parts.append(_message_section(submission["message"]))
    parts.append(
        "<hr><p>This email was sent from the contact form on your website (Legacy Endpoint).</p>"
    )

    return [
        EmailMessage(
            sender=settings.default_sender,
            to=settings.admin_address,
            reply_to=email,
            subject=f"New Contact Form Submission - {capitalize_first(inquiry_type)}",
            html="".join(parts),
        )
    ]


def build_contact(submission: Submission, settings: Settings) -> list[EmailMessage]:
    """Tabbed contact form."""
    name = _text(submission["name"])
    email = _text(submission["email"])
    user_subject = _text(submission["subject"])
    tab_label = capitalize_first(_text(submission["activeTab"]))

    parts = [
        f"<h2>New Contact Form Submission ({tab_label})</h2>",
        _field("Name", name),
        _field("Email", email),
    ]
    if is_present(submission.get("phone")):
        parts.append(_field("Phone", submission["phone"]))
    parts += [
        _field("Selected Tab", tab_label),
        _field("Enquiry Type (Dropdown)", submission["enquiryType"]),
        _field("User's Subject (Input Field)", user_subject),
        _message_section(submission["message"]),
        "<hr><p>This email was sent from the new contact form on your website.</p>",
    ]

    return [
        EmailMessage(
            sender=settings.default_sender,
            to=settings.admin_address,
            reply_to=email,
            subject=f'New {tab_label} Inquiry: "{user_subject}" from {name}',
            html="".join(parts),
        )
    ]


def build_demo_request(submission: Submission, settings: Settings) -> list[EmailMessage]:
    name = _text(submission["name"])
    email = _text(submission["email"])
    html = "".join([
        _field("Name", name),
        _field("Email", email),
        _field("Manufacturing Sector", submission["sector"]),
        "<p>This is a demo request from your website's CTA section.</p>",
    ])
    # Demo requests go out under the bare account address, no display name.
    return [
        EmailMessage(
            sender=settings.smtp.username,
            to=settings.admin_address,
            reply_to=email,
            subject=f"New Demo Request from {name} - Manufacturing Solution",
            html=html,
        )
    ]


# ----------------------------------------------------------------------
# Submitter-bound forms
# ----------------------------------------------------------------------


def build_welcome(submission: Submission, settings: Settings) -> list[EmailMessage]:
    user_name = _text(submission["userName"])
    html = "".join([
        f"<h1>Welcome, {user_name}!</h1>",
        "<p>Thank you for signing up for Our Platform.</p>",
        "<p>We're excited to have you on board.</p>",
        "<p>Best regards,<br>The Our Platform Team</p>",
    ])
    return [
        EmailMessage(
            sender=settings.default_sender,
            to=_text(submission["userEmail"]),
            reply_to=settings.support_address,
            subject=f"Welcome to Our Platform, {user_name}!",
            html=html,
        )
    ]


def build_subscription(submission: Submission, settings: Settings) -> list[EmailMessage]:
    """Newsletter signup: notify the admin inbox and welcome the subscriber."""
    email = _text(submission["email"])
    name = _text(submission.get("name")) if is_present(submission.get("name")) else ""

    admin_parts = [
        "<h2>New Newsletter Subscriber</h2>",
        _field("Email", email),
    ]
    if name:
        admin_parts.append(_field("Name", name))
    admin_parts.append("<hr><p>This email was sent from the newsletter signup on your website.</p>")

    greeting = f"Hi {name}," if name else "Hi there,"
    welcome_html = "".join([
        f"<h1>Thanks for subscribing to {settings.app_name}!</h1>",
        f"<p>{greeting}</p>",
        f"<p>You're now on the list and will receive our newsletter at {email}.</p>",
        f"<p>Best regards,<br>The {settings.app_name} Team</p>",
    ])

    return [
        EmailMessage(
            sender=settings.default_sender,
            to=settings.admin_address,
            reply_to=email,
            subject=f"New Newsletter Subscriber: {email}",
            html="".join(admin_parts),
        ),
        EmailMessage(
            sender=settings.default_sender,
            to=email,
            reply_to=settings.support_address,
            subject=f"Thanks for subscribing to {settings.app_name}!",
            html=welcome_html,
        ),
    ]
