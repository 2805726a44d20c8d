"""Outbound message and per-request outcome models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class EmailMessage(BaseModel):
    """A fully composed message, built once and sent once.

    ``to`` and ``subject`` can never be empty; construction fails instead.
    """

    model_config = {"frozen": True}

    sender: str = Field(min_length=1, description="From header value")
    to: str = Field(min_length=1, description="Single recipient address")
    reply_to: str | None = Field(default=None, description="Reply-To header value")
    subject: str = Field(min_length=1)
    html: str = Field(description="HTML body, user input interpolated as-is")


class SubmissionState(str, Enum):
    """Terminal states of one form submission."""

    REJECTED = "rejected"
    DELIVERED = "delivered"
    DELIVERY_FAILED = "delivery_failed"


class RelayOutcome(BaseModel):
    """Typed result of relaying one submission.

    The HTTP layer maps ``state`` to a status code; nothing below it does.
    """

    form: str
    state: SubmissionState
    missing: list[str] = Field(default_factory=list)
    message_ids: list[str] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def rejected(cls, form: str, missing: list[str]) -> RelayOutcome:
        return cls(form=form, state=SubmissionState.REJECTED, missing=missing)

    @classmethod
    def delivered(cls, form: str, message_ids: list[str]) -> RelayOutcome:
        return cls(form=form, state=SubmissionState.DELIVERED, message_ids=message_ids)

    @classmethod
    def delivery_failed(cls, form: str, error: str) -> RelayOutcome:
        return cls(form=form, state=SubmissionState.DELIVERY_FAILED, error=error)
