"""Response bodies returned by the form endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Returned on success (200) and on missing fields (400)."""

    message: str


class ErrorResponse(BaseModel):
    """Returned when the SMTP send fails (500)."""

    message: str
    error: str
