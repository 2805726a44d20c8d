"""FastAPI dependency-injection helpers."""

from __future__ import annotations

from typing import Any

from fastapi import Request

from .service import RelayService


def get_relay_service(request: Request) -> RelayService:
    return request.app.state.relay


async def read_submission(request: Request) -> dict[str, Any]:
    """Parse an ``application/json`` body into a submission.

    Other content types, unparsable JSON and non-object bodies all count as
    an empty submission, so the endpoint rejects them as missing fields.
    """
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        return {}
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
