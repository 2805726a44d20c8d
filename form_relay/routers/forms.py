"""Form submission endpoints: one route per form, one shared relay path."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from form_relay.deps import get_relay_service, read_submission
from form_relay.models import SubmissionState
from form_relay.schemas import ErrorResponse, MessageResponse
from form_relay.service import RelayService

router = APIRouter(prefix="/api", tags=["forms"])

Submission = Annotated[dict[str, Any], Depends(read_submission)]
Relay = Annotated[RelayService, Depends(get_relay_service)]

_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


async def _relay(form_name: str, submission: dict[str, Any], service: RelayService) -> JSONResponse:
    form = service.registry.get(form_name)
    if form is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Form not enabled")

    outcome = await service.submit(form, submission)

    if outcome.state is SubmissionState.REJECTED:
        return JSONResponse(
            MessageResponse(message=form.missing_message).model_dump(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    if outcome.state is SubmissionState.DELIVERY_FAILED:
        return JSONResponse(
            ErrorResponse(message=form.failure_message, error=outcome.error or "").model_dump(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return JSONResponse(MessageResponse(message=form.render_success(submission)).model_dump())


@router.post("/send-email", response_model=MessageResponse, responses=_RESPONSES)
async def send_email(submission: Submission, service: Relay):
    """Legacy contact form."""
    return await _relay("legacy_contact", submission, service)


@router.post("/send-contact-email", response_model=MessageResponse, responses=_RESPONSES)
async def send_contact_email(submission: Submission, service: Relay):
    """Tabbed contact form."""
    return await _relay("contact", submission, service)


@router.post("/request-demo", response_model=MessageResponse, responses=_RESPONSES)
async def request_demo(submission: Submission, service: Relay):
    return await _relay("demo_request", submission, service)


@router.post("/send-welcome-email", response_model=MessageResponse, responses=_RESPONSES)
async def send_welcome_email(submission: Submission, service: Relay):
    """Welcome message to a newly registered user."""
    return await _relay("welcome", submission, service)


@router.post("/subscribe", response_model=MessageResponse, responses=_RESPONSES)
async def subscribe(submission: Submission, service: Relay):
    """Newsletter signup: admin notification plus subscriber welcome."""
    return await _relay("subscription", submission, service)
