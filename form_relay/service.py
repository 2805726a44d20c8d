"""RelayService: validate a submission, build its messages, send them."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import structlog

from .config import Settings
from .errors import DeliveryError, ValidationError
from .forms import FormDescriptor, FormRegistry, default_registry
from .models import RelayOutcome
from .transport import SmtpTransport
from .validation import validate

logger = structlog.get_logger()


class RelayService:
    """The one generic "build and send" operation behind every form endpoint.

    Holds only immutable collaborators; each call owns its submission and
    messages.
    """

    def __init__(
        self,
        settings: Settings,
        transport: SmtpTransport,
        registry: FormRegistry | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> FormRegistry:
        return self._registry

    @property
    def transport(self) -> SmtpTransport:
        return self._transport

    async def submit(self, form: FormDescriptor, submission: Mapping[str, Any]) -> RelayOutcome:
        """Run one submission through validate -> build -> send.

        Never raises for validation or delivery problems; they come back as
        a ``rejected`` or ``delivery_failed`` outcome.
        """
        log = logger.bind(form=form.name)

        try:
            validate(submission, form.required)
        except ValidationError as exc:
            log.info("submission_rejected", missing=exc.missing)
            return RelayOutcome.rejected(form.name, exc.missing)

        messages = form.build(submission, self._settings)

        # Sends are independent; wait for all before reporting.
        results = await asyncio.gather(
            *(self._transport.send(message) for message in messages),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, DeliveryError):
                raise failure
        if failures:
            log.warning(
                "submission_delivery_failed",
                failed=len(failures),
                total=len(messages),
                error=str(failures[0]),
            )
            return RelayOutcome.delivery_failed(form.name, str(failures[0]))

        log.info("submission_delivered", message_ids=results)
        return RelayOutcome.delivered(form.name, list(results))
