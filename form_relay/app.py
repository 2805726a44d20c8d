"""FastAPI application factory."""

from __future__ import annotations

import asyncio
import contextlib
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from form_relay.config import Settings
from form_relay.errors import StartupVerificationWarning
from form_relay.forms import FormRegistry
from form_relay.service import RelayService
from form_relay.transport import SmtpTransport

logger = structlog.get_logger()


async def verify_transport(transport: SmtpTransport) -> bool:
    """Check the SMTP account once. Failures are logged, never raised."""
    try:
        await transport.verify()
    except StartupVerificationWarning as exc:
        logger.warning(
            "smtp_verification_failed",
            error=str(exc),
            response=exc.response,
            response_code=exc.response_code,
        )
        return False
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: verify the SMTP account in the background. Shutdown: stop the check."""
    relay: RelayService = app.state.relay
    task = asyncio.create_task(verify_transport(relay.transport))
    app.state.verification = task
    yield
    if not task.done():
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    logger.info("shutdown_complete")


def create_app(
    settings: Settings | None = None,
    transport: SmtpTransport | None = None,
    registry: FormRegistry | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    *registry* limits which forms are served; unregistered forms answer 404.
    """
    if settings is None:
        settings = Settings()  # type: ignore[call-arg]
    if transport is None:
        transport = SmtpTransport(settings.smtp)

    app = FastAPI(
        title="Form Relay",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relay = RelayService(settings, transport, registry)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from form_relay.routers.forms import router as forms_router

    app.include_router(forms_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "form-relay"}

    return app
