"""Relay configuration loaded from environment variables."""

from __future__ import annotations

from email.utils import formataddr

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SmtpConfig(BaseSettings):
    """Outbound SMTP account used for every relayed message."""

    model_config = SettingsConfigDict(env_prefix="SMTP_", frozen=True)

    host: str = Field(
        default="smtpout.secureserver.net",
        description="SMTP server hostname",
    )
    port: int = Field(default=465, description="SMTP server port")
    use_ssl: bool = Field(
        default=True,
        description="Implicit TLS (SMTPS). When False, a plain connection is opened",
    )
    starttls: bool = Field(
        default=True,
        description="Upgrade a plain connection with STARTTLS (ignored when use_ssl is set)",
    )
    username: str = Field(description="SMTP login, also the relay's sender address")
    password: SecretStr = Field(description="SMTP login password")
    timeout_seconds: float | None = Field(
        default=None,
        description="Socket timeout for SMTP calls (unset waits indefinitely)",
    )


class Settings(BaseSettings):
    """Top-level settings for the relay.

    Relay env vars are prefixed with ``RELAY_``, the SMTP account with ``SMTP_``.
    Example: ``RELAY_ADMIN_EMAIL=inbox@example.com``
    """

    model_config = SettingsConfigDict(env_prefix="RELAY_", frozen=True)

    # --- Mail identity ------------------------------------------------------
    app_name: str = Field(
        default="Your Application",
        description="Display name used in the From header",
    )
    admin_email: str | None = Field(
        default=None,
        description="Inbox receiving form notifications (defaults to the SMTP username)",
    )
    support_email: str | None = Field(
        default=None,
        description="Reply-To for messages sent to submitters (defaults to the SMTP username)",
    )

    # --- Server -------------------------------------------------------------
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, description="Bind port")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Use JSON log output (True for prod, False for dev)",
    )
    allowed_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="CORS allowed origins",
    )

    smtp: SmtpConfig = Field(default_factory=SmtpConfig)

    @property
    def admin_address(self) -> str:
        return self.admin_email or self.smtp.username

    @property
    def support_address(self) -> str:
        return self.support_email or self.smtp.username

    @property
    def default_sender(self) -> str:
        """``"App Name" <account>`` header value used when a form sets no sender."""
        return formataddr((self.app_name, self.smtp.username))
