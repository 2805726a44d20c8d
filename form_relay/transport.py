"""Async SMTP transport wrapping stdlib smtplib with asyncio.to_thread."""

from __future__ import annotations

import asyncio
import smtplib
import ssl
from email.message import EmailMessage as MimeMessage
from email.utils import formatdate, make_msgid

import structlog

from .config import SmtpConfig
from .errors import DeliveryError, StartupVerificationWarning
from .models import EmailMessage

logger = structlog.get_logger()


def _one_line(value: str) -> str:
    """Header values may not carry line breaks; fold each one into a space."""
    return value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def _reply_details(exc: Exception) -> tuple[str | None, int | None]:
    """Pull the SMTP reply text and code out of an smtplib exception, if any."""
    if isinstance(exc, smtplib.SMTPResponseException):
        reply = exc.smtp_error
        if isinstance(reply, bytes):
            reply = reply.decode("utf-8", "replace")
        return f"{exc.smtp_code} {reply}", exc.smtp_code
    if isinstance(exc, smtplib.SMTPRecipientsRefused) and exc.recipients:
        code, reply = next(iter(exc.recipients.values()))
        if isinstance(reply, bytes):
            reply = reply.decode("utf-8", "replace")
        return f"{code} {reply}", code
    return None, None


class SmtpTransport:
    """One outbound SMTP account, one delivery attempt per ``send``.

    Every send opens its own connection, so concurrent callers share only
    the immutable config. All blocking ``smtplib`` calls run in a worker
    thread via ``asyncio.to_thread()``.
    """

    def __init__(self, config: SmtpConfig) -> None:
        self._config = config

    @property
    def config(self) -> SmtpConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def send(self, message: EmailMessage) -> str:
        """Deliver *message* once and return the Message-ID it was sent with.

        Raises :class:`DeliveryError` on any failure. Never retries.
        """
        try:
            mime = self._to_mime(message)
            await asyncio.to_thread(self._send_sync, mime, message.to)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            response, response_code = _reply_details(exc)
            logger.error(
                "email_send_failed",
                to=message.to,
                subject=message.subject,
                error=str(exc),
                response=response,
                response_code=response_code,
            )
            raise DeliveryError(
                str(exc), response=response, response_code=response_code
            ) from exc

        message_id = mime["Message-ID"]
        logger.info("email_sent", message_id=message_id, to=message.to)
        return message_id

    async def verify(self) -> None:
        """Connect and authenticate once without sending anything.

        Raises :class:`StartupVerificationWarning` if the account is unusable.
        """
        try:
            await asyncio.to_thread(self._verify_sync)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            response, response_code = _reply_details(exc)
            raise StartupVerificationWarning(
                str(exc), response=response, response_code=response_code
            ) from exc
        logger.info("smtp_transport_ready", host=self._config.host, port=self._config.port)

    # ------------------------------------------------------------------
    # Message conversion
    # ------------------------------------------------------------------

    def _to_mime(self, message: EmailMessage) -> MimeMessage:
        domain = self._config.username.rpartition("@")[2] or None
        mime = MimeMessage()
        mime["From"] = message.sender
        mime["To"] = _one_line(message.to)
        if message.reply_to:
            mime["Reply-To"] = _one_line(message.reply_to)
        mime["Subject"] = _one_line(message.subject)
        mime["Date"] = formatdate(localtime=True)
        mime["Message-ID"] = make_msgid(domain=domain)
        mime.set_content(message.html, subtype="html")
        return mime

    # ------------------------------------------------------------------
    # Synchronous helpers (run in thread)
    # ------------------------------------------------------------------

    def _open(self) -> smtplib.SMTP:
        cfg = self._config
        kwargs: dict = {}
        if cfg.timeout_seconds is not None:
            kwargs["timeout"] = cfg.timeout_seconds

        if cfg.use_ssl:
            conn: smtplib.SMTP = smtplib.SMTP_SSL(
                cfg.host, cfg.port, context=ssl.create_default_context(), **kwargs
            )
        else:
            conn = smtplib.SMTP(cfg.host, cfg.port, **kwargs)

        try:
            if not cfg.use_ssl and cfg.starttls:
                conn.starttls(context=ssl.create_default_context())
            conn.login(cfg.username, cfg.password.get_secret_value())
        except (smtplib.SMTPException, OSError, ValueError):
            conn.close()
            raise
        return conn

    def _close(self, conn: smtplib.SMTP) -> None:
        try:
            conn.quit()
        except (smtplib.SMTPException, OSError):
            conn.close()

    def _send_sync(self, mime: MimeMessage, to: str) -> None:
        conn = self._open()
        try:
            conn.send_message(mime, from_addr=self._config.username, to_addrs=[_one_line(to)])
        finally:
            self._close(conn)

    def _verify_sync(self) -> None:
        conn = self._open()
        self._close(conn)
