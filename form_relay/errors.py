"""Error taxonomy for the relay pipeline."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for relay errors."""


class ValidationError(RelayError):
    """A submission is missing one or more required fields.

    Presence only: values are never checked for format.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class DeliveryError(RelayError):
    """The SMTP transport rejected or failed to send a message.

    ``response`` and ``response_code`` carry the server reply when the
    failure came from an SMTP status line.
    """

    def __init__(
        self,
        message: str,
        *,
        response: str | None = None,
        response_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.response_code = response_code


class StartupVerificationWarning(RelayError, Warning):
    """The SMTP account could not be verified at startup.

    Only ever logged; requests are still served.
    """

    def __init__(
        self,
        message: str,
        *,
        response: str | None = None,
        response_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.response_code = response_code
