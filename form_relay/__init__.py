"""Form Relay: turn website form submissions into SMTP email."""

from .app import create_app
from .config import Settings, SmtpConfig
from .errors import DeliveryError, StartupVerificationWarning, ValidationError
from .forms import FormDescriptor, FormRegistry
from .models import EmailMessage, RelayOutcome, SubmissionState
from .service import RelayService
from .transport import SmtpTransport

__all__ = [
    "DeliveryError",
    "EmailMessage",
    "FormDescriptor",
    "FormRegistry",
    "RelayOutcome",
    "RelayService",
    "Settings",
    "SmtpConfig",
    "SmtpTransport",
    "StartupVerificationWarning",
    "SubmissionState",
    "ValidationError",
    "create_app",
]
