"""
High-level email service for the account-approval notification.

This module provides the ApprovalEmailService class, which checks the
EmailJS configuration, builds the template parameters, hands them to a
Sender and reports every outcome on the console. Sending never raises:
the caller only gets True (sent) or False (not sent).
"""

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from email_system.config import EmailConfig
from email_system.logging import EmailLogger, log_group
from email_system.renderer import APPROVAL_SUBJECT
from email_system.sender import (
    Delivered,
    ProviderRejected,
    Sender,
    SenderUnavailable,
    TransportFailed,
)

SenderFactory = Callable[[EmailConfig], Sender]

MISSING_DEPENDENCY_HINTS = [
    "Install the project dependencies: pip install -e .",
    "Check that the 'requests' package can be imported",
]

VALIDATION_HINTS = [
    "EMAILJS_SERVICE_ID matches a service in the EmailJS dashboard",
    "EMAILJS_TEMPLATE_ID_APPROVAL matches the approval template",
    "EMAILJS_PUBLIC_KEY is the account public key",
    "The template's 'To Email' field is set to {{to_email}}",
]


class EmailDispatchRequest(BaseModel):
    """One approval email, built per call and discarded afterwards."""

    model_config = ConfigDict(frozen=True)

    recipient_email: str
    recipient_name: str
    login_url: str
    app_url: str

    def template_params(self) -> Dict[str, Any]:
        """Parameters available to the EmailJS template."""
        return {
            'to_email': self.recipient_email,
            'to_name': self.recipient_name,
            'user_name': self.recipient_name,
            'login_url': self.login_url,
            'app_url': self.app_url,
        }


def load_emailjs_sender(config: EmailConfig) -> Sender:
    """
    Default sender factory.

    The EmailJS client (and requests) is imported here, so an unconfigured
    deployment never needs it.

    Raises:
        SenderUnavailable: If the client module cannot be imported
    """
    try:
        from email_system.client import EmailJSSender
    except ImportError as e:
        raise SenderUnavailable(f"EmailJS client could not be loaded: {e}") from e

    return EmailJSSender(
        api_url=config.api_url,
        private_key=config.private_key,
        timeout=config.timeout
    )


class ApprovalEmailService:
    """
    Sends the "account approved" email through EmailJS.

    Example:
        >>> service = ApprovalEmailService(EmailConfig.from_settings())
        >>> sent = await service.send_approval_email('user@example.com', 'Jane Doe')
    """

    def __init__(
        self,
        config: Optional[EmailConfig] = None,
        sender_factory: Optional[SenderFactory] = None
    ):
        """
        Initialize the service.

        Args:
            config: Delivery configuration (defaults to EmailConfig.from_settings())
            sender_factory: Builds the Sender on first use (defaults to load_emailjs_sender)
        """
        self.config = config or EmailConfig.from_settings()
        self.sender_factory = sender_factory or load_emailjs_sender
        self._sender: Optional[Sender] = None

    def build_request(self, user_email: str, user_name: str) -> EmailDispatchRequest:
        """Build the dispatch request for one recipient."""
        return EmailDispatchRequest(
            recipient_email=user_email,
            recipient_name=user_name,
            login_url=self.config.login_url,
            app_url=self.config.app_url
        )

    def _get_sender(self) -> Sender:
        if self._sender is None:
            self._sender = self.sender_factory(self.config)
        return self._sender

    async def send_approval_email(self, user_email: str, user_name: str) -> bool:
        """
        Send the approval email.

        Args:
            user_email: Recipient address
            user_name: Recipient display name

        Returns:
            bool: True if EmailJS accepted the email, False otherwise
        """
        email_log = EmailLogger(recipient=str(user_email), subject=APPROVAL_SUBJECT)

        try:
            request = self.build_request(user_email, user_name)
        except ValidationError as e:
            email_log.mark_failed(f"Invalid recipient: {e}")
            return False
        email_log.context_data = request.template_params()

        if not self.config.is_configured:
            email_log.mark_skipped(self.config.missing_keys())
            return False

        try:
            sender = self._get_sender()
        except (ImportError, SenderUnavailable) as e:
            email_log.mark_failed(f"Email provider unavailable: {e}", MISSING_DEPENDENCY_HINTS)
            return False
        except Exception as e:
            email_log.mark_failed(f"Unexpected error: {e}")
            return False

        try:
            outcome = await sender.send(
                self.config.service_id,
                self.config.template_id,
                request.template_params(),
                self.config.public_key
            )
        except Exception as e:
            email_log.mark_failed(f"Unexpected error: {e}")
            return False

        if isinstance(outcome, Delivered):
            email_log.mark_sent()
            return True

        if isinstance(outcome, ProviderRejected):
            email_log.mark_failed(
                f"EmailJS rejected the request (status {outcome.status}): {outcome.text}",
                VALIDATION_HINTS
            )
            return False

        if isinstance(outcome, TransportFailed):
            email_log.mark_failed(f"EmailJS request failed (status {outcome.status}): {outcome.text}")
            return False

        email_log.mark_failed(f"Unexpected send outcome: {outcome!r}")
        return False


_default_service: Optional[ApprovalEmailService] = None


def get_default_service() -> ApprovalEmailService:
    """Service built from settings.py, created on first use."""
    global _default_service
    if _default_service is None:
        _default_service = ApprovalEmailService()
    return _default_service


async def send_approval_email(user_email: str, user_name: str) -> bool:
    """Send the approval email with the settings-based service."""
    try:
        service = get_default_service()
    except ValidationError as e:
        log_group('Email service misconfigured', {'Error': e}, fg='red')
        return False

    return await service.send_approval_email(user_email, user_name)
