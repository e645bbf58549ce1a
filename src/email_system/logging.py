"""
Email sending console log.

Every outcome of a send (stub, sent, failed) is written to the console as a
grouping: a coloured title line followed by indented "Key: value" lines.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import click

STATUS_COLORS = {
    'skipped': 'yellow',
    'sent': 'green',
    'failed': 'red',
}


def log_group(title: str, fields: Dict[str, Any], fg: Optional[str] = None, notes: Optional[List[str]] = None):
    """
    Echo a named grouping of fields.

    Args:
        title: Group title
        fields: Values printed as "Key: value", in insertion order
        fg: Title colour
        notes: Extra lines printed as a bulleted list under the fields
    """
    click.echo(click.style(f"=== {title} ===", fg=fg, bold=True))
    for key, value in fields.items():
        click.echo(f"  {key}: {value}")
    for note in notes or []:
        click.echo(f"    - {note}")
    click.echo()


def log_email_details(to: str, subject: str, body: str):
    """
    Print an email to the console instead of sending it.

    Not called by the delivery service; useful when delivery is not set up
    and the message has to be passed on by hand.
    """
    log_group('Email details', {
        'To': to,
        'Subject': subject,
        'Body': body,
    }, fg='cyan')


class EmailLogger:
    """
    Logger for a single email send.

    Tracks recipient, subject, template parameters and status, and echoes
    a grouping whenever the status changes.
    """

    def __init__(
        self,
        recipient: str,
        subject: str,
        context_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize logger.

        Args:
            recipient: Email recipient address
            subject: Email subject
            context_data: Template parameters sent to the provider
        """
        self.recipient = recipient
        self.subject = subject
        self.context_data = context_data or {}

        self.status: Optional[str] = None  # skipped, sent, failed
        self.sent_at: Optional[datetime] = None

    def mark_skipped(self, missing: List[str]):
        """Delivery not configured: show what would have been sent."""
        self.status = 'skipped'

        log_group('Email service not configured', {
            'To': self.recipient,
            'Name': self.context_data.get('to_name', ''),
            'Subject': self.subject,
            'Login URL': self.context_data.get('login_url', ''),
            'Missing': ', '.join(missing),
        }, fg=STATUS_COLORS[self.status])

    def mark_sent(self):
        """Mark email as successfully sent."""
        self.sent_at = datetime.now(timezone.utc)
        self.status = 'sent'

        log_group('Email sent', {
            'To': self.recipient,
            'Subject': self.subject,
            'Sent at': self.sent_at.strftime('%Y-%m-%d %H:%M:%S UTC'),
        }, fg=STATUS_COLORS[self.status])

    def mark_failed(self, error_message: str, remediation: Optional[List[str]] = None):
        """Mark email as failed with error message and optional fix-up hints."""
        self.status = 'failed'

        log_group('Email failed', {
            'To': self.recipient,
            'Subject': self.subject,
            'Error': error_message,
        }, fg=STATUS_COLORS[self.status], notes=remediation)
