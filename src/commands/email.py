"""
Email commands.
"""

import asyncio
import sys

import click
from pydantic import ValidationError

from email_system.config import EmailConfig
from email_system.logging import log_email_details
from email_system.renderer import EmailRenderer, RendererError
from email_system.service import ApprovalEmailService


def load_config():
    """Build EmailConfig from settings, exiting with status 1 on invalid values."""
    try:
        return EmailConfig.from_settings()
    except ValidationError as e:
        click.echo(click.style(f"Invalid email configuration: {e}", fg="red"))
        sys.exit(1)


@click.group()
def email():
    """Send and preview the account-approval email."""
    pass


@email.command()
@click.option('--recipient', '-r', required=True, help='Recipient email address')
@click.option('--name', '-n', required=True, help='Recipient name')
def send_approval(recipient, name):
    """
    Send the account-approval email.

    Exits with status 1 if the email was not sent.

    Example:
        approval-mailer email send-approval -r user@example.com -n "Jane Doe"
    """
    service = ApprovalEmailService(load_config())

    click.echo(f"Sending approval email to {recipient}...")
    sent = asyncio.run(service.send_approval_email(recipient, name))

    if sent:
        click.echo(click.style("✓ Approval email sent", fg="green"))
    else:
        click.echo(click.style("✗ Approval email not sent (not configured or provider error)", fg="red"))
        sys.exit(1)


@email.command()
@click.option('--name', '-n', required=True, help='Recipient name')
@click.option('--login-url', '-u', default=None, help='Login URL (default: APP_URL/login)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True), help='Write HTML to file')
def preview(name, login_url, output):
    """
    Render the approval email HTML.

    Example:
        approval-mailer email preview -n "Jane Doe"
        approval-mailer email preview -n "Jane Doe" -u https://app.example.com/login -o approval.html
    """
    login_url = login_url or load_config().login_url

    try:
        html = EmailRenderer().render_approval(name, login_url)
    except RendererError as e:
        click.echo(click.style(f"Error: {e}", fg="red"))
        sys.exit(1)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(html)
        click.echo(click.style(f"✓ Preview written to {output}", fg="green"))
    else:
        click.echo(html)


@email.command()
def config():
    """
    Show EmailJS configuration status.

    Example:
        approval-mailer email config
    """
    email_config = load_config()

    def show(label, value, secret=False):
        if value is None:
            shown = click.style("not set", fg="yellow")
        elif secret:
            shown = value[:4] + '*' * max(len(value) - 4, 0)
        else:
            shown = value
        click.echo(f"  {label}: {shown}")

    click.echo(click.style("\n=== EmailJS Configuration ===\n", bold=True))
    show("Service ID", email_config.service_id)
    show("Template ID", email_config.template_id)
    show("Public key", email_config.public_key, secret=True)
    show("Private key", email_config.private_key, secret=True)
    show("App URL", email_config.app_url)
    show("API URL", email_config.api_url)
    click.echo()

    if email_config.is_configured:
        click.echo(click.style("✓ Delivery enabled", fg="green"))
    else:
        missing = ', '.join(email_config.missing_keys())
        click.echo(click.style(f"✗ Delivery disabled, missing: {missing}", fg="yellow"))


@email.command()
@click.option('--recipient', '-r', required=True, help='Recipient email address')
@click.option('--subject', '-s', required=True, help='Email subject')
@click.option('--body', '-b', required=True, help='Email body')
def details(recipient, subject, body):
    """
    Print an email to the console instead of sending it.

    Example:
        approval-mailer email details -r user@example.com -s "Welcome" -b "Hello"
    """
    log_email_details(recipient, subject, body)


@email.command()
def templates():
    """
    List the email templates shipped with the package.

    Example:
        approval-mailer email templates
    """
    names = EmailRenderer().list_templates()

    if not names:
        click.echo(click.style("No templates found", fg="yellow"))
        return

    for name in names:
        click.echo(f"  {click.style(name, fg='cyan')}")
