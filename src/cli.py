#!/usr/bin/env python3
"""
CLI for the approval mailer.
"""

import click
from importlib.metadata import version
from commands import email


@click.group()
@click.version_option(version=version("approval-mailer"))
def cli():
    """Approval Mailer CLI - Send the account-approval email through EmailJS."""
    pass


# Register command groups
cli.add_command(email.email)


if __name__ == "__main__":
    cli()
