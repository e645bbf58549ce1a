"""
Email module for the account-approval notification.

This module provides:
- EmailJSSender: EmailJS REST client (client.py)
- EmailRenderer: Jinja2 rendering of the approval email HTML (renderer.py)
- ApprovalEmailService: configuration-gated delivery (service.py)
- log_email_details: console dump of an email (logging.py)
"""

# Note: Imports are not exposed at package level so that importing the
# package does not pull in the EmailJS client. Import from submodules:
#   from email_system.service import send_approval_email
#   from email_system.renderer import generate_approval_email_html
#   from email_system.logging import log_email_details

__all__ = ["client", "config", "logging", "renderer", "sender", "service"]
