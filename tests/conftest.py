"""
Shared test fixtures and fakes.

Provides:
- FakeSender: records send() calls and returns a configured outcome
- configured_config / unconfigured_config: EmailConfig fixtures
- emailjs_settings: patches settings.py values used by EmailConfig.from_settings()
"""

from typing import Any, Dict, List, Optional

import pytest

import settings
from email_system.config import EmailConfig
from email_system.sender import Delivered, SendOutcome


class FakeSender:
    """Sender double that records every call."""

    def __init__(self, outcome: Optional[SendOutcome] = Delivered(), error: Optional[Exception] = None):
        self.outcome = outcome
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def send(self, service_id, template_id, template_params, public_key):
        self.calls.append({
            'service_id': service_id,
            'template_id': template_id,
            'template_params': template_params,
            'public_key': public_key,
        })
        if self.error:
            raise self.error
        return self.outcome


def factory_for(sender):
    """Sender factory returning the given sender."""
    def factory(config):
        return sender
    return factory


def forbidden_factory(config):
    pytest.fail("sender factory must not be called when delivery is not configured")


@pytest.fixture
def configured_config():
    return EmailConfig(
        service_id='service_test',
        template_id='template_approval',
        public_key='pk_test',
        app_url='https://app.example.com'
    )


@pytest.fixture
def unconfigured_config():
    return EmailConfig()


@pytest.fixture
def emailjs_settings(monkeypatch):
    """Reset EmailJS settings to an unconfigured state; tests override as needed."""
    values = {
        'EMAILJS_SERVICE_ID': None,
        'EMAILJS_TEMPLATE_ID_APPROVAL': None,
        'EMAILJS_PUBLIC_KEY': None,
        'EMAILJS_PRIVATE_KEY': None,
        'EMAILJS_API_URL': 'https://api.emailjs.com/api/v1.0/email/send',
        'EMAILJS_TIMEOUT': '10',
        'APP_URL': 'http://localhost:5173',
    }
    for key, value in values.items():
        monkeypatch.setattr(settings, key, value)

    def configure(**overrides):
        for key, value in overrides.items():
            monkeypatch.setattr(settings, key, value)

    return configure
