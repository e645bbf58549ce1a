"""
EmailJS REST client for sending templated emails.

This module provides the EmailJSSender class, which posts a template send
request to the EmailJS API and maps the HTTP response to a SendOutcome.
"""

import asyncio
from typing import Any, Dict, Optional

import requests

from email_system.sender import Delivered, ProviderRejected, SendOutcome, TransportFailed

# EmailJS answers 400/422 when ids, keys or template params are invalid
VALIDATION_STATUS_CODES = (400, 422)


class EmailJSSender:
    """
    Sender backed by the EmailJS REST API.

    The request itself is a blocking requests.post call, executed in a worker
    thread so callers can await it from an event loop.

    Example:
        >>> sender = EmailJSSender()
        >>> outcome = await sender.send(
        ...     'service_x', 'template_y',
        ...     {'to_email': 'user@example.com', 'to_name': 'User'},
        ...     'public_key'
        ... )
    """

    def __init__(
        self,
        api_url: str = 'https://api.emailjs.com/api/v1.0/email/send',
        private_key: Optional[str] = None,
        timeout: int = 10
    ):
        """
        Initialize the EmailJS client.

        Args:
            api_url: EmailJS send endpoint
            private_key: Optional private key, sent as accessToken (strict mode accounts)
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.private_key = private_key
        self.timeout = timeout

    def build_payload(
        self,
        service_id: str,
        template_id: str,
        template_params: Dict[str, Any],
        public_key: str
    ) -> dict:
        """Build the JSON body expected by the EmailJS send endpoint."""
        payload = {
            'service_id': service_id,
            'template_id': template_id,
            'user_id': public_key,
            'template_params': template_params,
        }
        if self.private_key:
            payload['accessToken'] = self.private_key
        return payload

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: Dict[str, Any],
        public_key: str
    ) -> SendOutcome:
        """
        Send a template through EmailJS.

        Returns:
            Delivered on HTTP 200, ProviderRejected on a validation status,
            TransportFailed for anything else (including network errors)
        """
        payload = self.build_payload(service_id, template_id, template_params, public_key)
        return await asyncio.to_thread(self._post, payload)

    def _post(self, payload: dict) -> SendOutcome:
        try:
            response = requests.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            return TransportFailed(status=None, text=str(e))

        if response.status_code == 200:
            return Delivered(status=200)

        if response.status_code in VALIDATION_STATUS_CODES:
            return ProviderRejected(status=response.status_code, text=response.text)

        return TransportFailed(status=response.status_code, text=response.text)
