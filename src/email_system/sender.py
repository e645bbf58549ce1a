"""
Sender interface and delivery outcomes.

A Sender hands one templated email to a provider and reports what happened
as a typed outcome instead of raising. The delivery service only depends on
this module, so the concrete provider client (and its HTTP dependency) is
loaded when delivery is actually configured.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Union


class SenderUnavailable(Exception):
    """Raised by a sender factory when the provider client cannot be loaded."""
    pass


@dataclass(frozen=True)
class Delivered:
    """Provider accepted the email."""
    status: int = 200


@dataclass(frozen=True)
class ProviderRejected:
    """Provider refused the request as invalid (bad ids, key or template params)."""
    status: int
    text: str = ''


@dataclass(frozen=True)
class TransportFailed:
    """Any other failure: network error, unexpected HTTP status."""
    status: Optional[int] = None
    text: str = ''


SendOutcome = Union[Delivered, ProviderRejected, TransportFailed]


class Sender(Protocol):
    """Anything able to send a provider-hosted template."""

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: Dict[str, Any],
        public_key: str
    ) -> SendOutcome:
        ...
