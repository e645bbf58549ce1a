"""
Email delivery configuration.

EmailConfig is built once (usually from settings.py) and handed to the
delivery service, so environment variables are not re-read on every send.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

DEFAULT_APP_URL = 'http://localhost:5173'
DEFAULT_API_URL = 'https://api.emailjs.com/api/v1.0/email/send'
DEFAULT_TIMEOUT = 10

# Environment variable names, used in diagnostics
REQUIRED_SETTINGS = {
    'service_id': 'EMAILJS_SERVICE_ID',
    'template_id': 'EMAILJS_TEMPLATE_ID_APPROVAL',
    'public_key': 'EMAILJS_PUBLIC_KEY',
}


class EmailConfig(BaseModel):
    """
    EmailJS delivery settings.

    service_id, template_id and public_key are all required for delivery;
    if any of them is missing the service only logs what it would have sent.

    Example:
        >>> config = EmailConfig(service_id='service_x', template_id='template_y', public_key='pk')
        >>> config.is_configured
        True
        >>> config.login_url
        'http://localhost:5173/login'
    """

    model_config = ConfigDict(frozen=True)

    service_id: Optional[str] = None
    template_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    app_url: str = DEFAULT_APP_URL
    api_url: str = DEFAULT_API_URL
    timeout: PositiveInt = DEFAULT_TIMEOUT

    @field_validator('service_id', 'template_id', 'public_key', 'private_key', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator('app_url', mode='before')
    @classmethod
    def _normalize_app_url(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_APP_URL
        return str(value).strip().rstrip('/')

    @field_validator('timeout', mode='before')
    @classmethod
    def _blank_timeout_to_default(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_TIMEOUT
        return value.strip() if isinstance(value, str) else value

    @property
    def is_configured(self) -> bool:
        """True when every value needed to call EmailJS is present."""
        return not self.missing_keys()

    def missing_keys(self) -> List[str]:
        """Return environment variable names of the missing required values."""
        return [
            env_name
            for field, env_name in REQUIRED_SETTINGS.items()
            if getattr(self, field) is None
        ]

    @property
    def login_url(self) -> str:
        return f"{self.app_url}/login"

    @classmethod
    def from_settings(cls) -> 'EmailConfig':
        """Build the configuration from settings.py (environment / .env)."""
        import settings

        return cls(
            service_id=settings.EMAILJS_SERVICE_ID,
            template_id=settings.EMAILJS_TEMPLATE_ID_APPROVAL,
            public_key=settings.EMAILJS_PUBLIC_KEY,
            private_key=settings.EMAILJS_PRIVATE_KEY,
            app_url=settings.APP_URL,
            api_url=settings.EMAILJS_API_URL,
            timeout=settings.EMAILJS_TIMEOUT,
        )
