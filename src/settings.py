"""
Application settings management.
Uses python-dotenv to load environment variables from .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# Store original environment values to prevent modification
_ENV_CACHE = {}


def get_setting(key: str, default=None):
    """
    Get a setting from environment variables.

    Returns a copy of the value to prevent accidental modification of the
    actual environment variable.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        The environment variable value or default

    Example:
        >>> EMAILJS_SERVICE_ID = get_setting('EMAILJS_SERVICE_ID')
        >>> DEBUG = get_setting('DEBUG', 'False') == 'True'
    """
    # Use cached value if available, otherwise get from env
    if key not in _ENV_CACHE:
        _ENV_CACHE[key] = os.getenv(key, default)

    value = _ENV_CACHE[key]

    # For mutable types, return a copy
    if isinstance(value, (list, dict)):
        return value.copy()

    return value


# EmailJS settings (delivery is disabled unless all three are set)
EMAILJS_SERVICE_ID = get_setting('EMAILJS_SERVICE_ID')
EMAILJS_TEMPLATE_ID_APPROVAL = get_setting('EMAILJS_TEMPLATE_ID_APPROVAL')
EMAILJS_PUBLIC_KEY = get_setting('EMAILJS_PUBLIC_KEY')
EMAILJS_PRIVATE_KEY = get_setting('EMAILJS_PRIVATE_KEY')
EMAILJS_API_URL = get_setting('EMAILJS_API_URL', 'https://api.emailjs.com/api/v1.0/email/send')
EMAILJS_TIMEOUT = get_setting('EMAILJS_TIMEOUT', '10')

# Base URL used to build links inside emails
APP_URL = get_setting('APP_URL', 'http://localhost:5173')

# Email templates shipped with the package
EMAIL_TEMPLATES_DIR = get_setting(
    'EMAIL_TEMPLATES_DIR',
    str(Path(__file__).parent / 'email_system' / 'templates')
)
