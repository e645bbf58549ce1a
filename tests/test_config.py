import pytest
from pydantic import ValidationError

from email_system.config import DEFAULT_APP_URL, DEFAULT_TIMEOUT, EmailConfig


def test_empty_config_is_not_configured():
    config = EmailConfig()

    assert not config.is_configured
    assert config.missing_keys() == [
        'EMAILJS_SERVICE_ID',
        'EMAILJS_TEMPLATE_ID_APPROVAL',
        'EMAILJS_PUBLIC_KEY',
    ]


def test_blank_values_count_as_missing():
    config = EmailConfig(service_id='service_x', template_id='  ', public_key='')

    assert config.template_id is None
    assert config.public_key is None
    assert config.missing_keys() == ['EMAILJS_TEMPLATE_ID_APPROVAL', 'EMAILJS_PUBLIC_KEY']


def test_complete_config(configured_config):
    assert configured_config.is_configured
    assert configured_config.missing_keys() == []


def test_private_key_is_optional():
    config = EmailConfig(service_id='s', template_id='t', public_key='p', private_key=' ')

    assert config.is_configured
    assert config.private_key is None


def test_login_url_default():
    assert EmailConfig().login_url == 'http://localhost:5173/login'


def test_login_url_from_app_url():
    config = EmailConfig(app_url='https://app.example.com')
    assert config.login_url == 'https://app.example.com/login'


def test_app_url_trailing_slash_stripped():
    config = EmailConfig(app_url='https://app.example.com/')
    assert config.login_url == 'https://app.example.com/login'


def test_blank_app_url_uses_default():
    assert EmailConfig(app_url='').app_url == DEFAULT_APP_URL
    assert EmailConfig(app_url=None).app_url == DEFAULT_APP_URL


def test_from_settings(emailjs_settings):
    emailjs_settings(
        EMAILJS_SERVICE_ID='service_env',
        EMAILJS_TEMPLATE_ID_APPROVAL='template_env',
        EMAILJS_PUBLIC_KEY='pk_env',
        APP_URL='https://alumni.example.org',
        EMAILJS_TIMEOUT=5,
    )

    config = EmailConfig.from_settings()

    assert config.is_configured
    assert config.service_id == 'service_env'
    assert config.login_url == 'https://alumni.example.org/login'
    assert config.timeout == 5


def test_from_settings_unconfigured(emailjs_settings):
    config = EmailConfig.from_settings()

    assert not config.is_configured
    assert config.app_url == DEFAULT_APP_URL


def test_timeout_parsed_from_string():
    assert EmailConfig(timeout=' 15 ').timeout == 15


def test_blank_timeout_uses_default():
    assert EmailConfig(timeout='').timeout == DEFAULT_TIMEOUT
    assert EmailConfig(timeout=None).timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize('value', ['soon', '0', '-5'])
def test_invalid_timeout_rejected(value):
    with pytest.raises(ValidationError):
        EmailConfig(timeout=value)


def test_from_settings_invalid_timeout(emailjs_settings):
    emailjs_settings(EMAILJS_TIMEOUT='soon')

    with pytest.raises(ValidationError):
        EmailConfig.from_settings()


def test_timeout_setting_is_raw_string():
    import settings

    assert isinstance(settings.EMAILJS_TIMEOUT, str)
