import pytest
from pydantic import ValidationError

from apn_notifications import Settings, get_settings


def test_defaults():
    settings = get_settings()
    assert settings.auto_truncate is False
    assert settings.max_payload_size == 2048
    assert settings.max_message_size == 2048


def test_environment(monkeypatch):
    monkeypatch.setenv("APN_AUTO_TRUNCATE", "1")
    monkeypatch.setenv("APN_MAX_MESSAGE_SIZE", "256")
    settings = Settings()
    assert settings.auto_truncate is True
    assert settings.max_message_size == 256


def test_positive_sizes():
    with pytest.raises(ValidationError):
        Settings(max_payload_size=0)
