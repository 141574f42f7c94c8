import os

import pytest

from apn_notifications import Device, Notification
from apn_notifications.settings import get_settings

TOKEN = "740f4707bebcf74f9b7c25d48e3358945f6aa01da5ddb387462c7eaf61bb78ad"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.startswith("APN_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def device():
    return Device(TOKEN)


@pytest.fixture
def notification(device):
    return Notification(alert='Hello!', badge=5, sound='my_sound.aiff',
                        custom_properties={'typ': 1}, device=device, id=1)
