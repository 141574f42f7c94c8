import json
import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from .device import Device
from .errors import ExceededMessageSizeError, TruncationFailure
from .protocol import pack_frame
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

ALERT_LENGTH = 130
# to_json gives up once the alert would have to be this short
MIN_ALERT_LENGTH = 80
TRUNCATION_STEP = 10
# message_for_sending cuts the alert to this many characters as a last resort
FORCED_ALERT_LENGTH = 80
MAX_PAYLOAD_SIZE = 2048

DEFAULT_SOUND = '1.aiff'
OMISSION = '...'


def truncate(text: str, length: int, omission: str = OMISSION) -> str:
    if len(text) <= length:
        return text
    return text[:length - len(omission)] + omission


class Notification:
    """
    A message for a single device.

    ``sound`` is either a file name or ``True`` for the default sound.
    ``custom_properties`` end up next to ``aps`` in the payload, stringified.

    Example::

        >>> n = Notification(alert='Hello!', badge=5, sound='my_sound.aiff')
        >>> n.as_dict()
        {'aps': {'alert': 'Hello!', 'badge': 5, 'sound': 'my_sound.aiff'}}
    """

    def __init__(self,
                 alert: Optional[str] = None,
                 badge: Optional[int] = None,
                 sound: Optional[Union[str, bool]] = None,
                 custom_properties: Optional[Mapping[str, Any]] = None,
                 device: Optional[Device] = None,
                 *, id=None, sent_at=None):
        self.id = id
        self.badge = badge
        self.sound = sound
        self.custom_properties = custom_properties
        self.device = device
        self.sent_at = sent_at
        self._alert = None
        self.alert = alert

    @property
    def alert(self) -> Optional[str]:
        return self._alert

    @alert.setter
    def alert(self, message: Optional[str]):
        self.set_alert(message)

    def set_alert(self, message: Optional[str], truncate_at: int = ALERT_LENGTH):
        if message and len(message) > truncate_at:
            message = truncate(message, truncate_at)
        self._alert = message

    @property
    def sent(self) -> bool:
        return self.sent_at is not None

    def as_dict(self, truncate_at: int = ALERT_LENGTH) -> dict:
        aps = dict()
        if self.alert is not None:
            aps['alert'] = truncate(self.alert, truncate_at)
        if self.badge is not None:
            aps['badge'] = int(self.badge)
        if self.sound is True:
            aps['sound'] = DEFAULT_SOUND
        elif isinstance(self.sound, str):
            aps['sound'] = self.sound
        result = {'aps': aps}
        if self.custom_properties:
            for key, value in self.custom_properties.items():
                result[str(key)] = str(value)
        return result

    def to_json(self, truncate_at: int = ALERT_LENGTH, *,
                max_size: int = MAX_PAYLOAD_SIZE) -> str:
        while True:
            if truncate_at <= MIN_ALERT_LENGTH:
                raise TruncationFailure(self.id, self.alert)
            data = json.dumps(self.as_dict(truncate_at), ensure_ascii=False,
                              separators=(',', ':'))
            if len(data.encode()) <= max_size:
                return data
            logger.debug("payload of notification %s is %d bytes, "
                         "truncating alert to %d", self.id,
                         len(data.encode()), truncate_at - TRUNCATION_STEP)
            truncate_at -= TRUNCATION_STEP

    def generate_message(self, device: Optional[Union[Device, str]] = None, *,
                         max_payload_size: int = MAX_PAYLOAD_SIZE) -> bytes:
        token_hex = _token_hex(device if device is not None else self.device)
        payload = self.to_json(max_size=max_payload_size).encode()
        return pack_frame(token_hex, payload)

    def message_for_sending(self, device: Optional[Union[Device, str]] = None,
                            *, auto_truncate: Optional[bool] = None,
                            settings: Optional[Settings] = None) -> bytes:
        if settings is None:
            settings = get_settings()
        if auto_truncate is None:
            auto_truncate = settings.auto_truncate
        message = self.generate_message(
            device, max_payload_size=settings.max_payload_size)
        if len(message) <= settings.max_message_size:
            return message
        if self.alert is not None:
            logger.info("message for notification %s is %d bytes, "
                        "cutting alert to %d characters", self.id,
                        len(message), FORCED_ALERT_LENGTH)
            self.alert = self.alert[:FORCED_ALERT_LENGTH] + OMISSION
            message = self.generate_message(
                device, max_payload_size=settings.max_payload_size)
        if len(message) > settings.max_message_size:
            if not auto_truncate:
                raise ExceededMessageSizeError(message)
            logger.warning("sending oversized message (%d bytes) for "
                           "notification %s", len(message), self.id)
        return message

    def __repr__(self):
        return "{}(id={!r}, alert={!r})".format(
            type(self).__name__, self.id, self.alert)


class GroupNotification(Notification):
    """A notification sent to every device of a group."""

    def __init__(self, *args, group_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.group_id = group_id

    def message_for_sending(self, device: Union[Device, str], **kwargs) -> bytes:
        return super().message_for_sending(device, **kwargs)

    def messages_for_sending(self, devices: Iterable[Union[Device, str]],
                             **kwargs) -> Iterator[bytes]:
        for device in devices:
            yield self.message_for_sending(device, **kwargs)


def _token_hex(device: Optional[Union[Device, str]]) -> str:
    if device is None:
        raise ValueError("notification has no device")
    if isinstance(device, str):
        device = Device(device)
    return device.to_hex()


__all__ = ["Notification", "GroupNotification", "truncate"]
