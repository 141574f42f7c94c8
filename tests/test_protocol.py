import json
import struct

import pytest

from apn_notifications import Notification, pack_frame, unpack_frame
from apn_notifications.protocol import HEADER_SIZE

from .conftest import TOKEN


def test_header_layout():
    frame = pack_frame(TOKEN, b'{}')
    assert HEADER_SIZE == 37
    assert frame[:4] == b'\x00\x00\x00\x20'
    assert frame[4:36] == bytes.fromhex(TOKEN)
    assert frame[36] == 2
    assert frame[37:] == b'{}'


def test_length_byte_capped():
    payload = b'x' * 300
    frame = pack_frame(TOKEN, payload)
    assert frame[36] == 255
    assert frame[37:] == payload


def test_unpack_frame():
    frame = unpack_frame(pack_frame(TOKEN, b'{"aps":{}}'))
    assert frame.token == TOKEN
    assert frame.payload_length == 10
    assert frame.payload == b'{"aps":{}}'


def test_unpack_frame_short():
    with pytest.raises(ValueError):
        unpack_frame(b'\x00\x00')


def test_unpack_frame_bad_token_length():
    data = struct.pack("!HH32sB", 0, 16, b'\x00' * 32, 0)
    with pytest.raises(ValueError):
        unpack_frame(data)


def test_message_round_trip(notification):
    frame = unpack_frame(notification.generate_message())
    assert frame.token == TOKEN
    assert json.loads(frame.payload.decode('utf-8')) == notification.as_dict()


def test_message_for_sending(notification):
    notification.custom_properties = None
    payload = b'{"aps":{"alert":"Hello!","badge":5,"sound":"my_sound.aiff"}}'
    expected = b'\x00\x00\x00 ' + bytes.fromhex(TOKEN) + bytes([len(payload)]) + payload
    assert notification.message_for_sending() == expected


def test_generate_message_with_token_string():
    n = Notification(alert='hi')
    message = n.generate_message('<' + TOKEN[:8] + ' ' + TOKEN[8:] + '>')
    assert unpack_frame(message).token == TOKEN


def test_generate_message_without_device():
    with pytest.raises(ValueError):
        Notification(alert='hi').generate_message()
