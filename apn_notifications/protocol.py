"""
Legacy APNs "simple notification" framing

https://developer.apple.com/library/ios/
documentation/NetworkingInternet/Conceptual/RemoteNotificationsPG/Chapters/
LegacyFormat.html
"""
import struct
from binascii import hexlify, unhexlify
from collections import namedtuple

TOKEN_LENGTH = 32

# |COMMAND:2|TOKEN-LEN:2|{token:32}|PAYLOAD-LEN:1|{payload}
HEADER_FORMAT = "!HH{}sB".format(TOKEN_LENGTH)
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

# the length slot is a single byte
MAX_LENGTH_BYTE = 255

Frame = namedtuple('Frame', ['token', 'payload_length', 'payload'])


def pack_frame(token_hex: str, payload: bytes) -> bytes:
    token = unhexlify(token_hex)
    length = min(len(payload), MAX_LENGTH_BYTE)
    header = struct.pack(HEADER_FORMAT, 0, TOKEN_LENGTH, token, length)
    return header + payload


def unpack_frame(frame: bytes) -> Frame:
    if len(frame) < HEADER_SIZE:
        raise ValueError("frame is shorter than {} bytes".format(HEADER_SIZE))
    _, token_length, token, length = struct.unpack(
        HEADER_FORMAT, frame[:HEADER_SIZE])
    if token_length != TOKEN_LENGTH:
        raise ValueError("unexpected token length {}".format(token_length))
    return Frame(hexlify(token).decode(), length, frame[HEADER_SIZE:])


__all__ = ["TOKEN_LENGTH", "HEADER_SIZE", "Frame", "pack_frame", "unpack_frame"]
