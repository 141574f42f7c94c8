import string
from binascii import unhexlify

from .errors import InvalidDeviceToken
from .protocol import TOKEN_LENGTH

_STRIP = ' <>'


class Device:
    """
    Device a notification is addressed to.

    ``token`` is accepted the way clients usually report it, e.g.
    ``<740f4707 bebcf74f ...>``; spaces and angle brackets are dropped.
    """

    def __init__(self, token: str, *, id=None):
        self.token = token
        self.id = id
        self._hex = ''.join(c for c in token if c not in _STRIP).lower()
        if (len(self._hex) != TOKEN_LENGTH * 2 or
                any(c not in string.hexdigits for c in self._hex)):
            raise InvalidDeviceToken(token)

    def to_hex(self) -> str:
        return self._hex

    @property
    def token_bytes(self) -> bytes:
        return unhexlify(self._hex)

    def __eq__(self, other):
        if not isinstance(other, Device):
            return NotImplemented
        return self._hex == other._hex

    def __hash__(self):
        return hash(self._hex)

    def __repr__(self):
        return "Device({!r})".format(self._hex)


__all__ = ["Device"]
