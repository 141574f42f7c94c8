class APNError(Exception):
    pass


class TruncationFailure(APNError):
    def __init__(self, identifier, alert):
        super().__init__()
        self.identifier = identifier
        self.alert = alert

    def __repr__(self):
        return "TruncationFailure(identifier={!r}, alert={!r})".format(
            self.identifier, self.alert)

    def __str__(self):
        return "could not fit notification {} into a payload".format(
            self.identifier)


class ExceededMessageSizeError(APNError):
    def __init__(self, message: bytes):
        super().__init__()
        self.message = message

    @property
    def size(self) -> int:
        return len(self.message)

    def __repr__(self):
        return "ExceededMessageSizeError(size={})".format(self.size)

    def __str__(self):
        return "message of {} bytes is too big to send".format(self.size)


class InvalidDeviceToken(APNError):
    def __init__(self, token):
        super().__init__()
        self.token = token

    def __str__(self):
        return "invalid device token {!r}".format(self.token)


class NotificationNotFound(APNError):
    def __init__(self, identifier):
        super().__init__()
        self.identifier = identifier

    def __str__(self):
        return "notification {} not found".format(self.identifier)
