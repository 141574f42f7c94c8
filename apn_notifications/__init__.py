from .device import Device
from .errors import (APNError, TruncationFailure, ExceededMessageSizeError,
                     InvalidDeviceToken, NotificationNotFound)
from .notification import Notification, GroupNotification
from .protocol import Frame, pack_frame, unpack_frame
from .repository import NotificationRepository, InMemoryNotificationRepository
from .settings import Settings, get_settings

__all__ = ['Device', 'APNError', 'TruncationFailure', 'ExceededMessageSizeError',
           'InvalidDeviceToken', 'NotificationNotFound', 'Notification',
           'GroupNotification', 'Frame', 'pack_frame', 'unpack_frame',
           'NotificationRepository', 'InMemoryNotificationRepository',
           'Settings', 'get_settings']
