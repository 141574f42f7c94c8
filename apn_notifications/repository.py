"""Storage for notifications waiting to be delivered."""
import abc
import datetime
import itertools
import logging
from collections import OrderedDict
from typing import List, Optional

from .errors import NotificationNotFound
from .notification import Notification

logger = logging.getLogger(__name__)


class NotificationRepository(abc.ABC):

    @abc.abstractmethod
    def save(self, notification: Notification) -> Notification:
        """Store ``notification``, assigning an id if it has none."""

    @abc.abstractmethod
    def get(self, identifier) -> Notification:
        """Raise :class:`NotificationNotFound` for unknown ids."""

    @abc.abstractmethod
    def unsent(self) -> List[Notification]:
        """Notifications with a device and no ``sent_at``, oldest first."""

    def unsent_ids(self) -> list:
        return [notification.id for notification in self.unsent()]

    def mark_sent(self, notification: Notification,
                  when: Optional[datetime.datetime] = None) -> Notification:
        if when is None:
            when = datetime.datetime.now(datetime.timezone.utc)
        notification.sent_at = when
        return self.save(notification)


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self):
        self._notifications = OrderedDict()
        self._ids = itertools.count(1)

    def save(self, notification):
        if notification.id is None:
            notification.id = next(self._ids)
        self._notifications[notification.id] = notification
        logger.debug("saved notification %s", notification.id)
        return notification

    def get(self, identifier):
        try:
            return self._notifications[identifier]
        except KeyError:
            raise NotificationNotFound(identifier) from None

    def unsent(self):
        return [n for n in self._notifications.values()
                if n.sent_at is None and n.device is not None]

    def __len__(self):
        return len(self._notifications)


__all__ = ["NotificationRepository", "InMemoryNotificationRepository"]
