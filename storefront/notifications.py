"""
Cart Notifications

The engine reports user-facing outcomes (item added, duplicate add,
order placed, empty checkout) through an injected callback. Any callable
taking a :class:`Notification` works; two sinks are provided here.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

from storefront.logging import get_logger

logger = get_logger(__name__)


class NotificationVariant(str, Enum):
    """Toast style: destructive is shown as an error."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "variant": self.variant.value,
        }


Notifier = Callable[[Notification], None]


class LoggingNotifier:
    """Write notifications to the log instead of a UI."""

    def __init__(self, name: str = __name__):
        self._logger = get_logger(name)

    def __call__(self, notification: Notification) -> None:
        if notification.variant is NotificationVariant.DESTRUCTIVE:
            self._logger.warning(f"{notification.title}: {notification.description}")
        else:
            self._logger.info(f"{notification.title}: {notification.description}")


class NotificationCollector:
    """
    Keep notifications in memory until someone drains them.

    The HTTP layer uses this to return toasts alongside each response.
    """

    def __init__(self):
        self._pending: List[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self._pending.append(notification)

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        """Return and forget all pending notifications."""
        drained, self._pending = self._pending, []
        return drained
