"""Outcome notifications for mutating operations (the client's toast queue)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class QueueNotifier:
    """Buffers notifications until the presentation layer drains them."""

    def __init__(self, maxlen: int | None = 100) -> None:
        self._pending: deque[Notification] = deque(maxlen=maxlen)

    def notify(self, notification: Notification) -> None:
        logger.info(
            "notification",
            title=notification.title,
            variant=notification.variant.value,
        )
        self._pending.append(notification)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        drained = list(self._pending)
        self._pending.clear()
        return drained


def forbidden(action: str) -> Notification:
    return Notification(
        title="Forbidden",
        description=f"Only admins can {action}",
        variant=NotificationVariant.FORBIDDEN,
    )


def error(description: str) -> Notification:
    return Notification(title="Error", description=description, variant=NotificationVariant.DESTRUCTIVE)
