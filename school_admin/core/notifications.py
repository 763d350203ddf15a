from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional
from school_admin.utils.logger import logger


@dataclass(frozen=True)
class Notification:
    """A transient user-visible message (the screens' toast)."""
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


NotificationSink = Callable[[Notification], None]


class Notifier:
    def __init__(self, history_size: int = 50):
        self.history: Deque[Notification] = deque(maxlen=history_size)
        self._sinks: List[NotificationSink] = []

    def subscribe(self, sink: NotificationSink) -> None:
        self._sinks.append(sink)

    def notify(self, notification: Notification) -> Notification:
        self.history.append(notification)
        if notification.is_error:
            logger.warning(f"{notification.title}: {notification.description}")
        else:
            logger.info(f"{notification.title}: {notification.description}")
        for sink in self._sinks:
            sink(notification)
        return notification

    def success(self, description: str) -> Notification:
        return self.notify(Notification(title="Success", description=description))

    def error(self, description: str) -> Notification:
        return self.notify(Notification(title="Error", description=description, variant="destructive"))

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None
