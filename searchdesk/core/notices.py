"""
Notification channel between the core and whatever surface displays notices.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class NoticeLevel(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str


NoticeSink = Callable[[Notice], None]


class Notifier:
    """Fans a notice out to registered sinks.

    Sinks are plain callables; the Qt window registers one that re-emits the
    notice as a signal so it is shown on the GUI thread.
    """

    def __init__(self, *sinks: NoticeSink):
        self._sinks: List[NoticeSink] = list(sinks)

    def subscribe(self, sink: NoticeSink):
        self._sinks.append(sink)

    def notify(self, level: NoticeLevel, message: str) -> Notice:
        notice = Notice(level, message)
        for sink in list(self._sinks):
            sink(notice)
        return notice

    def info(self, message):
        return self.notify(NoticeLevel.INFO, message)

    def success(self, message):
        return self.notify(NoticeLevel.SUCCESS, message)

    def warning(self, message):
        return self.notify(NoticeLevel.WARNING, message)

    def error(self, message):
        return self.notify(NoticeLevel.ERROR, message)


__all__ = ["NoticeLevel", "Notice", "NoticeSink", "Notifier"]
