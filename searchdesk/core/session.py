"""
Per-surface search state: current results, loading flag and request epochs.
"""

import logging
from typing import Callable, List, Sequence, Tuple

from .models import FileViewModel

logger = logging.getLogger(__name__)

SessionListener = Callable[["SessionSnapshot"], None]


class SessionSnapshot:
    """Immutable view of a session handed to presenters."""

    __slots__ = ("results", "is_loading", "epoch", "query")

    def __init__(self, results: Tuple[FileViewModel, ...], is_loading: bool, epoch: int, query: str = ""):
        self.results = results
        self.is_loading = is_loading
        self.epoch = epoch
        self.query = query

    def __repr__(self):
        return f"SessionSnapshot(results={len(self.results)}, is_loading={self.is_loading}, epoch={self.epoch})"


class SearchSession:
    """State of one search surface.

    Only the dispatcher writes to a session, always from the event loop that
    runs dispatches. Each ``begin`` issues a new epoch; ``complete`` and
    ``fail`` are ignored for any epoch other than the latest one, so the
    most recently issued search decides what is shown.
    """

    def __init__(self):
        self.current_results: List[FileViewModel] = []
        self.is_loading = False
        self.last_query = ""
        self._epoch = 0
        self._listeners: List[SessionListener] = []

    @property
    def epoch(self) -> int:
        return self._epoch

    def subscribe(self, listener: SessionListener):
        self._listeners.append(listener)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(tuple(self.current_results), self.is_loading, self._epoch, self.last_query)

    def _changed(self):
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    def is_current(self, epoch: int) -> bool:
        return epoch == self._epoch

    def begin(self, query_text: str = "") -> int:
        """Clear results, enter loading state and return the new epoch."""
        self._epoch += 1
        self.current_results = []
        self.is_loading = True
        self.last_query = query_text
        self._changed()
        return self._epoch

    def complete(self, epoch: int, results: Sequence[FileViewModel]) -> bool:
        """Replace results if ``epoch`` is still current. Returns whether applied."""
        if not self.is_current(epoch):
            logger.debug(f"丢弃过期搜索结果: epoch={epoch}, current={self._epoch}")
            return False
        self.current_results = list(results)
        self.is_loading = False
        self._changed()
        return True

    def fail(self, epoch: int) -> bool:
        if not self.is_current(epoch):
            logger.debug(f"忽略过期搜索错误: epoch={epoch}, current={self._epoch}")
            return False
        self.is_loading = False
        self._changed()
        return True


__all__ = ["SearchSession", "SessionSnapshot", "SessionListener"]
