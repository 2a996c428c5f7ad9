"""
Runs the asyncio event loop that owns the search session on a worker thread.

All core coroutines (dispatches, row actions, engine calls) are submitted
here, so they share one loop and never run concurrently with each other.
Results travel back to the GUI thread through queued Qt signals.
"""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Awaitable, Callable, Optional

from PySide6.QtCore import QObject, Qt, QThread, Signal

logger = logging.getLogger(__name__)


class _Relay(QObject):
    """Lives on the GUI thread; signals emitted from the loop thread are queued to it."""

    done = Signal(object, object)
    invoke = Signal(object)

    def __init__(self):
        super().__init__()
        self.done.connect(self._deliver, Qt.QueuedConnection)
        self.invoke.connect(self._run, Qt.QueuedConnection)

    def _deliver(self, callback, future):
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(f"后台任务失败: {exc!r}")
            return
        callback(future.result())

    def _run(self, job):
        fn, loop, fut = job
        try:
            result = fn()
        except Exception as e:
            loop.call_soon_threadsafe(_settle, fut, None, e)
        else:
            loop.call_soon_threadsafe(_settle, fut, result, None)


def _settle(fut, result, exc):
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(result)


class AsyncBridge(QThread):
    """QThread hosting a dedicated asyncio loop.

    Must be constructed on the GUI thread.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self._ready = threading.Event()
        self._relay = _Relay()

    def run(self):
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self.loop = loop
        self._ready.set()
        logger.info("异步事件循环已启动")
        try:
            loop.run_forever()
        finally:
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()
            logger.info("异步事件循环已关闭")

    def start_loop(self):
        self.start()
        self._ready.wait()

    def submit(self, coro: Awaitable, on_done: Callable = None) -> concurrent.futures.Future:
        """Schedule ``coro`` on the loop; ``on_done(result)`` runs on the GUI thread."""
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        if on_done is not None:
            future.add_done_callback(lambda f: self._relay.done.emit(on_done, f))
        return future

    async def call_in_gui(self, fn: Callable):
        """Await ``fn()`` executed on the GUI thread (for Qt objects such as the clipboard)."""
        loop = asyncio.get_running_loop()
        fut = loop.create_future()
        self._relay.invoke.emit((fn, loop, fut))
        return await fut

    def stop(self, cleanup: Callable[[], Awaitable] = None, timeout: float = 5):
        if self.loop is None or not self.isRunning():
            return
        if cleanup is not None:
            try:
                asyncio.run_coroutine_threadsafe(cleanup(), self.loop).result(timeout=timeout)
            except Exception as e:
                logger.warning(f"清理后台任务超时或失败: {e!r}")
        self.loop.call_soon_threadsafe(self.loop.stop)
        self.wait(int(timeout * 1000))


__all__ = ["AsyncBridge"]
