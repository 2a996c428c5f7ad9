import logging
from typing import Awaitable, Callable, Optional

from ...constants import (
    MSG_COPY_FAILED,
    MSG_INVALID_PATH,
    MSG_LOCATION_OPENED,
    MSG_NO_PARENT,
    MSG_OPEN_LOCATION_FAILED,
    MSG_PATH_COPIED,
    MSG_PREVIEW_FAILED,
)
from ...core.errors import ClipboardError, OpenLocationError
from ...core.file_operations import open_directory as os_open_directory
from ...core.paths import directory_of, has_parent
from .highlight import build_preview_html

logger = logging.getLogger(__name__)


class RowActions:
    """Per-row actions of the results table, free of any widget code.

    Failures are reported through the notifier and never touch the search
    session.
    """

    def __init__(
        self,
        clipboard,
        notifier,
        engine=None,
        open_directory: Callable[[str], Awaitable[None]] = os_open_directory,
        resolve_directory: Callable[[str], str] = directory_of,
    ):
        self.clipboard = clipboard
        self.notifier = notifier
        self.engine = engine
        self.open_directory = open_directory
        self.resolve_directory = resolve_directory

    async def copy_path(self, path: str) -> bool:
        if not path:
            logger.warning("无法复制: 文件路径为空")
            self.notifier.warning(MSG_INVALID_PATH)
            return False
        try:
            await self.clipboard.copy_text(path)
        except ClipboardError as e:
            logger.error(f"复制文件路径失败: {path} ({e.kind.value})")
            self.notifier.error(MSG_COPY_FAILED)
            return False
        self.notifier.success(MSG_PATH_COPIED)
        return True

    async def open_location(self, path: str) -> bool:
        if not path:
            logger.warning("无法打开位置: 文件路径为空")
            self.notifier.warning(MSG_INVALID_PATH)
            return False
        directory = self.resolve_directory(path)
        if not has_parent(path) or not directory:
            logger.warning(f"无法定位上级目录: {path}")
            self.notifier.warning(MSG_NO_PARENT)
            return False
        logger.info(f"打开文件位置: {directory}")
        try:
            await self.open_directory(directory)
        except OpenLocationError as e:
            logger.error(f"打开文件位置失败: {e}")
            self.notifier.error(MSG_OPEN_LOCATION_FAILED)
            return False
        self.notifier.success(MSG_LOCATION_OPENED)
        return True

    async def load_preview(self, path: str, query: str = "") -> Optional[str]:
        """Fetch file text from the engine and return preview HTML, highlighted when a query is given."""
        if not path:
            self.notifier.warning(MSG_INVALID_PATH)
            return None
        try:
            content = await self.engine.preview_file(path)
            highlighted = await self.engine.highlight_content(content, query) if query.strip() else None
        except Exception:
            logger.exception(f"文件预览失败: {path}")
            self.notifier.error(MSG_PREVIEW_FAILED)
            return None
        return build_preview_html(content, highlighted)


class EventHandlers:
    """Qt-side glue: turns table button clicks into RowActions coroutines."""

    def __init__(self, main):
        self.main = main

    def _model_at(self, row: int):
        return self.main.renderer.row_model(row)

    def copy_path_at(self, row: int):
        vm = self._model_at(row)
        self.main.bridge.submit(self.main.row_actions.copy_path(vm.path if vm else ""))

    def open_location_at(self, row: int):
        vm = self._model_at(row)
        self.main.bridge.submit(self.main.row_actions.open_location(vm.path if vm else ""))

    def preview_at(self, row: int):
        from ..dialogs.preview_dialog import PreviewDialog

        vm = self._model_at(row)
        if vm is None or not vm.path:
            self.main.notifier.warning(MSG_INVALID_PATH)
            return
        dialog = PreviewDialog(self.main, vm.path, vm.name)
        self.main.bridge.submit(
            self.main.row_actions.load_preview(vm.path, self.main.renderer.query),
            on_done=dialog.set_preview,
        )
        dialog.show()

    def on_double_click(self, row: int, column: int):  # noqa: ARG002
        self.open_location_at(row)
