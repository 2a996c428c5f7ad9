"""
Main window (SearchApp): quick / advanced search tabs over one result table.
"""

import logging
import sys

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QApplication, QMainWindow

from ..config import ConfigManager
from ..constants import APP_NAME, ORG_NAME
from ..core.clipboard import ClipboardService, default_writers
from ..core.dispatcher import QueryDispatcher
from ..core.engine_client import SubprocessEngineClient
from ..core.notices import NoticeLevel, Notifier
from ..core.session import SearchSession
from ..utils import apply_theme, setup_logging
from .components.async_bridge import AsyncBridge
from .components.event_handlers import EventHandlers, RowActions
from .components.form_values import advanced_form_values
from .components.result_renderer import ResultRenderer
from .components.ui_builder import apply_column_ratios, bind_shortcuts, build_menubar, build_ui
from .dialogs.index_settings import IndexSettingsDialog

logger = logging.getLogger(__name__)

NOTICE_STYLES = {
    NoticeLevel.INFO: "color: #1677ff;",
    NoticeLevel.SUCCESS: "color: #389e0d;",
    NoticeLevel.WARNING: "color: #d48806;",
    NoticeLevel.ERROR: "color: #cf1322;",
}
NOTICE_TIMEOUT_MS = 3000


class UiSignals(QObject):
    """Carries loop-thread events to the GUI thread."""

    session_changed = Signal(object)
    notice_posted = Signal(object)


class SearchApp(QMainWindow):
    def __init__(self, config_mgr=None, engine=None):
        super().__init__()
        self.config_mgr = config_mgr or ConfigManager()
        self.setWindowTitle(f"🔍 {APP_NAME}")
        self.resize(1100, 720)

        self.signals = UiSignals()
        self.signals.session_changed.connect(self._on_session_changed)
        self.signals.notice_posted.connect(self._show_notice)

        self.bridge = AsyncBridge()
        self.bridge.start_loop()

        self.engine = engine or SubprocessEngineClient(self.config_mgr.get_engine_command())
        self.notifier = Notifier(self.signals.notice_posted.emit)
        self.session = SearchSession()
        self.session.subscribe(self.signals.session_changed.emit)
        self.dispatcher = QueryDispatcher(self.engine, self.session, self.notifier, self.config_mgr)
        self.clipboard = ClipboardService(default_writers(native=self._write_qt_clipboard))
        self.row_actions = RowActions(self.clipboard, self.notifier, engine=self.engine)

        self.handlers = EventHandlers(self)
        self.renderer = ResultRenderer(self, self.config_mgr.get_results_page_size())

        build_menubar(self)
        build_ui(self)
        bind_shortcuts(self)
        self.renderer.render_page()

        if self.config_mgr.get_scan_on_startup():
            QTimer.singleShot(0, self.trigger_scan)

    # ---------- clipboard ----------
    async def _write_qt_clipboard(self, text):
        await self.bridge.call_in_gui(lambda: QApplication.clipboard().setText(text))

    # ---------- search actions ----------
    def start_basic_search(self):
        self.tabs.setCurrentIndex(0)
        self.bridge.submit(self.dispatcher.dispatch_basic(self.entry_kw.text()))

    def _selected_file_type(self):
        text = self.combo_type.currentText().strip()
        idx = self.combo_type.findText(text)
        if idx >= 0:
            return self.combo_type.itemData(idx)
        return text

    def start_advanced_search(self):
        self.tabs.setCurrentIndex(1)
        values = advanced_form_values(
            self._selected_file_type(),
            self.entry_min_size.text(),
            self.entry_max_size.text(),
            self.entry_adv_query.text(),
        )
        self.bridge.submit(self.dispatcher.dispatch_advanced(values))

    def trigger_scan(self):
        self.bridge.submit(self.dispatcher.trigger_background_scan())

    def show_index_settings(self):
        dlg = IndexSettingsDialog(self, self.config_mgr)
        if not dlg.exec():
            return
        self.renderer.set_page_size(self.config_mgr.get_results_page_size())
        if dlg.build_requested:
            self.bridge.submit(self.dispatcher.build_index(dlg.selected_directory()))

    def on_theme_change(self, theme):
        self.config_mgr.set_theme(theme)
        apply_theme(QApplication.instance(), theme)

    # ---------- loop -> GUI ----------
    def _on_session_changed(self, snapshot):
        self.renderer.show_snapshot(snapshot)
        if snapshot.is_loading:
            self.status_bar.setStyleSheet("")
            self.status_bar.showMessage("⏳ 正在搜索...")
        elif snapshot.results:
            self.status_bar.showMessage(f"✅ 找到 {len(snapshot.results)} 个结果", NOTICE_TIMEOUT_MS)

    def _show_notice(self, notice):
        self.status_bar.setStyleSheet(NOTICE_STYLES.get(notice.level, ""))
        self.status_bar.showMessage(notice.message, NOTICE_TIMEOUT_MS)

    # ---------- Qt events ----------
    def showEvent(self, event):
        super().showEvent(event)
        QTimer.singleShot(0, lambda: apply_column_ratios(self))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        apply_column_ratios(self)

    def closeEvent(self, event):
        logger.info("主窗口关闭，停止后台任务")
        close = getattr(self.engine, "close", None)
        self.bridge.stop(cleanup=close)
        super().closeEvent(event)


def main():
    setup_logging()
    logger.info(f"🚀 {APP_NAME} 启动")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)

    config = ConfigManager()
    apply_theme(app, config.get_theme())

    win = SearchApp(config)
    win.show()

    sys.exit(app.exec())


__all__ = ["SearchApp", "main"]
