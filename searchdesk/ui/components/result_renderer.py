"""
Result renderer: pure helpers for cells & pagination (testable without Qt) and a
`ResultRenderer` class that draws the current session snapshot into the main
window's QTableWidget.
"""
from typing import List, Sequence, Tuple

from ...constants import DEFAULT_PAGE_SIZE, MSG_NO_RESULTS, MSG_PATH_UNAVAILABLE, MSG_UNKNOWN_NAME
from ...core.models import FileViewModel
from ...utils import format_size, format_time

# (key, header) in display order
COLUMNS = [
    ("name", "文件名"),
    ("path", "文件路径"),
    ("size", "文件大小"),
    ("modified", "修改时间"),
    ("actions", "操作"),
]
COLUMN_INDEX = {key: i for i, (key, _) in enumerate(COLUMNS)}
# relative column widths
COLUMN_RATIOS = [0.22, 0.30, 0.15, 0.18, 0.15]


def paginate_items(items: Sequence, page_size: int, current_page: int) -> Tuple[List, int]:
    """Return (page_items, total_pages)"""
    page_size = page_size if page_size > 0 else DEFAULT_PAGE_SIZE
    total = len(items)
    total_pages = max(1, (total + page_size - 1) // page_size)
    current_page = max(1, min(current_page, total_pages))
    start = (current_page - 1) * page_size
    end = start + page_size
    return list(items[start:end]), total_pages


def needs_pagination(count: int, page_size: int) -> bool:
    return count > page_size


def build_row_cells(vm: FileViewModel) -> dict:
    """Display strings for one row, keyed like COLUMNS (no actions cell)."""
    return {
        "name": vm.name or MSG_UNKNOWN_NAME,
        "path": vm.path or MSG_PATH_UNAVAILABLE,
        "size": format_size(vm.size_bytes),
        "modified": format_time(vm.modified_epoch_seconds),
    }


def page_label(current_page: int, total_pages: int, total: int) -> str:
    return f"第 {current_page}/{total_pages} 页 (共 {total} 条结果)"


class ResultRenderer:
    """Draws results into ``main.table`` and keeps pagination state.

    Results are shown in the order the engine returned them.
    """

    def __init__(self, main, page_size: int = DEFAULT_PAGE_SIZE):
        self.main = main
        self.page_size = page_size if page_size > 0 else DEFAULT_PAGE_SIZE
        self.results: Tuple[FileViewModel, ...] = ()
        self.loading = False
        self.query = ""
        self.current_page = 1
        self.total_pages = 1

    # ---------- state ----------
    def show_snapshot(self, snapshot):
        self.results = tuple(snapshot.results)
        self.loading = snapshot.is_loading
        self.query = snapshot.query
        self.current_page = 1
        self.render_page()

    def set_page_size(self, page_size: int):
        if page_size > 0 and page_size != self.page_size:
            self.page_size = page_size
            self.current_page = 1
            self.render_page()

    def row_model(self, row: int):
        idx = (self.current_page - 1) * self.page_size + row
        if 0 <= idx < len(self.results):
            return self.results[idx]
        return None

    # ---------- pagination ----------
    def update_page_info(self):
        total = len(self.results)
        _, self.total_pages = paginate_items(self.results, self.page_size, self.current_page)
        visible = needs_pagination(total, self.page_size)
        self.main.page_bar.setVisible(visible)
        self.main.lbl_page.setText(page_label(self.current_page, self.total_pages, total))
        self.main.btn_first.setEnabled(self.current_page > 1)
        self.main.btn_prev.setEnabled(self.current_page > 1)
        self.main.btn_next.setEnabled(self.current_page < self.total_pages)
        self.main.btn_last.setEnabled(self.current_page < self.total_pages)

    def go_page(self, action: str):
        if action == "first":
            self.current_page = 1
        elif action == "prev" and self.current_page > 1:
            self.current_page -= 1
        elif action == "next" and self.current_page < self.total_pages:
            self.current_page += 1
        elif action == "last":
            self.current_page = self.total_pages
        self.render_page()

    # ---------- drawing ----------
    def render_page(self):
        from PySide6.QtCore import Qt
        from PySide6.QtWidgets import QTableWidgetItem

        table = self.main.table
        self.update_page_info()
        page_items, _ = paginate_items(self.results, self.page_size, self.current_page)

        self.main.lbl_loading.setVisible(self.loading)
        self.main.lbl_empty.setVisible(not self.loading and not self.results)
        self.main.lbl_empty.setText(MSG_NO_RESULTS)

        table.setUpdatesEnabled(False)
        try:
            table.clearContents()
            table.setRowCount(len(page_items))
            for row, vm in enumerate(page_items):
                cells = build_row_cells(vm)
                for key in ("name", "path", "size", "modified"):
                    item = QTableWidgetItem(cells[key])
                    item.setFlags(item.flags() & ~Qt.ItemIsEditable)
                    if key in ("name", "path"):
                        item.setToolTip(vm.path if key == "path" else cells[key])
                    else:
                        item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                    table.setItem(row, COLUMN_INDEX[key], item)
                table.setCellWidget(row, COLUMN_INDEX["actions"], self._build_actions(row, vm))
        finally:
            table.setUpdatesEnabled(True)

    def _build_actions(self, row: int, vm: FileViewModel):
        from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

        box = QWidget()
        layout = QHBoxLayout(box)
        layout.setContentsMargins(2, 0, 2, 0)
        layout.setSpacing(4)

        has_path = bool(vm.path)
        btn_copy = QPushButton("📋")
        btn_copy.setToolTip("复制路径")
        btn_copy.setEnabled(has_path)
        btn_copy.clicked.connect(lambda _=False, r=row: self.main.handlers.copy_path_at(r))
        layout.addWidget(btn_copy)

        btn_open = QPushButton("打开位置")
        btn_open.setEnabled(has_path)
        btn_open.clicked.connect(lambda _=False, r=row: self.main.handlers.open_location_at(r))
        layout.addWidget(btn_open)

        btn_preview = QPushButton("预览")
        btn_preview.setEnabled(has_path)
        btn_preview.clicked.connect(lambda _=False, r=row: self.main.handlers.preview_at(r))
        layout.addWidget(btn_preview)
        return box


__all__ = [
    "COLUMNS",
    "COLUMN_RATIOS",
    "paginate_items",
    "needs_pagination",
    "build_row_cells",
    "page_label",
    "ResultRenderer",
]
