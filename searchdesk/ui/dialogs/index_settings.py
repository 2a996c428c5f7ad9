"""
索引设置对话框：选择目录并构建/刷新索引
"""
from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)


class IndexSettingsDialog(QDialog):
    def __init__(self, parent, config_mgr):
        super().__init__(parent)
        self.setWindowTitle("🔧 索引设置")
        self.setMinimumWidth(520)
        self.config_mgr = config_mgr

        layout = QVBoxLayout(self)
        form = QFormLayout()

        dir_row = QHBoxLayout()
        self.entry_dir = QLineEdit(config_mgr.get_last_index_dir())
        self.entry_dir.setPlaceholderText("选择要建立索引的目录")
        dir_row.addWidget(self.entry_dir, 1)
        btn_browse = QPushButton("📂 浏览")
        btn_browse.clicked.connect(self._browse)
        dir_row.addWidget(btn_browse)
        form.addRow("索引目录", dir_row)

        self.spin_page = QSpinBox()
        self.spin_page.setRange(5, 500)
        self.spin_page.setValue(config_mgr.get_results_page_size())
        form.addRow("每页结果数", self.spin_page)

        self.chk_scan = QCheckBox("启动时自动触发后台扫描")
        self.chk_scan.setChecked(config_mgr.get_scan_on_startup())
        form.addRow("", self.chk_scan)
        layout.addLayout(form)

        buttons = QDialogButtonBox()
        self.btn_build = buttons.addButton("🔄 构建索引", QDialogButtonBox.AcceptRole)
        buttons.addButton("仅保存设置", QDialogButtonBox.ApplyRole).clicked.connect(self._save_only)
        buttons.addButton(QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.build_requested = False

    def _browse(self):
        path = QFileDialog.getExistingDirectory(self, "选择目录", self.entry_dir.text())
        # empty string means the picker was cancelled
        if path:
            self.entry_dir.setText(path)

    def _save_settings(self):
        self.config_mgr.set_results_page_size(self.spin_page.value())
        self.config_mgr.set_scan_on_startup(self.chk_scan.isChecked())

    def _save_only(self):
        self._save_settings()
        self.build_requested = False
        QDialog.accept(self)

    def accept(self):
        self._save_settings()
        self.build_requested = True
        super().accept()

    def selected_directory(self):
        return self.entry_dir.text().strip()
