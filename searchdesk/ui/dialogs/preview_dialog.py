"""
文件预览对话框
"""
import os

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QTextEdit, QVBoxLayout

from ...constants import MSG_PREVIEW_FAILED


class PreviewDialog(QDialog):
    """文件预览对话框，内容由搜索引擎提供"""

    def __init__(self, parent=None, filepath="", name=""):
        super().__init__(parent)
        self.setWindowTitle(f"👁️ 文件预览 - {name or os.path.basename(filepath)}")
        self.setMinimumSize(800, 560)
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.filepath = filepath

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.info_label = QLabel(filepath)
        self.info_label.setStyleSheet("color: #666;")
        self.info_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.info_label)

        self.text = QTextEdit()
        self.text.setReadOnly(True)
        self.text.setFont(QFont("Consolas", 10))
        self.text.setPlainText("⏳ 加载中...")
        layout.addWidget(self.text, 1)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        close_btn = QPushButton("关闭")
        close_btn.clicked.connect(self.accept)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)

    def set_preview(self, html):
        """Show engine-provided preview HTML; ``None`` means loading failed."""
        if html is None:
            self.text.setPlainText(MSG_PREVIEW_FAILED)
            return
        self.text.setHtml(html)
