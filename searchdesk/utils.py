"""
Formatting and application helpers shared by the core and the Qt views.
"""

import datetime
import logging
import os

from .constants import LOG_DIR, NOT_AVAILABLE

logger = logging.getLogger(__name__)

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024


def setup_logging(level=logging.INFO):
    """Configure root logging to the app log file and stderr."""
    os.environ.setdefault("QT_LOGGING_RULES", "*.debug=false;*.warning=false")
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(LOG_DIR / "app.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def format_size(size):
    """Format a byte count as B / KB / MB / GB with one decimal above bytes."""
    size = size or 0
    if size < KB:
        return f"{size} B"
    if size < MB:
        return f"{size / KB:.1f} KB"
    if size < GB:
        return f"{size / MB:.1f} MB"
    return f"{size / GB:.1f} GB"


def format_time(timestamp):
    """Format epoch seconds as local ``YYYY-MM-DD HH:mm``."""
    if not timestamp:
        return NOT_AVAILABLE
    try:
        return datetime.datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")
    except (OSError, OverflowError, ValueError) as e:
        logger.warning(f"时间戳格式化失败: {timestamp}, {e}")
        return NOT_AVAILABLE


def apply_theme(app, theme_name):
    """Apply light/dark theme to a Qt app."""
    if theme_name == "dark":
        app.setStyleSheet(
            """
            QMainWindow, QDialog { background-color: #2d2d2d; color: #ffffff; }
            QTableWidget { background-color: #3d3d3d; color: #ffffff; alternate-background-color: #454545; }
            QTableWidget::item:selected { background-color: #0078d4; }
            QLineEdit, QComboBox, QSpinBox, QTextEdit { background-color: #3d3d3d; color: #ffffff; border: 1px solid #555; padding: 4px; }
            QPushButton { background-color: #4d4d4d; color: #ffffff; border: 1px solid #666; padding: 5px 10px; }
            QPushButton:hover { background-color: #5d5d5d; }
            QPushButton:disabled { color: #888888; }
            QLabel { color: #ffffff; }
            QTabWidget::pane { border: 1px solid #555; }
            QTabBar::tab { background-color: #3d3d3d; color: #ffffff; padding: 6px 12px; }
            QTabBar::tab:selected { background-color: #0078d4; }
            QStatusBar { background-color: #2d2d2d; color: #aaaaaa; }
            QHeaderView::section { background-color: #3d3d3d; color: #ffffff; padding: 4px; border: 1px solid #555; }
        """
        )
    else:
        app.setStyleSheet(
            """
            QMainWindow, QDialog { background-color: #ffffff; }
            QTableWidget { alternate-background-color: #f8f9fa; border: 1px solid #dcdcdc; }
            QTableWidget::item:selected { background-color: #0078d4; color: white; }
            QHeaderView::section { background-color: #f0f0f0; padding: 4px; border: 1px solid #dcdcdc; font-weight: bold; }
        """
        )


__all__ = [
    "setup_logging",
    "format_size",
    "format_time",
    "apply_theme",
]
