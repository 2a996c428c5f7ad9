"""
Shared constants for the desktop search client.
"""

import platform
from pathlib import Path

LOG_DIR = Path.home() / ".searchdesk"
LOG_DIR.mkdir(exist_ok=True)

IS_WINDOWS = platform.system() == "Windows"
IS_MACOS = platform.system() == "Darwin"

APP_NAME = "极速文件搜索"
ORG_NAME = "SearchDesk"

# engine process started when neither config nor environment names one
DEFAULT_ENGINE_COMMAND = ["searchdesk-engine"]
ENGINE_ENV_VAR = "SEARCHDESK_ENGINE"

DEFAULT_PAGE_SIZE = 10
HISTORY_LIMIT = 20

# kind reported for every record until the engine classifies files itself
UNKNOWN_KIND = "unknown"
NOT_AVAILABLE = "N/A"

# advanced form choices; "all" means no file type filter
FILE_TYPE_CHOICES = [
    ("all", "所有类型"),
    ("document", "文档文件"),
    ("image", "图片文件"),
    ("video", "视频文件"),
    ("audio", "音频文件"),
]
ALL_FILE_TYPES = "all"

# user-facing notices
MSG_ENTER_KEYWORD = "请输入文件名或路径关键字"
MSG_ENTER_CRITERION = "请输入至少一个搜索条件"
MSG_INVALID_SIZE = "文件大小必须是非负数字"
MSG_NO_MATCHES = "未找到匹配的结果"
MSG_SEARCH_FAILED = "搜索失败，请重试"
MSG_ADVANCED_SEARCH_FAILED = "高级搜索失败，请重试"
MSG_INVALID_PATH = "无效文件路径"
MSG_PATH_COPIED = "文件路径已复制"
MSG_COPY_FAILED = "复制文件路径失败"
MSG_LOCATION_OPENED = "已打开文件位置"
MSG_OPEN_LOCATION_FAILED = "打开文件位置失败"
MSG_NO_PARENT = "无法定位上级目录"
MSG_SCAN_STARTED = "后台扫描已启动"
MSG_SCAN_FAILED = "启动后台扫描失败"
MSG_INDEX_BUILT = "索引构建完成"
MSG_INDEX_FAILED = "索引构建失败"
MSG_PREVIEW_FAILED = "文件预览失败"
MSG_NO_RESULTS = "暂无搜索结果"
MSG_UNKNOWN_NAME = "未知"
MSG_PATH_UNAVAILABLE = "路径不可用"
