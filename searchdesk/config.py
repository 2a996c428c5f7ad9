"""
Configuration manager: persists client settings as JSON under LOG_DIR.
"""

import json
import logging
import os
import shlex

from .constants import (
    DEFAULT_ENGINE_COMMAND,
    DEFAULT_PAGE_SIZE,
    ENGINE_ENV_VAR,
    HISTORY_LIMIT,
    LOG_DIR,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """配置管理器 - 处理应用程序配置的保存和加载"""

    def __init__(self, config_dir=None):
        self.config_dir = config_dir or LOG_DIR
        self.config_file = self.config_dir / "config.json"
        self.config = self._load()

    def _load(self):
        """加载配置文件"""
        config = self._get_default_config()
        try:
            if self.config_file.exists():
                with open(self.config_file, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    config.update(stored)
                else:
                    logger.error(f"配置格式无效: {self.config_file}")
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"配置加载失败: {e}")
        return config

    def _get_default_config(self):
        """获取默认配置"""
        return {
            "engine_command": list(DEFAULT_ENGINE_COMMAND),
            "search_history": [],
            "theme": "light",
            "scan_on_startup": True,
            "last_index_dir": "",
            # pagination / UI
            "results_page_size": DEFAULT_PAGE_SIZE,
        }

    def save(self):
        """保存配置到文件"""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.config, f, ensure_ascii=False, indent=2)
        except IOError as e:
            logger.error(f"配置保存失败: {e}")

    # ---------- engine ----------
    def get_engine_command(self):
        """Return the argv used to start the search engine process.

        The ``SEARCHDESK_ENGINE`` environment variable wins over the stored
        value so a development engine can be swapped in without editing the
        config file.
        """
        env_cmd = os.environ.get(ENGINE_ENV_VAR, "").strip()
        if env_cmd:
            return shlex.split(env_cmd, posix=os.name != "nt")
        cmd = self.config.get("engine_command") or DEFAULT_ENGINE_COMMAND
        if isinstance(cmd, str):
            return shlex.split(cmd, posix=os.name != "nt")
        return [str(part) for part in cmd]

    def set_engine_command(self, argv):
        self.config["engine_command"] = list(argv)
        self.save()

    # ---------- history ----------
    def add_history(self, keyword):
        """添加搜索历史"""
        keyword = (keyword or "").strip()
        if not keyword:
            return
        history = self.config.get("search_history", [])
        if keyword in history:
            history.remove(keyword)
        history.insert(0, keyword)
        self.config["search_history"] = history[:HISTORY_LIMIT]
        self.save()

    def get_history(self):
        return self.config.get("search_history", [])

    # ---------- appearance / startup ----------
    def set_theme(self, theme):
        self.config["theme"] = theme
        self.save()

    def get_theme(self):
        return self.config.get("theme", "light")

    def get_scan_on_startup(self) -> bool:
        return bool(self.config.get("scan_on_startup", True))

    def set_scan_on_startup(self, enabled: bool):
        self.config["scan_on_startup"] = bool(enabled)
        self.save()

    def get_last_index_dir(self) -> str:
        return self.config.get("last_index_dir", "") or ""

    def set_last_index_dir(self, path: str):
        self.config["last_index_dir"] = path or ""
        self.save()

    # ---------- pagination helpers ----------
    def get_results_page_size(self) -> int:
        try:
            v = int(self.config.get("results_page_size", DEFAULT_PAGE_SIZE))
            return v if v > 0 else DEFAULT_PAGE_SIZE
        except (TypeError, ValueError):
            return DEFAULT_PAGE_SIZE

    def set_results_page_size(self, size: int):
        try:
            s = int(size)
        except (TypeError, ValueError):
            return
        if s <= 0:
            return
        self.config["results_page_size"] = s
        self.save()


__all__ = ["ConfigManager"]
