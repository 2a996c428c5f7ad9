"""
QueryDispatcher: validates UI input, calls the engine and drives the session.

Every public coroutine here is a UI action boundary: validation problems and
engine failures end up as notices, never as exceptions for the caller.
"""

import logging
from typing import List, Optional, Union

from ..constants import (
    MSG_ADVANCED_SEARCH_FAILED,
    MSG_INDEX_BUILT,
    MSG_INDEX_FAILED,
    MSG_NO_MATCHES,
    MSG_SCAN_FAILED,
    MSG_SCAN_STARTED,
    MSG_SEARCH_FAILED,
)
from .errors import ValidationError
from .models import FileViewModel
from .normalizer import normalize_all
from .notices import Notifier
from .query import AdvancedQuery, BasicQuery, QueryDescriptor
from .session import SearchSession

logger = logging.getLogger(__name__)


class QueryDispatcher:
    def __init__(self, engine, session: SearchSession, notifier: Notifier, config=None):
        self.engine = engine
        self.session = session
        self.notifier = notifier
        self.config = config

    async def dispatch_basic(self, text: str) -> List[FileViewModel]:
        try:
            query = BasicQuery(text)
        except ValidationError as e:
            self.notifier.warning(e.notice)
            return []
        if self.config is not None:
            self.config.add_history(text)
        return await self.dispatch(query)

    async def dispatch_advanced(self, fields: Union[dict, AdvancedQuery]) -> List[FileViewModel]:
        """Dispatch an advanced search from form values or a ready descriptor."""
        try:
            query = fields if isinstance(fields, AdvancedQuery) else AdvancedQuery.from_form(fields)
        except ValidationError as e:
            self.notifier.warning(e.notice)
            return []
        return await self.dispatch(query)

    async def dispatch(self, query: QueryDescriptor) -> List[FileViewModel]:
        """Run one validated query against the engine.

        Returns the results that were applied to the session, or an empty list
        when the call failed or a newer dispatch superseded this one.
        """
        epoch = self.session.begin(query.text)
        advanced = isinstance(query, AdvancedQuery)
        try:
            if advanced:
                logger.info(f"发送高级搜索请求: query={query.text!r}, filters={query.filters()}")
                raw = await self.engine.advanced_search(query.text, query.filters())
            else:
                logger.info(f"发送搜索请求: query={query.text!r}")
                raw = await self.engine.basic_search(query.text)
            results = normalize_all(raw)
        except Exception:
            logger.exception(f"搜索失败 (epoch={epoch})")
            if self.session.fail(epoch):
                self.notifier.error(MSG_ADVANCED_SEARCH_FAILED if advanced else MSG_SEARCH_FAILED)
            return []

        if not self.session.complete(epoch, results):
            logger.debug(f"搜索结果已过期，丢弃 (epoch={epoch}, {len(results)} 条)")
            return []
        logger.info(f"搜索完成: {len(results)} 条结果 (epoch={epoch})")
        if not results:
            self.notifier.info(MSG_NO_MATCHES)
        return results

    async def trigger_background_scan(self) -> bool:
        try:
            await self.engine.scan_directory()
        except Exception:
            logger.exception("启动后台扫描失败")
            self.notifier.error(MSG_SCAN_FAILED)
            return False
        self.notifier.success(MSG_SCAN_STARTED)
        return True

    async def build_index(self, path: Optional[str]) -> bool:
        """Build or refresh the index of ``path``; ``None`` means the picker was cancelled."""
        if not path:
            return False
        try:
            await self.engine.build_index(path)
        except Exception:
            logger.exception(f"索引构建失败: {path}")
            self.notifier.error(MSG_INDEX_FAILED)
            return False
        if self.config is not None:
            self.config.set_last_index_dir(path)
        logger.info(f"索引构建完成: {path}")
        self.notifier.success(MSG_INDEX_BUILT)
        return True


__all__ = ["QueryDispatcher"]
