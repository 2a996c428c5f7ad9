"""
Client for the external search engine process.

The engine runs as a child process and speaks newline-delimited JSON on its
stdin/stdout::

    -> {"id": 1, "method": "basic_search", "params": {"query": "foo"}}
    <- {"id": 1, "result": [...]}
    <- {"id": 2, "error": "index not ready"}

Replies are matched to requests by id, so several calls can be in flight at
once and may complete in any order.
"""

import asyncio
import itertools
import json
import logging
from typing import Dict, List, Optional, Protocol, Sequence

from .errors import TransportError
from .models import RawFileRecord

logger = logging.getLogger(__name__)

# a result page of a few hundred records easily exceeds asyncio's 64 KiB default
STREAM_LIMIT = 16 * 1024 * 1024


class SearchEngine(Protocol):
    async def basic_search(self, query: str) -> List[RawFileRecord]: ...

    async def advanced_search(self, query: str, filters: dict) -> List[RawFileRecord]: ...

    async def build_index(self, path: str) -> None: ...

    async def preview_file(self, path: str) -> str: ...

    async def highlight_content(self, content: str, query: str) -> str: ...

    async def scan_directory(self) -> None: ...


def parse_records(result, method: str) -> List[RawFileRecord]:
    if not isinstance(result, list):
        raise TransportError(f"{method}: expected a list of records, got {type(result).__name__}", method)
    records = []
    for item in result:
        if not isinstance(item, dict):
            raise TransportError(f"{method}: malformed record {item!r}", method)
        records.append(RawFileRecord.from_wire(item))
    return records


class SubprocessEngineClient:
    """JSON-lines RPC client over an engine child process.

    The process is started lazily on the first call and restarted on the
    next call after it exits.
    """

    def __init__(self, argv: Sequence[str], cwd: Optional[str] = None):
        if not argv:
            raise ValueError("engine command is empty")
        self.argv = list(argv)
        self.cwd = cwd
        self._proc: Optional[asyncio.subprocess.Process] = None
        self._reader: Optional[asyncio.Task] = None
        self._stderr_reader: Optional[asyncio.Task] = None
        self._pending: Dict[int, asyncio.Future] = {}
        self._ids = itertools.count(1)
        self._start_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    @property
    def running(self) -> bool:
        return self._proc is not None and self._proc.returncode is None

    async def _ensure_started(self):
        async with self._start_lock:
            if self.running:
                return
            try:
                self._proc = await asyncio.create_subprocess_exec(
                    *self.argv,
                    stdin=asyncio.subprocess.PIPE,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    cwd=self.cwd,
                    limit=STREAM_LIMIT,
                )
            except OSError as e:
                self._proc = None
                raise TransportError(f"无法启动搜索引擎 {self.argv[0]}: {e}") from e
            logger.info(f"🚀 搜索引擎进程已启动: pid={self._proc.pid}, cmd={self.argv}")
            self._reader = asyncio.ensure_future(self._read_replies(self._proc))
            self._stderr_reader = asyncio.ensure_future(self._read_stderr(self._proc))

    async def _read_replies(self, proc):
        try:
            while True:
                line = await proc.stdout.readline()
                if not line:
                    break
                self._dispatch_reply(line)
        except (asyncio.LimitOverrunError, ValueError) as e:
            logger.error(f"搜索引擎输出无法解析: {e}")
        finally:
            if self._proc is proc:
                # stdout closed: the next call starts a fresh process
                self._proc = None
                if proc.returncode is None:
                    try:
                        proc.kill()
                    except ProcessLookupError:
                        pass
                logger.warning("搜索引擎输出已关闭，进程将在下次调用时重启")
                self._fail_pending(TransportError("搜索引擎进程已退出"))
            elif self._proc is None:
                self._fail_pending(TransportError("搜索引擎进程已退出"))

    def _dispatch_reply(self, line: bytes):
        try:
            reply = json.loads(line)
        except json.JSONDecodeError:
            logger.warning(f"忽略无法解析的引擎输出: {line[:200]!r}")
            return
        if not isinstance(reply, dict):
            logger.warning(f"忽略非对象引擎输出: {reply!r}")
            return
        fut = self._pending.pop(reply.get("id"), None)
        if fut is None or fut.done():
            logger.debug(f"收到未知请求的回复: id={reply.get('id')}")
            return
        if reply.get("error") is not None:
            fut.set_exception(TransportError(str(reply["error"])))
        else:
            fut.set_result(reply.get("result"))

    async def _read_stderr(self, proc):
        while True:
            line = await proc.stderr.readline()
            if not line:
                return
            logger.debug(f"[engine] {line.decode('utf-8', 'replace').rstrip()}")

    def _fail_pending(self, exc: TransportError):
        pending, self._pending = self._pending, {}
        for fut in pending.values():
            if not fut.done():
                fut.set_exception(exc)

    async def call(self, method: str, params: Optional[dict] = None):
        await self._ensure_started()
        req_id = next(self._ids)
        fut = asyncio.get_running_loop().create_future()
        self._pending[req_id] = fut
        payload = json.dumps({"id": req_id, "method": method, "params": params or {}}, ensure_ascii=False)
        try:
            async with self._write_lock:
                self._proc.stdin.write(payload.encode("utf-8") + b"\n")
                await self._proc.stdin.drain()
        except (BrokenPipeError, ConnectionResetError) as e:
            self._pending.pop(req_id, None)
            raise TransportError(f"{method}: 与搜索引擎的连接已断开: {e}", method) from e
        try:
            return await fut
        except TransportError as e:
            if e.method is None:
                e.method = method
            raise

    async def basic_search(self, query: str) -> List[RawFileRecord]:
        return parse_records(await self.call("basic_search", {"query": query}), "basic_search")

    async def advanced_search(self, query: str, filters: dict) -> List[RawFileRecord]:
        result = await self.call("advanced_search", {"query": query, "filters": filters})
        return parse_records(result, "advanced_search")

    async def build_index(self, path: str) -> None:
        await self.call("build_index", {"path": path})

    async def preview_file(self, path: str) -> str:
        result = await self.call("preview_file", {"path": path})
        return "" if result is None else str(result)

    async def highlight_content(self, content: str, query: str) -> str:
        result = await self.call("highlight_content", {"content": content, "query": query})
        return content if result is None else str(result)

    async def scan_directory(self) -> None:
        await self.call("scan_directory")

    async def close(self):
        proc, self._proc = self._proc, None
        if proc is None:
            return
        if proc.returncode is None:
            try:
                proc.stdin.close()
                proc.terminate()
            except ProcessLookupError:
                pass
            try:
                await asyncio.wait_for(proc.wait(), timeout=3)
            except asyncio.TimeoutError:
                logger.warning("搜索引擎未及时退出，强制结束")
                proc.kill()
                await proc.wait()
        for task in (self._reader, self._stderr_reader):
            if task is not None and not task.done():
                task.cancel()
        self._fail_pending(TransportError("搜索引擎客户端已关闭"))
        logger.info("搜索引擎进程已关闭")


__all__ = ["SearchEngine", "SubprocessEngineClient", "parse_records", "STREAM_LIMIT"]
