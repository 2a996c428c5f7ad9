"""
Best-effort text-to-clipboard with an ordered fallback chain.

Writers are tried in order until one succeeds:

1. the native asynchronous writer (the Qt application clipboard, reached
   through the GUI thread), when the application provides one;
2. a selection-based copy: the Win32 clipboard on Windows,
   otherwise the desktop's copy command (pbcopy / wl-copy / xclip / xsel).

If nothing succeeds ``ClipboardError`` is raised.
"""

import asyncio
import logging
import shutil
from typing import Awaitable, Callable, List, Optional, Sequence

from ..constants import IS_MACOS, IS_WINDOWS
from .errors import ClipboardError, ClipboardErrorKind

try:
    import win32clipboard  # type: ignore
    import win32con  # type: ignore
except ImportError:
    win32clipboard = None
    win32con = None

logger = logging.getLogger(__name__)

COPY_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


class NativeClipboardWriter:
    """Wraps an async ``write(text)`` supplied by the GUI layer."""

    name = "native"

    def __init__(self, write: Optional[Callable[[str], Awaitable[None]]] = None):
        self._write = write

    def available(self) -> bool:
        return self._write is not None

    async def write(self, text: str) -> None:
        await self._write(text)


class Win32ClipboardWriter:
    name = "win32"

    def available(self) -> bool:
        return win32clipboard is not None

    async def write(self, text: str) -> None:
        win32clipboard.OpenClipboard()
        try:
            win32clipboard.EmptyClipboard()
            win32clipboard.SetClipboardData(win32con.CF_UNICODETEXT, text)
        finally:
            # the clipboard stays locked for every other process until closed
            win32clipboard.CloseClipboard()


class CommandClipboardWriter:
    """Pipes text into the first copy command found on PATH."""

    name = "command"

    def __init__(self, commands: Sequence[Sequence[str]] = None, timeout: float = 5):
        self.commands = [list(c) for c in (commands or COPY_COMMANDS)]
        self.timeout = timeout

    def _find(self):
        for cmd in self.commands:
            if shutil.which(cmd[0]):
                return cmd
        return None

    def available(self) -> bool:
        return self._find() is not None

    async def write(self, text: str) -> None:
        cmd = self._find()
        if cmd is None:
            raise RuntimeError("no clipboard command on PATH")
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        try:
            await asyncio.wait_for(proc.communicate(text.encode("utf-8")), timeout=self.timeout)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            raise RuntimeError(f"{cmd[0]} timed out after {self.timeout}s") from None
        if proc.returncode != 0:
            raise RuntimeError(f"{cmd[0]} exited with {proc.returncode}")


def default_writers(native: Optional[Callable[[str], Awaitable[None]]] = None) -> List:
    """Writers for the current platform, native first."""
    writers = [NativeClipboardWriter(native)]
    if IS_WINDOWS:
        writers.append(Win32ClipboardWriter())
    else:
        commands = COPY_COMMANDS if IS_MACOS else COPY_COMMANDS[1:]
        writers.append(CommandClipboardWriter(commands))
    return writers


class ClipboardService:
    def __init__(self, writers: Sequence = None):
        self.writers = list(writers) if writers is not None else default_writers()

    async def copy_text(self, text: str) -> str:
        """Copy ``text``; returns the name of the writer that succeeded."""
        if not text:
            raise ValueError("refusing to copy empty text")
        for writer in self.writers:
            if not writer.available():
                continue
            try:
                await writer.write(text)
            except Exception as e:
                logger.warning(f"剪贴板写入失败 ({writer.name}): {e}")
                continue
            logger.debug(f"已通过 {writer.name} 写入剪贴板")
            return writer.name
        raise ClipboardError(ClipboardErrorKind.UNSUPPORTED)


__all__ = [
    "NativeClipboardWriter",
    "Win32ClipboardWriter",
    "CommandClipboardWriter",
    "ClipboardService",
    "default_writers",
]
