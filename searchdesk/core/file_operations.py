"""
OS file-browser integration.
"""

import asyncio
import logging
import os
import subprocess

from ..constants import IS_MACOS, IS_WINDOWS
from .errors import OpenLocationError

logger = logging.getLogger(__name__)

# seconds to wait for the launcher (open / xdg-open) to hand over
LAUNCH_TIMEOUT = 10


def open_directory_command(path: str):
    """Return the argv that opens ``path`` in the native file browser, or None on Windows."""
    if IS_WINDOWS:
        return None
    if IS_MACOS:
        return ["open", path]
    return ["xdg-open", path]


async def open_directory(path: str) -> None:
    """Ask the OS file browser to show ``path``.

    Raises OpenLocationError if the browser cannot be launched. The launcher exit
    status is checked; the browser window itself is not tracked.
    """
    if not path:
        raise OpenLocationError(path, "empty directory path")
    argv = open_directory_command(path)
    try:
        if argv is None:
            # os.startfile returns once the shell has accepted the request
            await asyncio.get_running_loop().run_in_executor(None, os.startfile, path)
            return
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise OpenLocationError(path, f"无法打开目录 {path}: {e}") from e
    try:
        returncode = await asyncio.wait_for(proc.wait(), timeout=LAUNCH_TIMEOUT)
    except asyncio.TimeoutError:
        logger.debug(f"文件浏览器仍在运行: {argv} pid={proc.pid}")
        return
    if returncode != 0:
        raise OpenLocationError(path, f"{argv[0]} 退出码 {returncode}")


__all__ = ["open_directory", "open_directory_command"]
