import asyncio
import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from searchdesk.core.clipboard import ClipboardService, CommandClipboardWriter, NativeClipboardWriter
from searchdesk.core.errors import ClipboardError, ClipboardErrorKind


class FakeWriter:
    def __init__(self, name, available=True, fail=False):
        self.name = name
        self._available = available
        self.fail = fail
        self.written = []

    def available(self):
        return self._available

    async def write(self, text):
        if self.fail:
            raise RuntimeError(f"{self.name} refused")
        self.written.append(text)


def test_first_available_writer_wins():
    native = FakeWriter("native")
    fallback = FakeWriter("fallback")
    svc = ClipboardService([native, fallback])
    assert asyncio.run(svc.copy_text("/a/b")) == "native"
    assert native.written == ["/a/b"]
    assert fallback.written == []


def test_falls_back_when_native_fails():
    native = FakeWriter("native", fail=True)
    fallback = FakeWriter("fallback")
    svc = ClipboardService([native, fallback])
    assert asyncio.run(svc.copy_text("/a/b")) == "fallback"
    assert fallback.written == ["/a/b"]


def test_skips_unavailable_writer():
    native = FakeWriter("native", available=False)
    fallback = FakeWriter("fallback")
    assert asyncio.run(ClipboardService([native, fallback]).copy_text("x")) == "fallback"


def test_unsupported_when_all_fail():
    svc = ClipboardService([FakeWriter("a", fail=True), FakeWriter("b", available=False)])
    with pytest.raises(ClipboardError) as exc:
        asyncio.run(svc.copy_text("x"))
    assert exc.value.kind == ClipboardErrorKind.UNSUPPORTED


def test_empty_text_rejected():
    writer = FakeWriter("native")
    with pytest.raises(ValueError):
        asyncio.run(ClipboardService([writer]).copy_text(""))
    assert writer.written == []


def test_native_writer_without_callable_is_unavailable():
    assert not NativeClipboardWriter(None).available()

    seen = []

    async def write(text):
        seen.append(text)

    writer = NativeClipboardWriter(write)
    assert writer.available()
    asyncio.run(writer.write("hi"))
    assert seen == ["hi"]


def test_command_writer_unavailable_without_binary():
    writer = CommandClipboardWriter([["definitely-not-a-clipboard-tool-xyz"]])
    assert not writer.available()


def test_command_writer_pipes_text(tmp_path):
    out = tmp_path / "clip.txt"
    script = f"import sys; open({str(out)!r}, 'w', encoding='utf-8').write(sys.stdin.read())"
    writer = CommandClipboardWriter([[sys.executable, "-c", script]])
    asyncio.run(writer.write("C:\\数据\\a.txt"))
    assert out.read_text(encoding="utf-8") == "C:\\数据\\a.txt"


def test_command_writer_nonzero_exit_fails():
    writer = CommandClipboardWriter([[sys.executable, "-c", "import sys; sys.stdin.read(); sys.exit(1)"]])
    with pytest.raises(RuntimeError):
        asyncio.run(writer.write("x"))


def test_command_writer_keeps_loop_responsive():
    slow = "import sys, time; sys.stdin.read(); time.sleep(1)"
    writer = CommandClipboardWriter([[sys.executable, "-c", slow]])

    async def run():
        loop = asyncio.get_running_loop()
        gaps = []
        done = asyncio.Event()

        async def ticker():
            last = loop.time()
            while not done.is_set():
                await asyncio.sleep(0.05)
                now = loop.time()
                gaps.append(now - last)
                last = now

        tick = asyncio.ensure_future(ticker())
        await writer.write("x")
        done.set()
        await tick
        return gaps

    gaps = asyncio.run(run())
    assert len(gaps) >= 5
    assert max(gaps) < 0.5
