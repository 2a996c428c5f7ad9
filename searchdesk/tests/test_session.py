import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from searchdesk.core.models import FileViewModel
from searchdesk.core.session import SearchSession


def _vm(name):
    return FileViewModel(path=f"/x/{name}", name=name, kind="unknown", size_bytes=0, modified_epoch_seconds=0)


def test_begin_clears_and_loads():
    s = SearchSession()
    snaps = []
    s.subscribe(snaps.append)
    e1 = s.begin("foo")
    s.complete(e1, [_vm("a")])
    e2 = s.begin("bar")
    assert e2 == e1 + 1
    assert s.current_results == []
    assert s.is_loading
    assert snaps[-1].query == "bar"
    assert snaps[-1].results == ()


def test_stale_complete_is_ignored():
    s = SearchSession()
    old = s.begin("foo")
    new = s.begin("bar")
    assert s.complete(new, [_vm("bar")])
    assert not s.complete(old, [_vm("foo")])
    assert [vm.name for vm in s.current_results] == ["bar"]


def test_stale_fail_keeps_loading():
    s = SearchSession()
    old = s.begin("foo")
    s.begin("bar")
    assert not s.fail(old)
    assert s.is_loading


def test_fail_ends_loading_keeps_empty_results():
    s = SearchSession()
    e = s.begin("foo")
    assert s.fail(e)
    assert not s.is_loading
    assert s.current_results == []
