import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from searchdesk.core.models import MatchLine, RawFileRecord
from searchdesk.core.normalizer import normalize, normalize_all


def test_from_wire_field_names():
    raw = RawFileRecord.from_wire({
        "file_path": "C:\\docs\\report.txt",
        "name": "report.txt",
        "size": 2048,
        "modified_time": 1700000000,
        "line_number": 12,
        "content": "quarterly report",
        "matches": ["quarterly report"],
    })
    assert raw.path == "C:\\docs\\report.txt"
    assert raw.size == 2048
    assert raw.modified_epoch_seconds == 1700000000
    assert raw.line_number == 12
    assert raw.matched_content == "quarterly report"
    assert raw.matches == ("quarterly report",)


def test_from_wire_tolerates_missing_fields():
    raw = RawFileRecord.from_wire({"name": "x"})
    assert raw.path == ""
    assert raw.size == 0
    assert raw.modified_epoch_seconds == 0
    assert raw.line_number is None
    assert raw.matches is None


def test_normalize_maps_fields_and_kind():
    vm = normalize(RawFileRecord(path="/tmp/a.txt", name="a.txt", size=10, modified_epoch_seconds=5))
    assert vm.path == "/tmp/a.txt"
    assert vm.name == "a.txt"
    assert vm.kind == "unknown"
    assert vm.size_bytes == 10
    assert vm.modified_epoch_seconds == 5
    assert vm.matches is None


def test_normalize_keeps_empty_path():
    vm = normalize(RawFileRecord(path="", name=""))
    assert vm.path == ""
    assert vm.name == ""


def test_normalize_match_lines():
    raw = RawFileRecord(path="/a", name="a", line_number=3, matches=("foo", "foo bar"))
    vm = normalize(raw)
    assert vm.matches == (MatchLine(3, "foo"), MatchLine(3, "foo bar"))


def test_normalize_all_preserves_order():
    raws = [RawFileRecord(path=f"/p/{i}", name=str(i)) for i in (3, 1, 2)]
    assert [vm.name for vm in normalize_all(raws)] == ["3", "1", "2"]
