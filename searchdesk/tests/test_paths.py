import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from searchdesk.core.paths import directory_of, has_parent


def test_directory_of_windows_path():
    assert directory_of("C:\\Users\\me\\doc.txt") == "C:\\Users\\me"


def test_directory_of_posix_path():
    assert directory_of("/home/me/doc.txt") == "/home/me"


def test_backslash_wins_over_slash():
    # mixed separators: the last backslash decides
    assert directory_of("C:\\data/sub\\file.txt") == "C:\\data/sub"
    assert directory_of("C:\\data\\sub/file.txt") == "C:\\data"


def test_no_separator_is_unchanged():
    assert directory_of("file.txt") == "file.txt"
    assert not has_parent("file.txt")


def test_root_level_file():
    assert directory_of("/a.txt") == ""
    assert has_parent("/a.txt")


def test_has_parent_empty():
    assert directory_of("") == ""
    assert not has_parent("")
