from __future__ import annotations

import pytest

from podkit.pathing.dialect import UNIX, WINDOWS, PathDialect
from podkit.pathing.prefix import common_prefix

_CASES = [
    ("/a/b/c", "/a/b/c", UNIX, "/a/b/c", 3),
    ("/a/b/c", "/a/b", UNIX, "/a/b", 2),
    ("/a/b/c", "/a/c", UNIX, "/a", 1),
    ("/a/b/c", "/b/c", UNIX, "/", 0),
    ("/apple/b/c", "/app/b", UNIX, "/", 0),
    ("/apple/b/c", "apple/b", UNIX, "", 0),
    ("/apple", "/app", UNIX, "/", 0),
    ("/app/main.py", "/application/main.py", UNIX, "/", 0),
    ("a/b/c", "a/b", UNIX, "a/b", 2),
    ("a/b/c", "a/b/c", UNIX, "a/b/c", 3),
    ("a/b/c", "b/c", UNIX, "", 0),
    ("a", "b", UNIX, "", 0),
    ("", "", UNIX, "", 0),
    ("", "/a", UNIX, "", 0),
    ("", "a", UNIX, "", 0),
    (r"\a\b\c", r"\a\b\c", WINDOWS, r"\a\b\c", 3),
    (r"\a\b\c", r"\a\b", WINDOWS, r"\a\b", 2),
    (r"\a\b\c", r"\a\c", WINDOWS, r"\a", 1),
    (r"\a\b\c", r"\b\c", WINDOWS, "\\", 0),
    (r"\apple\b\c", r"\app\b", WINDOWS, "\\", 0),
    (r"\apple\b\c", r"apple\b", WINDOWS, "", 0),
    (r"\apple", r"\app", WINDOWS, "\\", 0),
    (r"a\b\c", r"a\b", WINDOWS, r"a\b", 2),
    (r"a\b\c", r"a\b\c", WINDOWS, r"a\b\c", 3),
    (r"a\b\c", r"b\c", WINDOWS, "", 0),
    (r"c:\a\b\c", "c:", WINDOWS, "c:", 0),
    (r"c:\a\b\c", r"c:\b\c", WINDOWS, "c:\\", 0),
    (r"c:\a\b\c", r"c:\a\b", WINDOWS, r"c:\a\b", 2),
    (r"c:\a\b\c", r"b\c", WINDOWS, "", 0),
    (r"c:\a\b\c", r"c:a\b\c", WINDOWS, "c:", 0),
    (r"c:\a\b\c", r"d:\a\b\c", WINDOWS, "", 0),
    (r"\\server\vol\a\b\c", r"\\server\vol\a\c", WINDOWS, r"\\server\vol\a", 2),
    (r"\\server\vol\a\b\c", r"\\server\vol\b\c", WINDOWS, r"\\server\vol", 1),
    (r"\\server\vol\a\b\c", r"b\c", WINDOWS, "", 0),
    (r"\\server\vol\a\b\c", r"\a\b\c", WINDOWS, "", 0),
    (r"\\server\vol1\a\b\c", r"\\server\vol2\a", WINDOWS, "\\\\server\\", 0),
    ("", "", WINDOWS, "", 0),
    ("", r"\a", WINDOWS, "", 0),
    ("", "a", WINDOWS, "", 0),
    ("", "c:a", WINDOWS, "", 0),
    ("", r"c:\a", WINDOWS, "", 0),
    ("", r"\\server\vol\a", WINDOWS, "", 0),
]


@pytest.mark.parametrize("a,b,dialect,prefix,depth", _CASES)
def test_common_prefix(a: str, b: str, dialect: PathDialect, prefix: str, depth: int) -> None:
    assert common_prefix(a, b, dialect) == (prefix, depth)


@pytest.mark.parametrize("a,b,dialect,prefix,depth", _CASES)
def test_common_prefix_is_symmetric(
    a: str, b: str, dialect: PathDialect, prefix: str, depth: int
) -> None:
    assert common_prefix(b, a, dialect) == common_prefix(a, b, dialect)


@pytest.mark.parametrize(
    "a,b",
    [
        (r"\\s\x", r"\\s/x"),
        (r"\\s\a\b", r"c:\ab\b"),
        (r"c:\abc", r"\\c\ab"),
    ],
)
def test_common_prefix_is_symmetric_for_equal_length_volumes(a: str, b: str) -> None:
    assert len(a) == len(b)
    assert WINDOWS.volume_length(a) != WINDOWS.volume_length(b)
    assert common_prefix(a, b, WINDOWS) == common_prefix(b, a, WINDOWS)


def test_equal_length_unc_paths_keep_the_volume() -> None:
    assert common_prefix(r"\\s\x", r"\\s/x", WINDOWS) == ("\\\\s", 0)
    assert common_prefix(r"\\s/x", r"\\s\x", WINDOWS) == ("\\\\s", 0)


@pytest.mark.parametrize(
    "path,dialect",
    [
        ("", UNIX),
        ("/", UNIX),
        ("/a/b/c", UNIX),
        ("a/b", UNIX),
        (r"c:\a\b", WINDOWS),
        (r"\\server\vol\a", WINDOWS),
        ("c:", WINDOWS),
    ],
)
def test_common_prefix_with_itself_is_the_path(path: str, dialect: PathDialect) -> None:
    assert common_prefix(path, path, dialect) == (path, dialect.depth(path))
