from __future__ import annotations

from collections.abc import Iterable

from .dialect import PathDialect, dialect_for_os
from .ordered import OrderedRootSet
from .prefix import common_prefix


def common_roots(paths: Iterable[str], min_depth: int, os_name: str) -> list[str]:
    """Common roots of `paths` using the path rules of the `os_name` hint."""
    return roots(paths, min_depth, dialect_for_os(os_name))


def roots(paths: Iterable[str], min_depth: int, dialect: PathDialect) -> list[str]:
    """Return a minimal set of common roots with at least `min_depth` components.

    Paths are assumed clean (no `.`/`..` segments, no doubled separators).
    For example, with Unix rules and `min_depth=1`:

      - [/a/b/c, /a/b/d, /c/d/e] -> [/a/b, /c/d/e]
      - [/a/b/c, /c/d/e]         -> [/a/b/c, /c/d/e]

    If any group of paths cannot be covered by a root that is deep enough,
    no roots are returned at all.
    """
    ordered = sorted(paths)
    if not ordered:
        return []

    found = OrderedRootSet()
    if not _find_roots(ordered, 0, len(ordered) - 1, min_depth, dialect, found):
        return []
    return found.to_list()


def _qualifies(common: str, depth: int, min_depth: int) -> bool:
    return common != "" and depth >= min_depth


def _find_roots(
    paths: list[str],
    start: int,
    end: int,
    min_depth: int,
    dialect: PathDialect,
    found: OrderedRootSet,
) -> bool:
    # Sorted input means a deep-enough prefix between paths[start] and
    # paths[end] covers the whole interval; otherwise peel off the longest
    # run starting at `start` and continue with the rest.
    while True:
        if start == end:
            if dialect.depth(paths[start]) < min_depth:
                return False
            found.add(paths[start])
            return True

        common, depth = common_prefix(paths[start], paths[end], dialect)
        if _qualifies(common, depth, min_depth):
            found.add(common)
            return True

        # binary search [start, end) for the rightmost path whose prefix with
        # paths[start] qualifies; paths[end] is already known not to
        prefix = ""
        left = start
        right = end - 1
        while left <= right:
            mid = (left + right) // 2
            common, depth = common_prefix(paths[start], paths[mid], dialect)
            if _qualifies(common, depth, min_depth):
                prefix = common
                left = mid + 1
            else:
                right = mid - 1
        if not prefix:
            return False

        found.add(prefix)
        # right < end since it started at end - 1
        start = right + 1
