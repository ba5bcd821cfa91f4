from __future__ import annotations

from .dialect import PathDialect


def common_prefix(a: str, b: str, dialect: PathDialect) -> tuple[str, int]:
    """Return the longest common directory prefix of two paths and its depth.

    The prefix always ends on a component boundary, so `/apple` and `/app`
    share only `/`. A volume (`c:`, `\\\\server`) is never cut in half, and
    the root separator right after a volume is kept (`c:\\`, `/`).
    """
    if a == b:
        return a, dialect.depth(a)
    # equal lengths still need a fixed order: the volume is read from `a`
    if len(a) < len(b) or (len(a) == len(b) and a < b):
        a, b = b, a
    vol_len = dialect.volume_length(a)

    prefix = ""
    for i, c in enumerate(b):
        if a[i] != c:
            return prefix, dialect.depth(prefix)
        if dialect.is_path_separator(c):
            if i == vol_len:
                prefix = b[: vol_len + 1]
            else:
                prefix = b[:i]
        elif i + 1 == vol_len:
            prefix = b[:vol_len]

    # b is a literal prefix of the longer a
    if dialect.is_path_separator(a[len(b)]):
        prefix = b
    return prefix, dialect.depth(prefix)
