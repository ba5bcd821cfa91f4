from .dialect import (
    UNIX,
    WINDOWS,
    PathDialect,
    UnixDialect,
    WindowsDialect,
    dialect_for_os,
    relative_depth,
)
from .ordered import OrderedRootSet
from .prefix import common_prefix
from .roots import common_roots, roots

__all__ = [
    "OrderedRootSet",
    "PathDialect",
    "UNIX",
    "UnixDialect",
    "WINDOWS",
    "WindowsDialect",
    "common_prefix",
    "common_roots",
    "dialect_for_os",
    "relative_depth",
    "roots",
]
