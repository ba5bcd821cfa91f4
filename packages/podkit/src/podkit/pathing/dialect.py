from __future__ import annotations

from typing import Protocol


class PathDialect(Protocol):
    """Path-syntax rules for one path convention.

    Every method is total: malformed input yields a degenerate answer
    (zero depth, zero volume length) rather than an exception.
    """

    def is_abs(self, path: str) -> bool: ...

    def depth(self, path: str) -> int: ...

    def is_path_separator(self, c: str) -> bool: ...

    def volume_length(self, path: str) -> int: ...


def relative_depth(path: str, dialect: PathDialect) -> int:
    """Number of components in a path with no volume or root separator."""
    if not path:
        return 0
    return 1 + sum(1 for c in path if dialect.is_path_separator(c))


def _is_ascii_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


class UnixDialect:
    name = "unix"

    def is_path_separator(self, c: str) -> bool:
        return c == "/"

    def volume_length(self, path: str) -> int:
        return 0

    def is_abs(self, path: str) -> bool:
        return path.startswith("/")

    def depth(self, path: str) -> int:
        if path.startswith("/"):
            return relative_depth(path[1:], self)
        return relative_depth(path, self)

    def __repr__(self) -> str:
        return "UnixDialect()"


class WindowsDialect:
    name = "windows"

    def is_path_separator(self, c: str) -> bool:
        return c == "/" or c == "\\"

    def is_abs(self, path: str) -> bool:
        # `c:` and `c:foo` are relative to the working dir on c:, but a bare
        # `\foo` counts as rooted.
        if self.is_unc(path):
            return True
        vol_len = self.volume_length(path)
        return vol_len < len(path) and self.is_path_separator(path[vol_len])

    def depth(self, path: str) -> int:
        vol_len = self.volume_length(path)
        if vol_len == len(path):
            return 0
        if self.is_path_separator(path[vol_len]):
            return relative_depth(path[vol_len + 1 :], self)
        return relative_depth(path[vol_len:], self)

    def volume_length(self, path: str) -> int:
        if self.has_drive_letter(path):
            return 2
        if self.is_unc(path):
            index = path.find("\\", 2)
            if index < 0:
                return len(path)
            return index
        return 0

    def has_drive_letter(self, path: str) -> bool:
        return len(path) >= 2 and _is_ascii_alpha(path[0]) and path[1] == ":"

    def is_unc(self, path: str) -> bool:
        return len(path) > 2 and path[0] == "\\" and path[1] == "\\" and path[2] != "\\"

    def __repr__(self) -> str:
        return "WindowsDialect()"


UNIX = UnixDialect()
WINDOWS = WindowsDialect()


def dialect_for_os(os_name: str) -> PathDialect:
    """Windows rules for a `windows` hint, Unix rules for anything else."""
    if os_name == "windows":
        return WINDOWS
    return UNIX
