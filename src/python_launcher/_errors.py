"""Errors raised while parsing version requests and resolving executables."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._version import RequestedVersion


class LauncherError(Exception):
    """Base class of every error raised by the launcher."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LauncherError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ParseVersionComponentError(LauncherError, ValueError):
    """A version component is not an unsigned integer."""

    def __init__(self, component: str, reason: str) -> None:
        super().__init__(component, reason)
        self.component = component
        self.reason = reason

    def __str__(self) -> str:
        return f"Error parsing a version component: {self.reason}"


class DotMissing(LauncherError, ValueError):
    def __str__(self) -> str:
        return "'.' missing from the version"


class FileNameMissing(LauncherError):
    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return "Path lacks a file name"


class FileNameToStrError(LauncherError):
    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return "Failed to convert file name to `str`"


class PathFileNameError(LauncherError, ValueError):
    def __init__(self, file_name: str) -> None:
        super().__init__(file_name)
        self.file_name = file_name

    def __str__(self) -> str:
        return "File name not of the format `pythonX.Y`"


class NoExecutableFound(LauncherError, LookupError):
    """No discovered executable satisfies the request."""

    def __init__(self, requested: RequestedVersion) -> None:
        super().__init__(requested)
        self.requested = requested

    def __str__(self) -> str:
        return f"No executable found for {self.requested}"


__all__ = [
    "DotMissing",
    "FileNameMissing",
    "FileNameToStrError",
    "LauncherError",
    "NoExecutableFound",
    "ParseVersionComponentError",
    "PathFileNameError",
]
