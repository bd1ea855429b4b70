"""Find the installed ``pythonX.Y`` executable that best matches a requested version."""

from __future__ import annotations

from importlib.metadata import version

from ._config import apply_env_overrides, get_paths, search_dirs
from ._discovery import (
    all_executables,
    all_executables_in_paths,
    find_executable,
    find_executable_in_mapping,
    list_executables,
    resolve,
)
from ._errors import (
    DotMissing,
    FileNameMissing,
    FileNameToStrError,
    LauncherError,
    NoExecutableFound,
    ParseVersionComponentError,
    PathFileNameError,
)
from ._version import AnyVersion, Exact, ExactVersion, MajorOnly, RequestedVersion, parse_requested_version

__version__ = version("python-launcher")

__all__ = [
    "AnyVersion",
    "DotMissing",
    "Exact",
    "ExactVersion",
    "FileNameMissing",
    "FileNameToStrError",
    "LauncherError",
    "MajorOnly",
    "NoExecutableFound",
    "ParseVersionComponentError",
    "PathFileNameError",
    "RequestedVersion",
    "__version__",
    "all_executables",
    "all_executables_in_paths",
    "apply_env_overrides",
    "find_executable",
    "find_executable_in_mapping",
    "get_paths",
    "list_executables",
    "parse_requested_version",
    "resolve",
    "search_dirs",
]
