from __future__ import annotations

import logging
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ._config import apply_env_overrides, search_dirs
from ._errors import LauncherError, NoExecutableFound
from ._version import AnyVersion, Exact, ExactVersion, MajorOnly, parse_requested_version

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Mapping

    from ._version import RequestedVersion

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


def flatten_directories(directories: Iterable[Path]) -> Generator[Path, None, None]:
    """Yield the entries of every readable directory, keeping directory order."""
    for directory in directories:
        entries: list[Path] = []
        with suppress(OSError):
            entries = list(Path(directory).iterdir())
        if not entries:
            _LOGGER.debug("nothing to discover in %s", directory)
        yield from entries


def all_executables_in_paths(paths: Iterable[Path]) -> dict[ExactVersion, Path]:
    """Map each version to the first path carrying it; names not matching ``pythonX.Y`` are skipped."""
    executables: dict[ExactVersion, Path] = {}
    for path in paths:
        try:
            version = ExactVersion.from_path(path)
        except LauncherError:
            continue
        if version in executables:
            _LOGGER.debug("ignore %s, python %s already found at %s", path, version, executables[version])
            continue
        _LOGGER.debug("discovered python %s at %s", version, path)
        executables[version] = Path(path)
    return executables


def all_executables(env: Mapping[str, str] | None = None) -> dict[ExactVersion, Path]:
    return all_executables_in_paths(flatten_directories(search_dirs(env)))


def find_executable_in_mapping(
    requested: RequestedVersion,
    executables: Mapping[ExactVersion, Path],
) -> Path | None:
    """Pick the highest version satisfying *requested*, or the exact one for an exact request."""
    if isinstance(requested, Exact):
        return executables.get(ExactVersion(requested.major, requested.minor))
    if isinstance(requested, (AnyVersion, MajorOnly)):
        candidates = [version for version in executables if version.supports(requested)]
        return executables[max(candidates)] if candidates else None
    msg = f"unknown version request {requested!r}"
    raise TypeError(msg)


def find_executable(requested: RequestedVersion, env: Mapping[str, str] | None = None) -> Path | None:
    return find_executable_in_mapping(requested, all_executables(env))


def resolve(key: str, env: Mapping[str, str] | None = None) -> Path:
    """
    Resolve a request string such as ``""``, ``"3"`` or ``"3.8"`` to an interpreter path.

    ``PY_PYTHON`` style environment variables may narrow the request first.

    :raises LauncherError: if *key* is malformed
    :raises NoExecutableFound: if no discovered interpreter satisfies the request
    """
    requested = apply_env_overrides(parse_requested_version(key), env)
    _LOGGER.info("find executable for %s", requested)
    if (path := find_executable(requested, env)) is None:
        raise NoExecutableFound(requested)
    _LOGGER.info("selected %s", path)
    return path


def list_executables(env: Mapping[str, str] | None = None) -> list[tuple[ExactVersion, Path]]:
    """Return every discovered interpreter, newest first."""
    if not (executables := all_executables(env)):
        raise NoExecutableFound(AnyVersion())
    return sorted(executables.items(), reverse=True)


__all__ = [
    "all_executables",
    "all_executables_in_paths",
    "find_executable",
    "find_executable_in_mapping",
    "flatten_directories",
    "list_executables",
    "resolve",
]
