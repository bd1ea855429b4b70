"""Where to look for interpreters and which request the environment asks for."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from platformdirs import user_data_path

from ._version import parse_requested_version

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

    from ._version import RequestedVersion

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_UV_INSTALL_VERSION_RE: Final[re.Pattern[str]] = re.compile(r"-(\d+)\.(\d+)\.(\d+)")


def get_paths(env: Mapping[str, str] | None = None) -> Generator[Path, None, None]:
    """Yield the ``PATH`` entries in order; an unset ``PATH`` yields nothing."""
    env = os.environ if env is None else env
    if path := env.get("PATH"):
        for entry in path.split(os.pathsep):
            if entry:
                yield Path(entry)


def uv_python_root(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    if uv_python_dir := env.get("UV_PYTHON_INSTALL_DIR"):
        return Path(uv_python_dir).expanduser()
    if xdg_data_home := env.get("XDG_DATA_HOME"):
        return Path(xdg_data_home).expanduser() / "uv" / "python"
    return user_data_path("uv") / "python"


def _uv_install_key(bin_dir: Path) -> tuple[int, tuple[int, ...], str]:
    name = bin_dir.parent.name
    if match := _UV_INSTALL_VERSION_RE.search(name):
        return 0, tuple(-int(part) for part in match.groups()), name
    return 1, (), name


def uv_python_dirs(env: Mapping[str, str] | None = None) -> list[Path]:
    """
    Return the ``bin`` folders of uv managed interpreters, newest release first.

    Installs are ordered by the ``X.Y.Z`` in their folder name (``cpython-3.12.10-linux-x86_64-gnu`` before
    ``cpython-3.12.1-linux-x86_64-gnu``), so the newest patch release wins its ``X.Y``. Folders without a version
    come last, by name.
    """
    return sorted(uv_python_root(env).glob("*/bin"), key=_uv_install_key)


def search_dirs(env: Mapping[str, str] | None = None) -> list[Path]:
    """Directories to scan, ``PATH`` first so it takes priority over uv installs."""
    return [*get_paths(env), *uv_python_dirs(env)]


def apply_env_overrides(requested: RequestedVersion, env: Mapping[str, str] | None = None) -> RequestedVersion:
    """
    Narrow *requested* with ``PY_PYTHON`` and ``PY_PYTHON<major>``.

    ``PY_PYTHON=3`` turns an unconstrained request into ``Python 3``, after which ``PY_PYTHON3=3.8`` narrows it to
    ``Python 3.8``. Exact requests are never overridden, and a variable leading back to an earlier request ends the
    chain.
    """
    env = os.environ if env is None else env
    seen = {requested}
    while (name := requested.env_var()) is not None and (value := env.get(name)):
        override = parse_requested_version(value)
        if override in seen:
            break
        seen.add(override)
        _LOGGER.debug("%s=%s overrides request for %s", name, value, requested)
        requested = override
    return requested


__all__ = [
    "apply_env_overrides",
    "get_paths",
    "search_dirs",
    "uv_python_dirs",
    "uv_python_root",
]
