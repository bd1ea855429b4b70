from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def uv_root(tmp_path: Path) -> Path:
    root = tmp_path / "uv-python"
    root.mkdir()
    return root


@pytest.fixture
def make_env(uv_root: Path) -> Callable[..., dict[str, str]]:
    """Build an isolated environment whose ``PATH`` is made of the given directories."""

    def _make_env(*dirs: Path, **extra: str) -> dict[str, str]:
        env = {"UV_PYTHON_INSTALL_DIR": str(uv_root), **extra}
        if dirs:
            env["PATH"] = os.pathsep.join(str(d) for d in dirs)
        return env

    return _make_env


@pytest.fixture
def populate(tmp_path: Path) -> Callable[..., Path]:
    """Create a directory holding empty files with the given names."""

    def _populate(name: str, *files: str) -> Path:
        folder = tmp_path / name
        folder.mkdir(parents=True, exist_ok=True)
        for file_name in files:
            (folder / file_name).touch()
        return folder

    return _populate
