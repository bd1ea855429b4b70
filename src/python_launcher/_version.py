"""Installed interpreter versions and the version requests matched against them."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from pathlib import PurePath
from typing import Final, Union

from ._errors import DotMissing, FileNameMissing, FileNameToStrError, ParseVersionComponentError, PathFileNameError

_DC_KW = {"frozen": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

_COMPONENT_RE: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")
_COMPONENT_MAX: Final[int] = 0xFFFF
_PREFIX: Final[str] = "python"
_SHORTEST_NAME: Final[str] = "python3.0"
ENV_VAR_PREFIX: Final[str] = "PY_PYTHON"


def _parse_component(text: str) -> int:
    """Parse an unsigned 16-bit version component: ASCII digits with an optional leading ``+``."""
    if not text:
        reason = "cannot parse integer from empty string"
    elif not _COMPONENT_RE.fullmatch(text):
        reason = "invalid digit found in string"
    else:
        value = int(text)
        if value <= _COMPONENT_MAX:
            return value
        reason = "number too large to fit in target type"
    raise ParseVersionComponentError(text, reason) from ValueError(reason)


@dataclass(**_DC_KW)
class AnyVersion:
    """No constraint on the version."""

    def __str__(self) -> str:
        return "Python"

    def env_var(self) -> str | None:  # noqa: PLR6301
        return ENV_VAR_PREFIX


@dataclass(**_DC_KW)
class MajorOnly:
    """Only the major version is constrained."""

    major: int

    def __str__(self) -> str:
        return f"Python {self.major}"

    def env_var(self) -> str | None:
        return f"{ENV_VAR_PREFIX}{self.major}"


@dataclass(**_DC_KW)
class Exact:
    """Both the major and the minor version are constrained."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"Python {self.major}.{self.minor}"

    def env_var(self) -> str | None:  # noqa: PLR6301
        return None


RequestedVersion = Union[AnyVersion, MajorOnly, Exact]


def parse_requested_version(version_string: str) -> RequestedVersion:
    """
    Parse what a user asked for.

    ``""`` means any version, ``"3"`` a major version only and ``"3.8"`` an exact version. A string with more than
    one dot is rejected as its minor component does not parse.
    """
    if not version_string:
        return AnyVersion()
    if "." in version_string:
        return ExactVersion.from_string(version_string).as_requested()
    return MajorOnly(_parse_component(version_string))


@dataclass(order=True, **_DC_KW)
class ExactVersion:
    """The ``major.minor`` version of an installed interpreter, ordered by major then minor."""

    major: int
    minor: int

    @classmethod
    def from_string(cls, version_string: str) -> ExactVersion:
        major_str, dot, minor_str = version_string.partition(".")
        if not dot:
            raise DotMissing
        return cls(_parse_component(major_str), _parse_component(minor_str))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ExactVersion:
        """Extract the version from an executable named ``pythonX.Y``."""
        raw = os.fspath(path)
        file_name = PurePath(raw).name
        if file_name in {"", ".."}:
            raise FileNameMissing(raw)
        try:
            # undecodable bytes surface as lone surrogates
            encoded = file_name.encode("utf-8")
        except UnicodeEncodeError as exception:
            raise FileNameToStrError(raw) from exception
        if len(encoded) < len(_SHORTEST_NAME) or not file_name.startswith(_PREFIX):
            raise PathFileNameError(file_name)
        return cls.from_string(file_name[len(_PREFIX) :])

    def as_requested(self) -> Exact:
        return Exact(self.major, self.minor)

    def supports(self, requested: RequestedVersion) -> bool:
        if isinstance(requested, AnyVersion):
            return True
        if isinstance(requested, MajorOnly):
            return self.major == requested.major
        if isinstance(requested, Exact):
            return self.major == requested.major and self.minor == requested.minor
        msg = f"unknown version request {requested!r}"
        raise TypeError(msg)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


__all__ = [
    "ENV_VAR_PREFIX",
    "AnyVersion",
    "Exact",
    "ExactVersion",
    "MajorOnly",
    "RequestedVersion",
    "parse_requested_version",
]
