"Exceptions raised by pixwrap"
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .common import FontID

__all__ = [
    "Error",
    "ConfigLoadError",
    "ConfigParseError",
    "UnknownFontID",
    "FontToolsMissing",
]


class Error(Exception):
    """Base class for all errors raised by this library"""


class ConfigLoadError(Error):
    """The font metrics configuration could not be read"""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"cannot read font config '{path}': {reason}")
        self.path = path
        self.reason = reason


class ConfigParseError(Error):
    """The font metrics configuration was read, but its content is invalid"""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"invalid font config '{path}': {reason}")
        self.path = path
        self.reason = reason


class UnknownFontID(Error):
    """A font identifier which is not present in the metrics table"""

    def __init__(self, font_id: FontID, valid: Sequence[FontID]) -> None:
        super().__init__(
            f"unknown font id '{font_id}'. "
            f"Valid font ids are {list(valid)}"
        )
        self.font_id = font_id
        self.valid = tuple(valid)


class FontToolsMissing(Error, NotImplementedError):
    def __init__(self) -> None:
        super().__init__(
            "Reading TrueType metrics requires the `fontTools` dependency. "
            "Install with pixwrap[fonts]"
        )
