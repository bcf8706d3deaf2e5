from __future__ import annotations

from .errors import (
    ConfigLoadError,
    ConfigParseError,
    Error,
    FontToolsMissing,
    UnknownFontID,
)
from .fonts import TEST_FONT_ID, FontMetrics, FontMetricsTable, load
from .typeset import format_text

__version__ = __import__("importlib.metadata").metadata.version(__name__)

__all__ = [
    # layout
    "format_text",
    # fonts
    "FontMetrics",
    "FontMetricsTable",
    "TEST_FONT_ID",
    "load",
    # errors
    "Error",
    "ConfigLoadError",
    "ConfigParseError",
    "UnknownFontID",
    "FontToolsMissing",
]
