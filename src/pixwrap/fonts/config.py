"""Loading and saving font metrics configuration files.

The format is JSON, of the following shape:

.. code-block:: json

    {
      "defaultFontId": "1_latin_rse",
      "fonts": {
        "1_latin_rse": {
          "widths": {"a": 6, "{PLAYER}": 42, "default": 6},
          "maxLineLength": 208
        }
      }
    }

"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from ..common import FontID
from ..errors import ConfigLoadError, ConfigParseError
from .common import FontMetrics, FontMetricsTable

__all__ = ["load", "from_dict", "dump", "save"]

logger = logging.getLogger(__name__)


def load(path: Path | str) -> FontMetricsTable:
    """Read a metrics table from a JSON file

    Raises
    ------
    ConfigLoadError
        If the file cannot be read
    ConfigParseError
        If the file is not valid JSON, or has the wrong structure
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigLoadError(path, e.strerror or str(e)) from e
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ConfigParseError(path, str(e)) from e
    table = from_dict(data, source=path)
    logger.debug("loaded %d font(s) from %s", len(table.fonts), path)
    return table


def from_dict(data: Any, source: Path | str = "<data>") -> FontMetricsTable:
    """Build a metrics table from already-parsed configuration data"""
    if not isinstance(data, Mapping):
        raise ConfigParseError(source, "expected an object at the top level")
    fonts = data.get("fonts")
    if not isinstance(fonts, Mapping):
        raise ConfigParseError(source, "'fonts' must be an object")
    default_font_id = data.get("defaultFontId", "")
    if not isinstance(default_font_id, str):
        raise ConfigParseError(source, "'defaultFontId' must be a string")

    table = FontMetricsTable(
        {
            font_id: _parse_font(source, font_id, font)
            for font_id, font in fonts.items()
        },
        default_font_id,
    )
    if default_font_id and default_font_id not in table.fonts:
        logger.warning(
            "default font '%s' in %s is not among the configured fonts",
            default_font_id,
            source,
        )
    return table


def _parse_font(source: Path | str, font_id: FontID, data: Any) -> FontMetrics:
    if not isinstance(data, Mapping):
        raise ConfigParseError(source, f"font '{font_id}' must be an object")
    widths = data.get("widths", {})
    if not isinstance(widths, Mapping):
        raise ConfigParseError(
            source, f"'widths' of font '{font_id}' must be an object"
        )
    for key, width in widths.items():
        if not _is_px(width):
            raise ConfigParseError(
                source,
                f"width of {key!r} in font '{font_id}' must be "
                f"a non-negative integer, got {width!r}",
            )
    max_line_length = data.get("maxLineLength", 0)
    if not isinstance(max_line_length, int) or isinstance(
        max_line_length, bool
    ):
        raise ConfigParseError(
            source,
            f"'maxLineLength' of font '{font_id}' must be "
            f"an integer, got {max_line_length!r}",
        )
    return FontMetrics(widths, max_line_length)


def _is_px(v: object) -> bool:
    # bool is a subclass of int, but `true` is never a valid width
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0


def dump(table: FontMetricsTable) -> dict[str, Any]:
    """The inverse of :func:`from_dict`"""
    return {
        "defaultFontId": table.default_font_id,
        "fonts": {
            font_id: {
                "widths": dict(font.widths),
                "maxLineLength": font.max_line_length,
            }
            for font_id, font in table.fonts.items()
        },
    }


def save(table: FontMetricsTable, path: Path | str) -> None:
    Path(path).write_text(
        json.dumps(dump(table), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
