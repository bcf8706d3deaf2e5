"Deriving pixel metrics from TrueType font files"
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Mapping

from ..common import Char, Px, WidthKey
from ..errors import FontToolsMissing
from .common import DEFAULT_KEY, FontMetrics

try:
    from fontTools.ttLib import TTFont
except ModuleNotFoundError:  # pragma: no cover
    HAS_FONTTOOLS = False
else:
    HAS_FONTTOOLS = True

__all__ = ["from_truetype", "HAS_FONTTOOLS"]

logger = logging.getLogger(__name__)

_REPLACEMENT_GLYPH = ".notdef"


if TYPE_CHECKING or HAS_FONTTOOLS:

    def from_truetype(
        path: Path | str,
        px_size: float,
        max_line_length: Px = 0,
        chars: Iterable[Char] | None = None,
        default: Px | None = None,
        control_codes: Mapping[WidthKey, Px] | None = None,
    ) -> FontMetrics:
        """Measure the advance widths of a .ttf file at a given pixel size

        Parameters
        ----------
        path
            The .ttf file
        px_size
            The size of one em, in pixels
        max_line_length
            The advised text box width to record with the metrics
        chars
            Only measure these characters. By default, all characters
            mapped by the font are measured. Characters the font
            doesn't map are left out, and fall back to the default width.
        default
            The fallback width. By default, the width of the font's
            replacement glyph.
        control_codes
            Fixed widths for control codes (e.g. ``{PLAYER}``),
            which cannot be derived from the font itself.

        """
        path = Path(path)
        with TTFont(path) as font:
            scale = px_size / font["head"].unitsPerEm
            cmap: dict[int, str] = font.getBestCmap() or {}
            advances = font["hmtx"].metrics
            widths: dict[WidthKey, Px] = {}
            for ordinal in cmap if chars is None else map(ord, chars):
                try:
                    glyph = cmap[ordinal]
                except KeyError:
                    continue
                widths[chr(ordinal)] = round(advances[glyph][0] * scale)
            logger.debug(
                "measured %d glyph(s) of %s at %gpx",
                len(widths),
                path,
                px_size,
            )
            widths[DEFAULT_KEY] = (
                round(advances.get(_REPLACEMENT_GLYPH, (0, 0))[0] * scale)
                if default is None
                else default
            )
        widths.update(control_codes or {})
        return FontMetrics(widths, max_line_length)

else:  # pragma: no cover

    def from_truetype(
        path: Path | str,
        px_size: float,
        max_line_length: Px = 0,
        chars: Iterable[Char] | None = None,
        default: Px | None = None,
        control_codes: Mapping[WidthKey, Px] | None = None,
    ) -> FontMetrics:
        raise FontToolsMissing()
