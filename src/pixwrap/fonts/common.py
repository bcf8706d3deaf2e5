from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, final

from ..common import FontID, Px, WidthKey, add_slots, setattr_frozen
from ..errors import UnknownFontID

# A sentinel font which bypasses the table entirely.
# Its widths are trivial to calculate by hand, which makes it
# convenient for testing layouts without a configuration file.
TEST_FONT_ID: FontID = "TEST"
TEST_CHAR_WIDTH: Px = 10
TEST_CODE_WIDTH: Px = 100

DEFAULT_KEY: WidthKey = "default"
_FALLBACK_WIDTH: Px = 0


@final
@add_slots
@dataclass(frozen=True)
class FontMetrics:
    """The pixel widths of a single font

    Parameters
    ----------
    widths
        Width per character or control code (e.g. ``{COLOR RED}``).
        The ``"default"`` key is used for anything not listed.
    max_line_length
        The width of the text box this font is typically shown in.
        This is only informational: the caller decides which width to
        wrap text to.

    """

    widths: Mapping[WidthKey, Px]
    max_line_length: Px = 0

    def __post_init__(self) -> None:
        setattr_frozen(self, "widths", MappingProxyType(dict(self.widths)))

    def width(self, key: WidthKey, /) -> Px:
        try:
            return self.widths[key]
        except KeyError:
            return self.widths.get(DEFAULT_KEY, _FALLBACK_WIDTH)


@final
@add_slots
@dataclass(frozen=True)
class FontMetricsTable:
    """All known fonts, by their identifier.

    Instances are immutable, and may be shared freely between threads.
    """

    fonts: Mapping[FontID, FontMetrics]
    default_font_id: FontID = ""

    def __post_init__(self) -> None:
        setattr_frozen(self, "fonts", MappingProxyType(dict(self.fonts)))

    # This method cannot be defined in the class body, as it would cause a
    # circular import. The implementation is patched into the class
    # in the `typeset` module.
    if TYPE_CHECKING:  # pragma: no cover

        def format_text(
            self, text: str, max_width: Px, font_id: FontID, /
        ) -> str:
            ...

    def width_of(self, key: WidthKey, font_id: FontID) -> Px:
        """Width of a character or control code in the given font.

        Never fails: unknown fonts and keys resolve to a width of zero,
        unless the font defines a ``"default"`` width.
        """
        if font_id == TEST_FONT_ID:
            # control codes are always wrapped in braces, so never 1 char
            return TEST_CHAR_WIDTH if len(key) == 1 else TEST_CODE_WIDTH
        try:
            font = self.fonts[font_id]
        except KeyError:
            return _FALLBACK_WIDTH
        return font.width(key)

    def validate(self, font_id: FontID) -> None:
        """Raise :class:`UnknownFontID` if the font cannot be used for
        layout. An empty identifier is allowed, and measures as zero width.
        """
        if font_id and font_id != TEST_FONT_ID and font_id not in self.fonts:
            raise UnknownFontID(font_id, sorted(self.fonts))

    def line_length(self, font_id: FontID = "") -> Px:
        """The advised text box width for the font (or the default font)"""
        font_id = font_id or self.default_font_id
        try:
            return self.fonts[font_id].max_line_length
        except KeyError:
            raise UnknownFontID(font_id, sorted(self.fonts)) from None
