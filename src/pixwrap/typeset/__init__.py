"""Inserting line breaks into text, so that it fits a text box.

.. code-block:: python

    >>> table = FontMetricsTable({})
    >>> format_text("ab cd", 25, TEST_FONT_ID, table)
    'ab\\\\n\\ncd'

"""
from __future__ import annotations

from ..common import FontID, Px
from ..fonts.common import FontMetricsTable
from . import firstfit
from .parse import tokenize

__all__ = ["format_text"]


def format_text(
    text: str, max_width: Px, font_id: FontID, table: FontMetricsTable
) -> str:
    """Insert line breaks into the text so that no line exceeds
    ``max_width`` pixels when rendered in the given font.

    Breaks already present in the text (``\\n``, ``\\l``, ``\\p``)
    are kept. Inserted breaks are ``\\n`` for the first line of a
    paragraph, and ``\\l`` for subsequent lines. Each break is followed
    by a newline character. Newline characters in the input are
    treated as spaces.

    Raises
    ------
    UnknownFontID
        If the font is not in the table. An empty font identifier is
        allowed, but then every width is zero.
    """
    table.validate(font_id)
    return firstfit.wrap(
        tokenize(text.replace("\n", " ")), max_width, font_id, table
    )


def _format_text(
    self: FontMetricsTable, text: str, max_width: Px, font_id: FontID, /
) -> str:
    return format_text(text, max_width, font_id, self)


FontMetricsTable.format_text = _format_text  # type: ignore[method-assign]
