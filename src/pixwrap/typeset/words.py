"Measuring the pixel width of words"
from __future__ import annotations

from typing import Iterator, NamedTuple

from ..common import FontID, Px
from ..fonts.common import FontMetricsTable


class Segment(NamedTuple):
    txt: str
    is_code: bool  # i.e. a control code such as {COLOR RED}


def segments(word: str) -> Iterator[Segment]:
    """Split a word into runs of glyphs and control codes.

    Braces are matched by nesting depth, the same way the tokenizer
    does. A stray ``}`` counts as a glyph, as does everything following
    a ``{`` which is never closed.
    """
    depth = 0
    start = 0
    for pos, char in enumerate(word):
        if char == "{":
            if not depth:
                if pos > start:
                    yield Segment(word[start:pos], False)
                start = pos
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if not depth:
                yield Segment(word[start : pos + 1], True)  # noqa
                start = pos + 1
    if start < len(word):
        yield Segment(word[start:], False)


def word_width(word: str, font_id: FontID, table: FontMetricsTable) -> Px:
    """The rendered width of a word, excluding any surrounding space"""
    width = 0
    for txt, is_code in segments(word):
        if is_code:
            width += table.width_of(txt, font_id)
        else:
            width += sum(table.width_of(c, font_id) for c in txt)
    return width


def space_width(font_id: FontID, table: FontMetricsTable) -> Px:
    return table.width_of(" ", font_id)
