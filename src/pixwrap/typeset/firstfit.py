"A greedy first-fit line wrapping algorithm, measured in pixels."
from __future__ import annotations

from typing import Iterable

from ..common import FontID, Px
from ..fonts.common import FontMetricsTable
from .parse import Break, Token
from .state import LineState
from .words import space_width, word_width


def wrap(
    tokens: Iterable[Token],
    max_width: Px,
    font_id: FontID,
    table: FontMetricsTable,
) -> str:
    """Join the tokens into lines no wider than ``max_width``, separated
    by break markers. A word wider than the line is placed on its own
    line, rather than split.
    """
    state = LineState()
    space = space_width(font_id, table)
    for token in tokens:
        if isinstance(token, Break):
            state.hard_break(token)
            continue

        width = word_width(token.txt, font_id, table)
        if not state.first_word:
            width += space
        if state.width + width > max_width and state.line:
            state.wrap(token.txt, width)
        else:
            state.place(token.txt, width)
    return state.finish()
