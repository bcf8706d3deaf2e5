"Splitting text into words and authored line breaks"
from __future__ import annotations

from typing import Iterator, NamedTuple

from ..common import Pos

FIRST_LINE_BREAK = "\\n"
LINE_BREAK = "\\l"
PARAGRAPH_BREAK = "\\p"
BREAKS = frozenset((FIRST_LINE_BREAK, LINE_BREAK, PARAGRAPH_BREAK))

_BREAK_CHARS = frozenset("lnp")


class Word(NamedTuple):
    "A run of non-space text, possibly containing control codes"
    txt: str


class Break(NamedTuple):
    "A line break escape, written explicitly in the source text"
    txt: str

    @property
    def is_paragraph(self) -> bool:
        return self.txt == PARAGRAPH_BREAK


Token = Word | Break


def tokenize(txt: str) -> Iterator[Token]:
    pos = 0
    while pos < len(txt):
        consumed, token = next_token(txt[pos:])
        if not token:
            return
        pos += consumed
        yield Break(token) if token in BREAKS else Word(token)


def next_token(txt: str) -> tuple[Pos, str]:
    """Find the first token in the text.

    Returns the number of characters consumed, and the token itself.
    An empty token means the text contains nothing but spaces.

    Spaces separate tokens, except within a brace-delimited control code,
    e.g. ``{COLOR RED}``. A break escape (``\\n``, ``\\l``, ``\\p``) is
    always a token of its own: if it directly follows a word,
    only the word is consumed. A doubled backslash is plain text,
    so ``\\\\n`` is never a break.
    """
    start = end = 0
    escape = found_nonspace = found_regular = end_on_next = False
    depth = 0  # of nested control codes
    for pos, char in enumerate(txt):
        if end_on_next:
            return pos, txt[start:pos]
        if escape and char in _BREAK_CHARS:
            if found_regular:
                return end, txt[start:end]
            end_on_next = True
        elif char == "\\" and not depth and not escape:
            escape = True
            if not found_nonspace:
                start = pos
            found_nonspace = True
            end = pos
        else:
            if char == " ":
                if found_nonspace and not depth:
                    return pos, txt[start:pos]
            else:
                if not found_nonspace:
                    start = pos
                found_regular = found_nonspace = True
                if char == "{":
                    depth += 1
                elif char == "}" and depth:
                    depth -= 1
            escape = False
    if not found_nonspace:
        return len(txt), ""
    return len(txt), txt[start:]
