from __future__ import annotations

from dataclasses import dataclass, field

from ..common import Px, add_slots
from .parse import FIRST_LINE_BREAK, LINE_BREAK, Break


@add_slots
@dataclass
class LineState:
    """The running state while wrapping a single text.

    Not shared: each call to the wrap algorithm creates its own.
    """

    output: list[str] = field(default_factory=list)
    line: list[str] = field(default_factory=list)  # words on the current line
    width: Px = 0
    first_line: bool = True  # of the paragraph
    first_word: bool = True  # of the line

    def hard_break(self, brk: Break) -> None:
        "Emit a line break written in the source text"
        self.output.extend((" ".join(self.line), brk.txt, "\n"))
        self.line.clear()
        self.width = 0
        self.first_word = True
        self.first_line = brk.is_paragraph

    def wrap(self, word: str, width: Px) -> None:
        "Break the line, and start a new one with the given word"
        if self.first_line:
            self.output.extend((" ".join(self.line), FIRST_LINE_BREAK, "\n"))
            self.first_line = False
        else:
            self.output.extend((" ".join(self.line), LINE_BREAK, "\n"))
        self.line[:] = [word]
        # NOTE: the width may include the space preceding the word,
        # which is no longer rendered. This slight overestimate is
        # kept to produce the same breaks as existing scripts expect.
        self.width = width
        self.first_word = False

    def place(self, word: str, width: Px) -> None:
        "Add a word to the current line"
        self.line.append(word)
        self.width += width
        self.first_word = False

    def finish(self) -> str:
        if self.line:
            self.output.append(" ".join(self.line))
        return "".join(self.output)
