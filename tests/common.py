from __future__ import annotations

from pathlib import Path

from pixwrap.fonts import FontMetricsTable
from pixwrap.typeset.parse import tokenize

RESOURCES = Path(__file__).parent / "../resources"

EMPTY = FontMetricsTable({})

DIALOG = """\
Hey, {PLAYER}! Professor Oak is looking for you. \
He said something about a new research project, \
and that he needs someone brave enough to help. \
Don't keep him waiting, okay? He gets grumpy when \
his tea goes cold, and then nobody gets any work done."""


def unwrap(txt: str) -> str:
    "Undo the breaks inserted by wrapping"
    return txt.replace("\\n\n", " ").replace("\\l\n", " ")


def words(txt: str) -> list[str]:
    return [t.txt for t in tokenize(txt)]
