"""Document algebra module.

Exports the document node types, the combinators used to build
documents, and the width-aware ``render`` function.
"""
from __future__ import annotations

from elmdoc.document.document import (
    Concat,
    Doc,
    Fill,
    Group,
    HardLine,
    IfBreak,
    Line,
    Mode,
    Nest,
    Text,
    concat,
    fill,
    group,
    hardline,
    if_break,
    join,
    line,
    nest,
    nil,
    render,
    softline,
    text,
)

__all__ = [
    # Node types
    "Doc",
    "Text",
    "Concat",
    "Line",
    "HardLine",
    "Nest",
    "Group",
    "Fill",
    "IfBreak",
    "Mode",
    # Combinators
    "nil",
    "text",
    "concat",
    "join",
    "line",
    "softline",
    "hardline",
    "nest",
    "group",
    "fill",
    "if_break",
    # Renderer
    "render",
]
