"""Tag layout: grouping and width-bounded packing of ``@docs`` blocks.

Adjacent ``DocTags`` parts (no prose or code between them) describe one
logical group of names.  ``layout_tags`` merges each run into a single
``TagBlock`` and records the names of every group, in source order, for
callers that reorder exports to match the documentation.

A ``TagBlock`` renders as::

    @docs alpha, beta
    @docs gamma

Names are packed greedily: a name stays on the current line when the
line, including ``", "`` and the name, is at most the page width.  A
name is never split; a name wider than the page sits alone on its line.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from elmdoc.ast.nodes import Code, CommentPart, DocTags, Markdown
from elmdoc.document import Doc, concat, fill, hardline, if_break, render, text

logger = logging.getLogger(__name__)

DOCS_TOKEN = "@docs"
NAME_SEPARATOR = ", "

# Flat: ", " between names.  Broken: a new line that repeats the marker.
_TAG_SEPARATOR: Doc = if_break(
    concat(hardline(), text(f"{DOCS_TOKEN} ")),
    text(NAME_SEPARATOR),
)


@dataclass(frozen=True, slots=True)
class TagBlock:
    """One logical ``@docs`` group after merging adjacent declarations."""

    names: tuple[str, ...]

    @property
    def document(self) -> Doc:
        """Return the packed layout of this group."""
        if not self.names:
            return text(DOCS_TOKEN)
        return concat(
            text(f"{DOCS_TOKEN} "),
            fill((text(name) for name in self.names), _TAG_SEPARATOR),
        )


LaidOutPart = Union[Markdown, Code, TagBlock]


@dataclass
class TagLayout:
    """Result of ``layout_tags``.

    Parameters
    ----------
    parts:
        The comment parts in original order, with each run of adjacent
        ``DocTags`` replaced by one ``TagBlock``.
    groups:
        The names of every ``TagBlock``, one list per group, in source
        order and independent of where lines wrap.
    """

    parts: list[LaidOutPart] = field(default_factory=list)
    groups: list[list[str]] = field(default_factory=list)


def layout_tags(parts: Iterable[CommentPart]) -> TagLayout:
    """Merge adjacent ``DocTags`` parts and collect the name groups.

    Parameters
    ----------
    parts:
        Comment parts in insertion order (``Comment.parts()``).

    Returns
    -------
    TagLayout
        Laid-out parts and grouped tag names.
    """
    layout = TagLayout()
    current: list[str] | None = None

    def flush() -> None:
        if current is not None:
            layout.parts.append(TagBlock(names=tuple(current)))
            layout.groups.append(list(current))

    for part in parts:
        if isinstance(part, DocTags):
            if current is None:
                current = []
            current.extend(part.names)
            continue
        flush()
        current = None
        layout.parts.append(part)
    flush()

    logger.debug(
        "Laid out %d tag group(s) across %d part(s)", len(layout.groups), len(layout.parts)
    )
    return layout


def group_tags(parts: Iterable[CommentPart]) -> list[list[str]]:
    """Return only the grouped tag names of ``parts``."""
    return layout_tags(parts).groups


def pack_tag_lines(names: Iterable[str], width: int, column: int = 0) -> list[str]:
    """Render one tag group to concrete lines.

    Parameters
    ----------
    names:
        The names of the group, in order.
    width:
        Page width in columns.
    column:
        Column at which the first line starts.  Later lines start at 0.

    Returns
    -------
    list[str]
        The ``@docs`` lines, the first one without its leading offset.
    """
    doc = TagBlock(names=tuple(names)).document
    rendered = render(concat(text(" " * column), doc), width)
    return rendered[column:].split("\n")
