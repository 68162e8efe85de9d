"""Documentation comment pretty printer: comment → delimited text.

The ``CommentFormatter`` turns a ``DocComment`` or ``FileComment`` into
canonical ``{-| ... -}`` text that fits a page width:

- Markdown is reflowed word by word; blank lines between paragraphs are
  kept as a single blank line
- Code is printed verbatim under a 4-column indent
- Adjacent ``@docs`` blocks are merged and packed into ``@docs`` lines
- Parts are separated by one blank line
- The closing ``-}`` sits on its own line

Usage
-----
::

    from elmdoc.formatter import CommentFormatter, FormatConfig
    from elmdoc.parser import parse_file_comment

    formatter = CommentFormatter(FormatConfig(width=80))
    text, groups = formatter.format_file(parse_file_comment(body))
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from elmdoc.ast.nodes import Code, Comment, DocComment, FileComment, Markdown
from elmdoc.document import (
    Doc,
    concat,
    fill,
    hardline,
    join,
    group,
    if_break,
    line,
    nest,
    nil,
    render,
    text,
)
from elmdoc.formatter.tags import DOCS_TOKEN, LaidOutPart, TagBlock, layout_tags

logger = logging.getLogger(__name__)

OPEN_TOKEN = "{-| "
CLOSE_TOKEN = "-}"
CODE_INDENT = 4
DEFAULT_WIDTH = 80

_BLANK_LINE = concat(hardline(), hardline())

# Words the parser reads as structure when they open a line.
_LINE_START_MARKERS = frozenset({DOCS_TOKEN, CLOSE_TOKEN})


@dataclass(frozen=True)
class FormatConfig:
    """Configuration for :class:`CommentFormatter`.

    Parameters
    ----------
    width:
        Page width in columns; must be at least 1.
    """

    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"width must be a positive number of columns, got {self.width}")


def _require_kind(comment: Comment, expected: type[Comment]) -> None:
    if not isinstance(comment, expected):
        raise TypeError(f"Expected {expected.__name__}, got {type(comment).__name__}")


class CommentFormatter:
    """Produces canonical comment text from a comment value.

    Parameters
    ----------
    config:
        Formatting options; defaults to ``FormatConfig()``.
    """

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config or FormatConfig()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def format_doc(self, comment: DocComment) -> str:
        """Render a declaration comment.

        Raises
        ------
        TypeError
            If ``comment`` is not a ``DocComment``.
        """
        _require_kind(comment, DocComment)
        doc, _ = self.to_document(comment)
        return render(doc, self._config.width)

    def format_file(self, comment: FileComment) -> tuple[str, list[list[str]]]:
        """Render a module comment and return its grouped ``@docs`` names.

        Returns
        -------
        tuple[str, list[list[str]]]
            The rendered comment and one list of names per tag group, in
            source order.

        Raises
        ------
        TypeError
            If ``comment`` is not a ``FileComment``.
        """
        _require_kind(comment, FileComment)
        doc, groups = self.to_document(comment)
        return render(doc, self._config.width), groups

    def to_document(self, comment: Comment) -> tuple[Doc, list[list[str]]]:
        """Build the delimited document for ``comment`` without rendering it."""
        layout = layout_tags(comment.parts())
        fragments = [self._part_document(part) for part in layout.parts]
        body = join(_BLANK_LINE, fragments)
        # Code cannot start on the delimiter line without losing its indent.
        if layout.parts and isinstance(layout.parts[0], Code):
            body = concat(hardline(), body)
        # Anything else moves down only when its first item overflows the line.
        elif layout.parts:
            body = concat(group(if_break(hardline(), nil())), body)
        logger.debug(
            "Built %s document: %d part(s), %d tag group(s), width %d",
            type(comment).__name__,
            len(layout.parts),
            len(layout.groups),
            self._config.width,
        )
        return concat(text(OPEN_TOKEN), body, hardline(), text(CLOSE_TOKEN)), layout.groups

    # ------------------------------------------------------------------
    # Part formatting
    # ------------------------------------------------------------------

    def _part_document(self, part: LaidOutPart) -> Doc:
        if isinstance(part, Markdown):
            return self._format_markdown(part)
        if isinstance(part, Code):
            return self._format_code(part)
        if isinstance(part, TagBlock):
            return part.document
        raise TypeError(f"Unknown comment part type: {type(part)}")

    @staticmethod
    def _format_markdown(part: Markdown) -> Doc:
        paragraphs: list[list[str]] = [[]]
        for source_line in part.text.split("\n"):
            words = source_line.split()
            if words:
                paragraphs[-1].extend(words)
            elif paragraphs[-1]:
                paragraphs.append([])
        return join(
            _BLANK_LINE,
            (
                fill((text(unit) for unit in _glue_markers(words)), line())
                for words in paragraphs
                if words
            ),
        )

    @staticmethod
    def _format_code(part: Code) -> Doc:
        lines = part.lines
        body = nest(CODE_INDENT, join(hardline(), [text(code_line) for code_line in lines]))
        if not lines[0]:
            return body
        return concat(text(" " * CODE_INDENT), body)


def _glue_markers(words: list[str]) -> list[str]:
    """Attach every line-start marker to the word before it."""
    units: list[str] = []
    for word in words:
        if units and word in _LINE_START_MARKERS:
            units[-1] = f"{units[-1]} {word}"
        else:
            units.append(word)
    return units


def pretty_doc_comment(width: int, comment: DocComment) -> str:
    """Convenience function: render a ``DocComment`` at ``width`` columns.

    Parameters
    ----------
    width:
        Page width in columns.
    comment:
        The declaration comment to render.

    Returns
    -------
    str
        Text starting with ``{-| `` and ending with a ``-}`` line.
    """
    return CommentFormatter(FormatConfig(width=width)).format_doc(comment)


def pretty_file_comment(width: int, comment: FileComment) -> tuple[str, list[list[str]]]:
    """Convenience function: render a ``FileComment`` at ``width`` columns.

    The second element lists the names of every ``@docs`` group in source
    order, for callers that reorder the module's exports.
    """
    return CommentFormatter(FormatConfig(width=width)).format_file(comment)
