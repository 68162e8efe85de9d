"""Documentation comment parser.

Converts the body of a ``{-| ... -}`` comment into a ``DocComment`` or
``FileComment`` made of ``Markdown``, ``Code`` and ``DocTags`` parts.

The parser is a single forward pass over the lines of the body.  Each
line is classified on its own:

- indented at least 4 columns past the base indentation: code
- starting with the ``@docs`` marker: a tag declaration
- anything else: markdown prose

Consecutive lines of the same kind form one block and every finished
block becomes one part.  Blank lines continue the current block, except
that a blank line ends a ``@docs`` block.  Blank lines at the edges of a
block are dropped.

Parsing is total: every line lands in some block, so there is no error
path.  An empty body produces a comment with no parts.

Usage
-----
::

    from elmdoc.parser import parse_doc_comment, strip_delimiters

    comment = parse_doc_comment(strip_delimiters(source))
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Final

from elmdoc.ast.nodes import (
    Code,
    CommentPart,
    DocComment,
    DocTags,
    FileComment,
    Markdown,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

OPEN_DELIMITER: Final[str] = "{-|"
CLOSE_DELIMITER: Final[str] = "-}"
DOCS_MARKER: Final[str] = "@docs"
CODE_INDENT: Final[int] = 4
TAB_SIZE: Final[int] = 4


class BlockKind(Enum):
    """Classification of a single body line."""

    MARKDOWN = auto()
    CODE = auto()
    TAGS = auto()


def strip_delimiters(text: str) -> str:
    """Remove the ``{-|`` / ``-}`` delimiters around a comment.

    One space directly after the opening delimiter is removed with it.
    Text without delimiters is returned unchanged.
    """
    body = text.strip()
    if not body.startswith(OPEN_DELIMITER):
        return text
    body = body[len(OPEN_DELIMITER):]
    if body.startswith(" "):
        body = body[1:]
    if body.endswith(CLOSE_DELIMITER):
        body = body[: -len(CLOSE_DELIMITER)]
    return body


def _split_indent(raw: str) -> tuple[str, str]:
    """Split a line into (leading whitespace with tabs expanded, rest)."""
    rest = raw.lstrip(" \t")
    leading = raw[: len(raw) - len(rest)].expandtabs(TAB_SIZE)
    return leading, rest


def _is_docs_line(content: str) -> bool:
    if not content.startswith(DOCS_MARKER):
        return False
    tail = content[len(DOCS_MARKER):]
    return not tail or tail[0].isspace()


def _split_names(declaration: str) -> list[str]:
    return [name.strip() for name in declaration.split(",") if name.strip()]


class CommentParser:
    """Line-oriented parser for documentation comment bodies.

    Parameters
    ----------
    base_indent:
        Columns of indentation shared by every line of the body.  Code
        blocks are recognised at ``base_indent + 4`` columns or more.
    """

    def __init__(self, base_indent: int = 0) -> None:
        if base_indent < 0:
            raise ValueError(f"base_indent must be >= 0, got {base_indent}")
        self._base_indent = base_indent

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse_doc_comment(self, body: str) -> DocComment:
        """Parse ``body`` into a ``DocComment``."""
        return DocComment.from_parts(self.parse_parts(body))

    def parse_file_comment(self, body: str) -> FileComment:
        """Parse ``body`` into a ``FileComment``."""
        return FileComment.from_parts(self.parse_parts(body))

    def parse_parts(self, body: str) -> list[CommentPart]:
        """Segment ``body`` into parts, in source order.

        Parameters
        ----------
        body:
            Comment text with the delimiters already removed.

        Returns
        -------
        list[CommentPart]
            One part per block; empty for an empty or blank body.
        """
        parts: list[CommentPart] = []
        kind: BlockKind | None = None
        lines: list[str] = []
        names: list[str] = []
        code_column = self._base_indent + CODE_INDENT

        def finish() -> None:
            part = self._make_part(kind, lines, names)
            if part is not None:
                parts.append(part)
            lines.clear()
            names.clear()

        source_lines = body.replace("\r\n", "\n").split("\n")
        for raw in source_lines:
            leading, content = _split_indent(raw)

            if not content.strip():
                if kind is BlockKind.TAGS:
                    finish()
                    kind = None
                elif kind is not None:
                    lines.append("")
                continue

            if len(leading) >= code_column:
                line_kind = BlockKind.CODE
            elif _is_docs_line(content):
                line_kind = BlockKind.TAGS
            else:
                line_kind = BlockKind.MARKDOWN

            if line_kind is not kind:
                if kind is not None:
                    finish()
                kind = line_kind

            if line_kind is BlockKind.CODE:
                lines.append(leading[code_column:] + content)
            elif line_kind is BlockKind.TAGS:
                names.extend(_split_names(content[len(DOCS_MARKER):]))
            else:
                lines.append((leading[self._base_indent:] + content).rstrip())

        if kind is not None:
            finish()

        logger.debug("Parsed %d part(s) from %d line(s)", len(parts), len(source_lines))
        return parts

    # ------------------------------------------------------------------
    # Block construction
    # ------------------------------------------------------------------

    @staticmethod
    def _make_part(
        kind: BlockKind | None, lines: list[str], names: list[str]
    ) -> CommentPart | None:
        if kind is BlockKind.TAGS:
            return DocTags(names=tuple(names))
        start, end = 0, len(lines)
        while start < end and not lines[start]:
            start += 1
        while end > start and not lines[end - 1]:
            end -= 1
        if start == end:
            return None
        text = "\n".join(lines[start:end])
        if kind is BlockKind.CODE:
            return Code(text=text)
        return Markdown(text=text)


def parse_doc_comment(body: str, base_indent: int = 0) -> DocComment:
    """Convenience function: parse a doc comment body.

    Parameters
    ----------
    body:
        Comment text between the delimiters.
    base_indent:
        Indentation shared by every line of the body.

    Returns
    -------
    DocComment
        The parsed comment; parsing never fails.
    """
    return CommentParser(base_indent).parse_doc_comment(body)


def parse_file_comment(body: str, base_indent: int = 0) -> FileComment:
    """Convenience function: parse a file (module) comment body."""
    return CommentParser(base_indent).parse_file_comment(body)
