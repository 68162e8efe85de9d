"""Comment parser module.

Exports the ``CommentParser`` class, the ``parse_doc_comment`` and
``parse_file_comment`` convenience functions, and ``strip_delimiters``.
"""
from __future__ import annotations

from elmdoc.parser.parser import (
    BlockKind,
    CommentParser,
    parse_doc_comment,
    parse_file_comment,
    strip_delimiters,
)

__all__ = [
    "CommentParser",
    "BlockKind",
    "parse_doc_comment",
    "parse_file_comment",
    "strip_delimiters",
]
