"""Comment formatter module.

Exports the ``CommentFormatter`` class, its ``FormatConfig``, the
``pretty_doc_comment`` / ``pretty_file_comment`` convenience functions
and the tag layout helpers.
"""
from __future__ import annotations

from elmdoc.formatter.formatter import (
    CommentFormatter,
    FormatConfig,
    pretty_doc_comment,
    pretty_file_comment,
)
from elmdoc.formatter.tags import (
    TagBlock,
    TagLayout,
    group_tags,
    layout_tags,
    pack_tag_lines,
)

__all__ = [
    "CommentFormatter",
    "FormatConfig",
    "pretty_doc_comment",
    "pretty_file_comment",
    "TagBlock",
    "TagLayout",
    "layout_tags",
    "group_tags",
    "pack_tag_lines",
]
