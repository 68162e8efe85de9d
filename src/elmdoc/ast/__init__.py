"""Comment model module.

Exports the comment part types, the two comment kinds, and the
serializer for converting comments to and from JSON/YAML.
"""
from __future__ import annotations

from elmdoc.ast.nodes import (
    Code,
    Comment,
    CommentPart,
    DocComment,
    DocTags,
    FileComment,
    Markdown,
    empty_doc_comment,
    empty_file_comment,
)
from elmdoc.ast.serializer import CommentSerializer

__all__ = [
    # Parts
    "CommentPart",
    "Markdown",
    "Code",
    "DocTags",
    # Comment kinds
    "Comment",
    "DocComment",
    "FileComment",
    "empty_doc_comment",
    "empty_file_comment",
    # Serializer
    "CommentSerializer",
]
