"""elmdoc — documentation comment toolkit: parser, tag layout, width-aware formatter.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import elmdoc

    # Parse the body of a module comment
    comment = elmdoc.parse_file_comment(elmdoc.strip_delimiters('''{-| Tools for lists.

    @docs map, filter
    @docs foldl, foldr
    -}'''))

    # Render it at 80 columns and get the export groups
    text, groups = elmdoc.pretty_file_comment(80, comment)
    groups
    [['map', 'filter', 'foldl', 'foldr']]

    elmdoc.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from elmdoc.ast.nodes import DocComment, FileComment


def parse_doc_comment(body: str, base_indent: int = 0) -> "DocComment":
    """Parse the body of a declaration comment.

    Parameters
    ----------
    body:
        Comment text between ``{-|`` and ``-}``.
    base_indent:
        Indentation shared by every line of the body.

    Returns
    -------
    DocComment
        The parsed comment.  Parsing never fails.
    """
    from elmdoc.parser.parser import parse_doc_comment as _parse

    return _parse(body, base_indent=base_indent)


def parse_file_comment(body: str, base_indent: int = 0) -> "FileComment":
    """Parse the body of a module comment.

    Parameters
    ----------
    body:
        Comment text between ``{-|`` and ``-}``.
    base_indent:
        Indentation shared by every line of the body.

    Returns
    -------
    FileComment
        The parsed comment.  Parsing never fails.
    """
    from elmdoc.parser.parser import parse_file_comment as _parse

    return _parse(body, base_indent=base_indent)


def strip_delimiters(text: str) -> str:
    """Remove the ``{-|`` / ``-}`` delimiters around a comment."""
    from elmdoc.parser.parser import strip_delimiters as _strip

    return _strip(text)


def pretty_doc_comment(width: int, comment: "DocComment") -> str:
    """Render a ``DocComment`` to delimited text at ``width`` columns.

    Raises
    ------
    ValueError
        If ``width`` is less than 1.
    TypeError
        If ``comment`` is not a ``DocComment``.
    """
    from elmdoc.formatter.formatter import pretty_doc_comment as _pretty

    return _pretty(width, comment)


def pretty_file_comment(width: int, comment: "FileComment") -> tuple[str, list[list[str]]]:
    """Render a ``FileComment`` and return its grouped ``@docs`` names.

    Returns
    -------
    tuple[str, list[list[str]]]
        The rendered comment and the tag groups in source order.
    """
    from elmdoc.formatter.formatter import pretty_file_comment as _pretty

    return _pretty(width, comment)


def format_comment(source: str, width: int = 80, kind: str = "doc") -> str:
    """Reformat a complete ``{-| ... -}`` comment in one call.

    Parameters
    ----------
    source:
        The comment including its delimiters.
    width:
        Page width in columns.
    kind:
        ``"doc"`` for a declaration comment, ``"file"`` for a module comment.

    Returns
    -------
    str
        The canonical comment text.

    Raises
    ------
    ValueError
        If ``kind`` is not ``"doc"`` or ``"file"``, or ``width`` < 1.
    """
    body = strip_delimiters(source)
    if kind == "doc":
        return pretty_doc_comment(width, parse_doc_comment(body))
    if kind == "file":
        text, _ = pretty_file_comment(width, parse_file_comment(body))
        return text
    raise ValueError(f"kind must be 'doc' or 'file', got {kind!r}")


__all__ = [
    "__version__",
    "parse_doc_comment",
    "parse_file_comment",
    "strip_delimiters",
    "pretty_doc_comment",
    "pretty_file_comment",
    "format_comment",
]
