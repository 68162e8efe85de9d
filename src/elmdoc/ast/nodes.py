"""Comment model: typed parts and the two comment kinds.

A documentation comment is an ordered sequence of parts.  Every part is
a frozen dataclass, one of:

- ``Markdown``: opaque prose that the formatter reflows to the page width
- ``Code``: a verbatim example block, printed with a 4-column indent
- ``DocTags``: the names listed by one ``@docs`` declaration block

Two comment kinds share one implementation: ``DocComment`` documents a
single declaration and ``FileComment`` documents a whole module.  They
are distinct classes so that a static type checker rejects passing one
where the other is expected.

Comments are values.  ``add_part`` never mutates; it returns a new
comment that shares the previous parts.  Internally the parts form a
prepend-only chain (newest first), so appending is O(1) and ``parts()``
restores insertion order on read.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TypeVar, Union


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Markdown:
    """A block of prose, reflowed on whitespace when formatted."""

    text: str


@dataclass(frozen=True, slots=True)
class Code:
    """A verbatim code block with its base indentation removed.

    Lines are separated by ``\\n``; blank lines inside the block are kept.
    """

    text: str

    @property
    def lines(self) -> list[str]:
        """Return the block split into lines."""
        return self.text.split("\n")


@dataclass(frozen=True, slots=True)
class DocTags:
    """The names listed by a single ``@docs`` block, in source order."""

    names: tuple[str, ...]


CommentPart = Union[Markdown, Code, DocTags]

# (newest part, older chain) or None for the empty comment
_Chain = Optional[tuple[CommentPart, "_Chain"]]

_C = TypeVar("_C", bound="Comment")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class Comment:
    """Shared representation of ``DocComment`` and ``FileComment``.

    Use one of the two subclasses; the base class exists only to share
    behaviour between the kinds.
    """

    __slots__ = ("_chain", "_size")

    def __init__(self) -> None:
        self._chain: _Chain = None
        self._size: int = 0

    @classmethod
    def empty(cls: type[_C]) -> _C:
        """Return a comment of this kind with zero parts."""
        return cls()

    @classmethod
    def from_parts(cls: type[_C], parts: Iterable[CommentPart]) -> _C:
        """Build a comment by appending ``parts`` in order."""
        comment = cls()
        for part in parts:
            comment = comment.add_part(part)
        return comment

    def add_part(self: _C, part: CommentPart) -> _C:
        """Return a new comment with ``part`` appended at the end."""
        new = type(self).__new__(type(self))
        new._chain = (part, self._chain)
        new._size = self._size + 1
        return new

    def parts(self) -> tuple[CommentPart, ...]:
        """Return the parts in insertion order."""
        newest_first: list[CommentPart] = []
        node = self._chain
        while node is not None:
            part, node = node
            newest_first.append(part)
        newest_first.reverse()
        return tuple(newest_first)

    def tag_names(self) -> list[str]:
        """Return every ``@docs`` name in source order, flattened."""
        return [name for part in self.parts() if isinstance(part, DocTags) for name in part.names]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[CommentPart]:
        return iter(self.parts())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment) or type(other) is not type(self):
            return NotImplemented
        return self._size == other._size and self.parts() == other.parts()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.parts()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parts={list(self.parts())!r})"


class DocComment(Comment):
    """Documentation attached to a single declaration."""

    __slots__ = ()


class FileComment(Comment):
    """Module-level documentation; its ``@docs`` groups order the exports."""

    __slots__ = ()


def empty_doc_comment() -> DocComment:
    """Return an empty ``DocComment``."""
    return DocComment()


def empty_file_comment() -> FileComment:
    """Return an empty ``FileComment``."""
    return FileComment()
