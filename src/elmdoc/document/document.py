"""Width-aware document algebra and renderer.

A ``Doc`` is an immutable tree describing *possible* layouts of some
text.  ``render`` walks the tree with an explicit stack and, at every
``Group`` and ``Fill``, decides between the flat and the broken layout by
looking ahead at how much of the remaining line the flat form would use.

Node types
----------
``Text``     literal text; never split, never contains a newline
``Concat``   horizontal composition
``Line``     soft line break; ``flat`` text when flat, newline when broken
``HardLine`` unconditional newline
``Nest``     increases the indentation of line breaks inside ``child``
``Group``    render ``child`` flat if it fits, otherwise broken
``Fill``     greedy packing of alternating content / separator items
``IfBreak``  choose ``broken`` or ``flat`` depending on the current mode

Indentation is emitted lazily, just before the next piece of text, so
blank lines never carry trailing whitespace.

Usage
-----
::

    from elmdoc.document import fill, line, render, text

    words = [text(w) for w in "a few words to wrap".split()]
    print(render(fill(words, line()), width=10))
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class Mode(Enum):
    """Layout mode of a stack frame."""

    FLAT = auto()
    BREAK = auto()


# ---------------------------------------------------------------------------
# Node types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text without newlines."""

    value: str


@dataclass(frozen=True, slots=True)
class Concat:
    """Horizontal composition of ``parts``."""

    parts: tuple["Doc", ...]


@dataclass(frozen=True, slots=True)
class Line:
    """Soft line break; renders as ``flat`` in flat mode."""

    flat: str = " "


@dataclass(frozen=True, slots=True)
class HardLine:
    """Unconditional line break."""


@dataclass(frozen=True, slots=True)
class Nest:
    """Indent line breaks inside ``child`` by ``by`` extra columns."""

    by: int
    child: "Doc"


@dataclass(frozen=True, slots=True)
class Group:
    """Render ``child`` flat when it fits the remaining width."""

    child: "Doc"


@dataclass(frozen=True, slots=True)
class Fill:
    """Alternating ``content, separator, content, ...`` items.

    Each separator is rendered flat when the following content fits on
    the current line, and broken otherwise.
    """

    items: tuple["Doc", ...]


@dataclass(frozen=True, slots=True)
class IfBreak:
    """Pick ``broken`` in break mode and ``flat`` in flat mode."""

    broken: "Doc"
    flat: "Doc"


Doc = Union[Text, Concat, Line, HardLine, Nest, Group, Fill, IfBreak]

_NIL = Concat(())
_HARDLINE = HardLine()


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def nil() -> Doc:
    """Return the empty document."""
    return _NIL


def text(value: str) -> Doc:
    """Return a literal text document.

    Raises
    ------
    ValueError
        If ``value`` contains a newline; use ``hardline`` instead.
    """
    if "\n" in value:
        raise ValueError(f"text() cannot contain a newline: {value!r}")
    return Text(value)


def concat(*parts: Doc) -> Doc:
    """Concatenate ``parts`` horizontally, flattening nested concats."""
    flat: list[Doc] = []
    for part in parts:
        if isinstance(part, Concat):
            flat.extend(part.parts)
        else:
            flat.append(part)
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def join(sep: Doc, docs: Iterable[Doc]) -> Doc:
    """Interleave ``sep`` between ``docs``."""
    out: list[Doc] = []
    for doc in docs:
        if out:
            out.append(sep)
        out.append(doc)
    return concat(*out) if out else _NIL


def line(flat: str = " ") -> Doc:
    """Return a soft line break that flattens to ``flat``."""
    return Line(flat)


def softline() -> Doc:
    """Return a soft line break that flattens to nothing."""
    return Line("")


def hardline() -> Doc:
    """Return an unconditional line break."""
    return _HARDLINE


def nest(by: int, doc: Doc) -> Doc:
    """Indent line breaks inside ``doc`` by ``by`` columns."""
    return Nest(by, doc)


def group(doc: Doc) -> Doc:
    """Let the renderer choose a flat or broken layout for ``doc``."""
    return Group(doc)


def fill(docs: Iterable[Doc], sep: Doc) -> Doc:
    """Greedily pack ``docs`` separated by ``sep`` into lines."""
    items: list[Doc] = []
    for doc in docs:
        if items:
            items.append(sep)
        items.append(doc)
    return Fill(tuple(items))


def if_break(broken: Doc, flat: Doc) -> Doc:
    """Return ``broken`` when laid out broken and ``flat`` otherwise."""
    return IfBreak(broken, flat)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

_Frame = tuple[int, Mode, Doc]


def _fits(
    next_frames: list[_Frame],
    rest: list[_Frame],
    remaining: int,
    must_be_flat: bool,
) -> bool:
    """Return True if the text up to the next break fits in ``remaining``.

    ``next_frames`` are measured first; when ``must_be_flat`` is False the
    pending ``rest`` stack is consulted afterwards (top of stack first).
    A break in break mode ends the measurement successfully, so a
    fragment that exactly reaches the width fits.
    """
    if remaining < 0:
        return False
    probe = list(next_frames)
    rest_idx = len(rest)
    while True:
        if not probe:
            if must_be_flat or rest_idx == 0:
                return True
            rest_idx -= 1
            probe.append(rest[rest_idx])
            continue

        indent, mode, doc = probe.pop()
        if isinstance(doc, Text):
            remaining -= len(doc.value)
            if remaining < 0:
                return False
        elif isinstance(doc, Concat):
            for part in reversed(doc.parts):
                probe.append((indent, mode, part))
        elif isinstance(doc, Fill):
            for part in reversed(doc.items):
                probe.append((indent, mode, part))
        elif isinstance(doc, Line):
            if mode is Mode.BREAK:
                return True
            remaining -= len(doc.flat)
            if remaining < 0:
                return False
        elif isinstance(doc, HardLine):
            return True
        elif isinstance(doc, Nest):
            probe.append((indent + doc.by, mode, doc.child))
        elif isinstance(doc, Group):
            probe.append((indent, Mode.FLAT if must_be_flat else mode, doc.child))
        elif isinstance(doc, IfBreak):
            probe.append((indent, mode, doc.broken if mode is Mode.BREAK else doc.flat))


def render(doc: Doc, width: int) -> str:
    """Render ``doc`` to a string, keeping lines within ``width`` columns.

    Lines only exceed ``width`` when a single piece of text is wider than
    the space left for it.

    Parameters
    ----------
    doc:
        The document to lay out.
    width:
        Maximum line width in columns.

    Returns
    -------
    str
        The rendered text, without a trailing newline.
    """
    out: list[str] = []
    col = 0
    pending_indent = 0
    stack: list[_Frame] = [(0, Mode.BREAK, doc)]

    while stack:
        indent, mode, node = stack.pop()

        if isinstance(node, Text):
            if not node.value:
                continue
            if pending_indent:
                out.append(" " * pending_indent)
                pending_indent = 0
            out.append(node.value)
            col += len(node.value)

        elif isinstance(node, Concat):
            for part in reversed(node.parts):
                stack.append((indent, mode, part))

        elif isinstance(node, Nest):
            stack.append((indent + node.by, mode, node.child))

        elif isinstance(node, IfBreak):
            chosen = node.broken if mode is Mode.BREAK else node.flat
            stack.append((indent, mode, chosen))

        elif isinstance(node, Group):
            if mode is Mode.FLAT:
                stack.append((indent, Mode.FLAT, node.child))
            else:
                flat_frame = (indent, Mode.FLAT, node.child)
                fits = _fits([flat_frame], stack, width - col, must_be_flat=False)
                stack.append(flat_frame if fits else (indent, Mode.BREAK, node.child))

        elif isinstance(node, Fill):
            items = node.items
            if not items:
                continue
            content = items[0]
            content_flat = (indent, Mode.FLAT, content)
            content_fits = _fits([content_flat], [], width - col, must_be_flat=True)
            content_frame = content_flat if content_fits else (indent, Mode.BREAK, content)
            if len(items) == 1:
                stack.append(content_frame)
                continue
            separator = items[1]
            if len(items) == 2:
                sep_mode = Mode.FLAT if content_fits else Mode.BREAK
                stack.append((indent, sep_mode, separator))
                stack.append(content_frame)
                continue
            pair = Concat((content, separator, items[2]))
            pair_fits = _fits([(indent, Mode.FLAT, pair)], [], width - col, must_be_flat=True)
            stack.append((indent, mode, Fill(items[2:])))
            stack.append((indent, Mode.FLAT if pair_fits else Mode.BREAK, separator))
            stack.append(content_frame)

        elif isinstance(node, (Line, HardLine)):
            if isinstance(node, Line) and mode is Mode.FLAT:
                if node.flat:
                    if pending_indent:
                        out.append(" " * pending_indent)
                        pending_indent = 0
                    out.append(node.flat)
                    col += len(node.flat)
                continue
            out.append("\n")
            pending_indent = indent
            col = indent

        else:
            raise TypeError(f"Unknown document node: {type(node).__name__}")

    return "".join(out)
