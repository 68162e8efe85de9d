"""Comment serialization and deserialization.

Provides round-trip serialization of ``DocComment`` and ``FileComment``
values to and from JSON and YAML.  The serialized form is a plain
dict/list structure that maps naturally to both formats.

Usage
-----
::

    from elmdoc.ast.serializer import CommentSerializer

    serializer = CommentSerializer()
    data = serializer.to_dict(comment)
    json_text = serializer.to_json(comment)
    comment2 = serializer.from_json(json_text)
    assert comment == comment2
"""
from __future__ import annotations

import json

import yaml

from elmdoc.ast.nodes import (
    Code,
    Comment,
    CommentPart,
    DocComment,
    DocTags,
    FileComment,
    Markdown,
)

_COMMENT_KINDS: dict[str, type[Comment]] = {
    "DocComment": DocComment,
    "FileComment": FileComment,
}


class CommentSerializer:
    """Converts between comment values and plain Python dicts.

    The serialized representation uses ``"kind"`` discriminator fields on
    the comment and on every part so that deserialization is unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (comment → dict)
    # ------------------------------------------------------------------

    def to_dict(self, comment: Comment) -> dict[str, object]:
        """Serialize a comment to a JSON-compatible dict."""
        kind = type(comment).__name__
        if kind not in _COMMENT_KINDS:
            raise TypeError(f"Unknown comment type: {type(comment)}")
        return {
            "kind": kind,
            "parts": [self._part_to_dict(p) for p in comment.parts()],
        }

    def _part_to_dict(self, part: CommentPart) -> dict[str, object]:
        if isinstance(part, Markdown):
            return {"kind": "Markdown", "text": part.text}
        if isinstance(part, Code):
            return {"kind": "Code", "text": part.text}
        if isinstance(part, DocTags):
            return {"kind": "DocTags", "names": list(part.names)}
        raise TypeError(f"Unknown comment part type: {type(part)}")

    # ------------------------------------------------------------------
    # Deserialization (dict → comment)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Comment:
        """Deserialize a comment from a plain dict.

        Raises
        ------
        ValueError
            If ``data`` is not a mapping, or the comment or one of its
            parts has an unknown ``kind``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a comment mapping, got {type(data).__name__}")
        kind = data.get("kind")
        comment_cls = _COMMENT_KINDS.get(str(kind))
        if comment_cls is None:
            raise ValueError(f"Unknown comment kind: {kind!r}")
        parts = data.get("parts") or []
        return comment_cls.from_parts(self._part_from_dict(p) for p in parts)

    def _part_from_dict(self, d: dict[str, object]) -> CommentPart:
        kind = d["kind"]
        if kind == "Markdown":
            return Markdown(text=str(d["text"]))
        if kind == "Code":
            return Code(text=str(d["text"]))
        if kind == "DocTags":
            return DocTags(names=tuple(str(n) for n in d.get("names", [])))
        raise ValueError(f"Unknown comment part kind: {kind!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, comment: Comment, indent: int = 2) -> str:
        """Serialize a comment to a JSON string."""
        return json.dumps(self.to_dict(comment), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Comment:
        """Deserialize a comment from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, comment: Comment) -> str:
        """Serialize a comment to a YAML string."""
        return yaml.dump(self.to_dict(comment), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Comment:
        """Deserialize a comment from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
