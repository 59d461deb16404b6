"""Content tree node models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from docoutline.exceptions import InvalidNodeError


class NodeKind(str, Enum):
    """Closed set of node variants the engine distinguishes."""

    HEADING = "heading"
    TABLE = "table"
    IMAGE = "image"
    CODE_BLOCK = "codeBlock"
    PAGE_BREAK = "pageBreak"
    TEXT = "text"
    CONTAINER = "container"


class BaseNode(BaseModel):
    """A node of the content tree.

    Attributes are stored verbatim in ``attrs``; the typed accessors on each
    variant read them leniently so malformed values degrade to ``None`` or
    ``""`` instead of failing. Unknown top-level keys (``marks`` and the
    like) are kept as extra fields and survive :func:`dump_node`.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    type: str
    attrs: dict[str, Any] = Field(default_factory=dict)
    content: tuple["Node", ...] = ()

    @property
    def node_id(self) -> str | None:
        """The node's ``attrs.id``, or None when missing or blank."""
        value = self.attrs.get("id")
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return None
        value = str(value)
        return value if value.strip() else None

    def with_attrs(self, **updates: Any) -> "BaseNode":
        return self.model_copy(update={"attrs": {**self.attrs, **updates}})

    def with_content(self, content: Sequence["BaseNode"]) -> "BaseNode":
        return self.model_copy(update={"content": tuple(content)})

    def _str_attr(self, name: str) -> str:
        value = self.attrs.get(name)
        return value if isinstance(value, str) else ""


class HeadingNode(BaseNode):
    kind: ClassVar[NodeKind] = NodeKind.HEADING

    @property
    def level(self) -> int | None:
        """Heading level, or None when absent or not an integer."""
        value = self.attrs.get("level")
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return None


class TableNode(BaseNode):
    kind: ClassVar[NodeKind] = NodeKind.TABLE

    @property
    def caption(self) -> str:
        return self._str_attr("caption")


class ImageNode(BaseNode):
    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    @property
    def caption(self) -> str:
        return self._str_attr("caption")

    @property
    def alt(self) -> str:
        return self._str_attr("alt")


class CodeBlockNode(BaseNode):
    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    @property
    def language(self) -> str:
        return self._str_attr("language")


class PageBreakNode(BaseNode):
    """A ``pageBreak`` or ``horizontalRule`` marker."""

    kind: ClassVar[NodeKind] = NodeKind.PAGE_BREAK


class TextNode(BaseNode):
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    text: str = ""


class ContainerNode(BaseNode):
    """Any node type without special meaning; its children are still visited."""

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER


Node = Union[
    HeadingNode,
    TableNode,
    ImageNode,
    CodeBlockNode,
    PageBreakNode,
    TextNode,
    ContainerNode,
]

for _model in (
    BaseNode,
    HeadingNode,
    TableNode,
    ImageNode,
    CodeBlockNode,
    PageBreakNode,
    TextNode,
    ContainerNode,
):
    _model.model_rebuild()

# Raw ``type`` tag -> variant. Anything missing here is a container.
NODE_TYPES: dict[str, type[BaseNode]] = {
    "heading": HeadingNode,
    "table": TableNode,
    "image": ImageNode,
    "codeBlock": CodeBlockNode,
    "pageBreak": PageBreakNode,
    "horizontalRule": PageBreakNode,
    "text": TextNode,
}

_STRUCTURAL_KEYS = frozenset({"type", "attrs", "content"})


def parse_node(raw: Mapping[str, Any] | BaseNode) -> BaseNode:
    """Build a typed node tree from a raw ``{type, attrs, content}`` mapping.

    Raises:
        InvalidNodeError: If ``raw`` is not a mapping or its ``content`` is
            not a sequence of mappings.
    """
    if isinstance(raw, BaseNode):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidNodeError(f"Expected a node mapping, got {type(raw).__name__}")

    raw_type = raw.get("type")
    node_type = raw_type if isinstance(raw_type, str) else ""
    model = NODE_TYPES.get(node_type, ContainerNode)

    attrs = raw.get("attrs")
    if not isinstance(attrs, Mapping):
        attrs = {}

    raw_content = raw.get("content")
    if raw_content is None:
        raw_content = ()
    if isinstance(raw_content, (str, bytes)) or not isinstance(raw_content, Sequence):
        raise InvalidNodeError(
            f"Node content must be a sequence, got {type(raw_content).__name__}"
        )
    children = tuple(parse_node(child) for child in raw_content)

    reserved = _STRUCTURAL_KEYS | {"text"} if model is TextNode else _STRUCTURAL_KEYS
    fields: dict[str, Any] = {
        key: value
        for key, value in raw.items()
        if isinstance(key, str) and key not in reserved and key != "kind"
    }
    fields.update(type=node_type, attrs=dict(attrs), content=children)
    if model is TextNode:
        text = raw.get("text")
        fields["text"] = text if isinstance(text, str) else ""
    return model(**fields)


def dump_node(node: BaseNode) -> dict[str, Any]:
    """Serialize a node back to the raw mapping shape accepted by parse_node."""
    raw: dict[str, Any] = {"type": node.type}
    if node.attrs:
        raw["attrs"] = dict(node.attrs)
    if isinstance(node, TextNode):
        raw["text"] = node.text
    if node.model_extra:
        raw.update(node.model_extra)
    if node.content:
        raw["content"] = [dump_node(child) for child in node.content]
    return raw
