"""Leaf and container nodes that serialize to indented markup."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from .attributes import AttributeInput, AttributeSet
from .config import DEFAULT_CONFIG, RenderConfig
from .errors import ValidationError


class LeafNode:
    """A self-closing element such as ``<hr>`` or ``<img src="...">``."""

    def __init__(
        self,
        tag: str,
        attributes: AttributeInput = None,
        *,
        newline: Optional[bool] = None,
        config: Optional[RenderConfig] = None,
    ) -> None:
        if not tag or any(ch.isspace() for ch in str(tag)):
            raise ValidationError(f"{type(self).__name__} requires a tag name, got {tag!r}")
        self.tag = tag
        self.config = config or DEFAULT_CONFIG
        self.newline = self.config.leaf_newline if newline is None else newline
        self.attributes = attributes

    @property
    def attributes(self) -> AttributeSet:
        return self._attributes

    @attributes.setter
    def attributes(self, new: AttributeInput) -> None:
        self._attributes = AttributeSet(new)

    def add_attributes(self, new: AttributeInput) -> "LeafNode":
        self._attributes.add(new)
        return self

    def reset_attributes(self, new: AttributeInput = None) -> "LeafNode":
        """Drop every attribute, then add ``new`` if given."""
        self.attributes = new
        return self

    def rewrite_attributes(self, new: AttributeInput) -> "LeafNode":
        self._attributes.replace(new)
        return self

    def delete_attributes(self, names: Union[str, Iterable[str]]) -> "LeafNode":
        self._attributes.delete(names)
        return self

    def opening_tag(self) -> str:
        if not self._attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self._attributes.render()}>"

    def render(self) -> str:
        return self.opening_tag() + ("\n" if self.newline else "")

    def to_lines(self) -> List[str]:
        return self.render().splitlines()

    def attach_to(self, parent: "ContainerNode") -> "ContainerNode":
        """Append self to ``parent``'s content and return ``parent``."""
        parent.append_content(self)
        return parent

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tag!r}, {self._attributes.to_dict()!r})"


Node = LeafNode
ContentItem = Union[str, LeafNode]


def flatten_content(addition: Any) -> List[ContentItem]:
    """Flatten lists and tuples of any depth into a list of items.

    Nodes are kept as they are; anything else becomes its ``str()``.
    """
    if addition is None:
        return []
    if isinstance(addition, (list, tuple)):
        items: List[ContentItem] = []
        for entry in addition:
            items.extend(flatten_content(entry))
        return items
    if isinstance(addition, LeafNode):
        return [addition]
    return [str(addition)]


def _item_text(item: ContentItem) -> str:
    if isinstance(item, LeafNode):
        return item.render()
    return item


def _strip_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


class ContainerNode(LeafNode):
    """An element with a closing tag that wraps ordered content.

    Content is laid out on one line when it is short and has no line breaks.
    Otherwise every line of every item is indented one level below the
    opening tag. The choice is recomputed on each render.
    """

    def __init__(
        self,
        tag: str,
        attributes: AttributeInput = None,
        content: Any = None,
        *,
        oneline: Optional[bool] = None,
        config: Optional[RenderConfig] = None,
    ) -> None:
        super().__init__(tag, attributes, newline=True, config=config)
        self.oneline = self.config.oneline if oneline is None else oneline
        self.content: List[ContentItem] = []
        self.append_content(content)

    def append_content(self, addition: Any) -> "ContainerNode":
        self.content.extend(flatten_content(addition))
        return self

    def replace_content(self, new: Any = None) -> "ContainerNode":
        self.content = []
        return self.append_content(new)

    def clear_content(self) -> "ContainerNode":
        return self.replace_content()

    def closing_tag(self) -> str:
        return f"</{self.tag}>"

    def _expands(self, texts: List[str]) -> bool:
        if self.oneline is not None:
            return not self.oneline
        joined = "".join(texts)
        return "\n" in joined or len(joined) > self.config.compact_width

    def is_multiline(self) -> bool:
        """Whether the content will render in the expanded layout."""
        return self._expands([_item_text(item) for item in self.content])

    def render_content(self) -> str:
        texts = [_item_text(item) for item in self.content]
        if not self._expands(texts):
            return "".join(_strip_newline(text).replace("\n", " ") for text in texts)

        indent = self.config.indent
        lines: List[str] = []
        for text in texts:
            if not text:
                continue
            for line in _strip_newline(text).split("\n"):
                lines.append(indent + line if line else line)
        if not lines:
            return "\n"
        return "\n" + "\n".join(lines) + "\n"

    def render(self) -> str:
        return self.opening_tag() + self.render_content() + self.closing_tag() + "\n"


__all__ = ["ContainerNode", "ContentItem", "LeafNode", "Node", "flatten_content"]
