"""Build trees of HTML-like elements and render them as indented markup."""

from .attributes import AttributeSet, parse_attribute_string
from .config import DEFAULT_CONFIG, RenderConfig, load_config
from .errors import ConfigError, FormatError, TagTreeError, ValidationError
from .nodes import ContainerNode, ContentItem, LeafNode, Node, flatten_content

__all__ = [
    "AttributeSet",
    "ConfigError",
    "ContainerNode",
    "ContentItem",
    "DEFAULT_CONFIG",
    "FormatError",
    "LeafNode",
    "Node",
    "RenderConfig",
    "TagTreeError",
    "ValidationError",
    "flatten_content",
    "load_config",
    "parse_attribute_string",
]
