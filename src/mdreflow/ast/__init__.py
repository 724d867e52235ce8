#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/ast/__init__.py
"""Document tree for mdreflow.

Exports the node classes, the event iterator used to traverse a tree, and the
visitor base class renderers implement.
"""

from mdreflow.ast.iterator import EventType, NodeIterator, walk
from mdreflow.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    NODE_TYPES,
    BlockQuote,
    Code,
    CodeBlock,
    ContainerNode,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
)
from mdreflow.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "NODE_TYPES",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "ContainerNode",
    "Document",
    "Emphasis",
    "EventType",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeIterator",
    "NodeVisitor",
    "Paragraph",
    "SoftBreak",
    "Strong",
    "Text",
    "ThematicBreak",
    "get_node_children",
    "walk",
]
