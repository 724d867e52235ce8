#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/ast/nodes.py
"""AST node classes for CommonMark document representation.

This module defines the closed set of node kinds that make up a CommonMark
document tree. The renderer consumes these nodes read-only; the tree is built
by a parser (see :mod:`mdreflow.parsers.markdown`) or by hand.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Container nodes hold an ordered ``children`` list and produce both an enter
and an exit event during traversal:
    - Document, BlockQuote, List, ListItem, Heading, Paragraph
    - Strong, Emphasis, Link, Image

Leaf nodes carry a literal payload and produce a single event:
    - Text, LineBreak, SoftBreak, Code, HTMLInline
    - CodeBlock, HTMLBlock, ThematicBreak

Every node keeps a ``parent`` back-reference. Containers assign it to their
children on construction and in :meth:`ContainerNode.append_child`, so
sibling order (and with it the ordinal of a list item) can be recovered from
any node.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    parent : Node or None
        The containing node, or None for a detached node or the root
    is_container : bool
        Class-level flag distinguishing containers from leaves

    """

    parent: Optional[Node]
    is_container: ClassVar[bool] = False

    @abstractmethod
    def accept(self, visitor: Any, entering: bool) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        entering : bool
            True on the first visit of the node, False on the exit of a container

        Returns
        -------
        Any
            Result from the visitor's processing

        """

    @property
    def previous_sibling(self) -> Optional[Node]:
        """Return the sibling immediately before this node, if any."""
        if self.parent is None:
            return None
        siblings = self.parent.children  # type: ignore[attr-defined]
        for index, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[index - 1] if index > 0 else None
        return None

    @property
    def next_sibling(self) -> Optional[Node]:
        """Return the sibling immediately after this node, if any."""
        if self.parent is None:
            return None
        siblings = self.parent.children  # type: ignore[attr-defined]
        for index, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[index + 1] if index + 1 < len(siblings) else None
        return None


class ContainerNode(Node):
    """Base class for nodes with children."""

    children: list[Node]
    is_container: ClassVar[bool] = True

    def __post_init__(self) -> None:
        """Attach this node as the parent of every child."""
        for child in self.children:
            child.parent = self

    def append_child(self, child: Node) -> Node:
        """Append a child node and set its parent.

        Parameters
        ----------
        child : Node
            Node to append

        Returns
        -------
        Node
            The appended child, for chaining

        """
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant in document order (pre-order)."""
        for child in self.children:
            yield child
            if isinstance(child, ContainerNode):
                yield from child.iter_descendants()


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(ContainerNode):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, entering)


@dataclass
class BlockQuote(ContainerNode):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, entering)


@dataclass
class List(ContainerNode):
    """List node (ordered or bulleted).

    Parameters
    ----------
    ordered : bool, default = False
        True for ordered (numbered) lists, False for bulleted lists
    start : int, default = 1
        Ordinal of the first item of an ordered list
    children : list of ListItem, default = empty list
        List items

    """

    ordered: bool = False
    start: int = 1
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the start ordinal and attach children."""
        if self.start < 0:
            raise ValueError(f"List start must be non-negative, got {self.start}")
        super().__post_init__()

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(ContainerNode):
    """List item node containing block content.

    The item takes its marker style and start ordinal from the parent
    :class:`List`.

    """

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    @property
    def parent_list(self) -> List:
        """Return the enclosing list.

        Raises
        ------
        ValueError
            If the item is not attached to a List

        """
        if not isinstance(self.parent, List):
            raise ValueError("ListItem is not attached to a List")
        return self.parent

    def ordinal(self) -> int:
        """Compute this item's number within its list.

        Walks previous siblings, adding one per sibling to the list's start.

        Returns
        -------
        int
            The item's ordinal (``start`` for the first item)

        """
        number = self.parent_list.start
        sibling = self.previous_sibling
        while sibling is not None:
            number += 1
            sibling = sibling.previous_sibling
        return number

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, entering)


@dataclass
class Heading(ContainerNode):
    """ATX heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    level: int
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(ContainerNode):
    """Paragraph node containing inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, entering)


@dataclass
class CodeBlock(Node):
    """Code block node with optional fence info string.

    A block with an empty or missing info string renders in indented form;
    one with an info string renders fenced.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown), normally newline-terminated
    info : str or None, default = None
        Fence info string (language and attributes)

    """

    content: str
    info: Optional[str] = None
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    @property
    def is_fenced(self) -> bool:
        """Whether the block carries a non-empty info string."""
        return bool(self.info)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, emitted verbatim."""

    content: str
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self, entering)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    content: str
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, entering)


@dataclass
class LineBreak(Node):
    """Hard line break."""

    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, entering)


@dataclass
class SoftBreak(Node):
    """Soft line break; rendered as a breakable space."""

    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_soft_break``."""
        return visitor.visit_soft_break(self, entering)


@dataclass
class Code(Node):
    """Inline code span."""

    content: str
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, entering)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML."""

    content: str
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self, entering)


@dataclass
class Strong(ContainerNode):
    """Strong emphasis (bold) around inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, entering)


@dataclass
class Emphasis(ContainerNode):
    """Emphasis (italic) around inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, entering)


@dataclass
class Link(ContainerNode):
    """Hyperlink with inline link text.

    Parameters
    ----------
    url : str
        Link destination
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Inline nodes forming the link text

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(ContainerNode):
    """Image reference; the children form the alt text.

    Parameters
    ----------
    url : str
        Image source
    title : str or None, default = None
        Optional image title
    children : list of Node, default = empty list
        Inline nodes forming the alt text

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, entering)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    BlockQuote,
    List,
    ListItem,
    Heading,
    Paragraph,
    CodeBlock,
    HTMLBlock,
    ThematicBreak,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    LineBreak,
    SoftBreak,
    Code,
    HTMLInline,
    Strong,
    Emphasis,
    Link,
    Image,
)

NODE_TYPES: tuple[type[Node], ...] = BLOCK_NODE_TYPES + INLINE_NODE_TYPES


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for leaf nodes)

    Examples
    --------
    >>> heading = Heading(level=1, children=[Text("Hello"), Strong(children=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, ContainerNode):
        return list(node.children)
    return []
