#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/ast/iterator.py
"""Event-based traversal of a document tree.

The renderer does not recurse into the tree. It pulls ``(event, node)`` pairs
from a :class:`NodeIterator`, which walks the tree depth-first in document
order:

- a container yields ``ENTER`` on its first visit and ``EXIT`` after all of
  its descendants;
- a leaf yields a single ``ENTER``;
- ``DONE`` is returned once the root has been exited.

The iterator is single pass. It cannot be rewound and offers no look-ahead.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from mdreflow.ast.nodes import ContainerNode, Node


class EventType(Enum):
    """Traversal event kinds."""

    ENTER = "enter"
    EXIT = "exit"
    DONE = "done"


class NodeIterator:
    """Pull-based producer of traversal events.

    Parameters
    ----------
    root : Node
        Node to start from. The root itself is the first node entered.

    Examples
    --------
    >>> from mdreflow.ast.nodes import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text("hi")])])
    >>> [(event.value, type(node).__name__) for event, node in NodeIterator(doc)]
    [('enter', 'Document'), ('enter', 'Paragraph'), ('enter', 'Text'), ('exit', 'Paragraph'), ('exit', 'Document')]

    """

    def __init__(self, root: Node):
        """Initialize the iterator positioned before the root."""
        self.root = root
        self.node: Optional[Node] = None
        self.event: Optional[EventType] = None
        # Each frame is (container, index of next child to visit)
        self._stack: list[tuple[ContainerNode, int]] = []
        self._started = False

    def next_event(self) -> EventType:
        """Advance to the next event.

        Returns
        -------
        EventType
            The event just reached; :attr:`node` holds the node it refers to.
            ``DONE`` is returned (repeatedly) once traversal is complete.

        """
        if self.event is EventType.DONE:
            return EventType.DONE

        if not self._started:
            self._started = True
            return self._enter(self.root)

        if not self._stack:
            self.node = None
            self.event = EventType.DONE
            return EventType.DONE

        container, index = self._stack[-1]
        if index < len(container.children):
            self._stack[-1] = (container, index + 1)
            return self._enter(container.children[index])

        self._stack.pop()
        self.node = container
        self.event = EventType.EXIT
        return EventType.EXIT

    def _enter(self, node: Node) -> EventType:
        if isinstance(node, ContainerNode):
            self._stack.append((node, 0))
        self.node = node
        self.event = EventType.ENTER
        return EventType.ENTER

    def __iter__(self) -> Iterator[tuple[EventType, Node]]:
        """Yield ``(event, node)`` pairs until traversal is complete."""
        while True:
            event = self.next_event()
            if event is EventType.DONE:
                return
            assert self.node is not None
            yield event, self.node


def walk(root: Node) -> Iterator[tuple[EventType, Node]]:
    """Iterate over the traversal events of ``root``.

    Parameters
    ----------
    root : Node
        Tree to traverse

    Returns
    -------
    Iterator of (EventType, Node)
        Events in document order

    """
    return iter(NodeIterator(root))
