"""
DOM - Node model for pagetree

Every placed element on the page is a Node. A page is a list of top-level
Nodes (the root sequence); containers hold further Nodes in `children`.

Key invariant: only container nodes carry a children list. Every other kind
has `children is None`.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

StyleValue = str | int | float


class NodeKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    IMAGE = "image"
    BUTTON = "button"
    CONTAINER = "container"


@dataclass
class Node:
    """A placed element and its subtree."""
    id: str
    kind: NodeKind
    content: str = ""
    style: dict[str, StyleValue] = field(default_factory=dict)
    extra: dict[str, StyleValue] | None = None
    children: list[Node] | None = None

    def __post_init__(self):
        self.kind = parse_kind(self.kind)
        if self.kind is NodeKind.CONTAINER:
            if self.children is None:
                self.children = []
        elif self.children is not None:
            raise ValueError(f"Only containers may own children, got {self.kind.value} node {self.id!r}")

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    def depth_first(self) -> Iterator[Node]:
        """Traverse subtree depth-first, yielding self then children."""
        yield self
        for child in self.children or ():
            yield from child.depth_first()


@dataclass
class Patch:
    """Partial update of a node. None fields are left untouched."""
    content: str | None = None
    style: dict[str, StyleValue] | None = None
    extra: dict[str, StyleValue] | None = None


def new_node_id() -> str:
    """Fresh opaque id, never reused within a process."""
    return uuid.uuid4().hex


def parse_kind(kind: str | NodeKind) -> NodeKind:
    """Coerce a kind name to NodeKind. Raises ValueError for unknown names."""
    if isinstance(kind, NodeKind):
        return kind
    return NodeKind(kind)
