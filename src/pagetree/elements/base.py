"""
Element templates and registry.

Each element module registers one template describing the default shape of a
freshly dropped node. The registry turns a kind into a new Node.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field

from ..dom import Node, NodeKind, StyleValue, new_node_id, parse_kind
from ..errors import UnknownElementKind

logger = logging.getLogger(__name__)


@dataclass
class ElementTemplate:
    """Default content, style and extra attributes for one element kind."""
    kind: NodeKind
    title: str  # palette label
    content: str = ""
    style: dict[str, StyleValue] = field(default_factory=dict)
    extra: dict[str, StyleValue] | None = None

    def instantiate(self) -> Node:
        """
        Build a new Node from this template.

        Style and extra are deep-copied so edits to one instance never leak into
        the template or into other instances.
        """
        return Node(
            id=new_node_id(),
            kind=self.kind,
            content=self.content,
            style=copy.deepcopy(self.style),
            extra=copy.deepcopy(self.extra),
            children=[] if self.kind is NodeKind.CONTAINER else None,
        )


@dataclass
class PaletteEntry:
    """One draggable item in the components palette."""
    kind: NodeKind
    title: str


class TemplateRegistry:
    """Registry of element templates keyed by kind."""

    def __init__(self):
        self._templates: dict[NodeKind, ElementTemplate] = {}

    def register(self, template: ElementTemplate) -> None:
        """Register a template. First registration wins for a kind."""
        if template.kind in self._templates:
            logger.debug("Template for %s already registered, ignoring", template.kind.value)
            return
        self._templates[template.kind] = template

    def get(self, kind: str | NodeKind) -> ElementTemplate:
        """Look up the template for a kind, raising UnknownElementKind if absent."""
        try:
            key = parse_kind(kind)
        except ValueError as e:
            raise UnknownElementKind(f"Unknown element kind: {kind!r}") from e
        template = self._templates.get(key)
        if template is None:
            raise UnknownElementKind(f"No template registered for kind: {key.value!r}")
        return template

    def instantiate(self, kind: str | NodeKind) -> Node:
        """Create a fresh node of the given kind with a new id."""
        return self.get(kind).instantiate()

    def __contains__(self, kind: object) -> bool:
        try:
            return parse_kind(kind) in self._templates  # type: ignore[arg-type]
        except ValueError:
            return False

    @property
    def palette(self) -> list[PaletteEntry]:
        """Draggable kinds in declaration order of NodeKind."""
        return [
            PaletteEntry(kind=kind, title=self._templates[kind].title)
            for kind in NodeKind
            if kind in self._templates
        ]


# Global registry instance
registry = TemplateRegistry()
