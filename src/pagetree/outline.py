"""
Plain-text outline of a page tree.

One line per node, indented two spaces per nesting level:

    container #1a2b3c4d {display: flex, padding: 20px}
      heading #5e6f7a8b* "Welcome" {color: #333333}

A trailing `*` on the id marks the selected node.
"""

from __future__ import annotations

from .config import get_config
from .dom import Node
from .tree import Tree


def truncate_content(content: str, max_chars: int, ellipsis: str = "...") -> str:
    """Tail-truncate to max_chars, ending with ellipsis when cut."""
    if max_chars <= 0 or len(content) <= max_chars:
        return content
    if max_chars <= len(ellipsis):
        return ellipsis[:max_chars]
    return content[:max_chars - len(ellipsis)] + ellipsis


def format_node(
    node: Node,
    selected_id: str | None = None,
    content_chars: int | None = None,
    id_chars: int | None = None,
    show_style: bool = True,
) -> str:
    """Single outline line for a node, without indentation."""
    cfg = get_config().outline
    if content_chars is None:
        content_chars = cfg.content_chars
    if id_chars is None:
        id_chars = cfg.id_chars

    shown_id = node.id[:id_chars] if id_chars > 0 else node.id
    parts = [f"{node.kind.value} #{shown_id}{'*' if node.id == selected_id else ''}"]
    if node.content:
        parts.append(f'"{truncate_content(node.content, content_chars)}"')
    if node.extra:
        parts.append("[" + ", ".join(f"{k}={v}" for k, v in node.extra.items()) + "]")
    if show_style and node.style:
        parts.append("{" + ", ".join(f"{k}: {v}" for k, v in node.style.items()) + "}")
    return " ".join(parts)


def outline_lines(
    tree: Tree,
    selected_id: str | None = None,
    content_chars: int | None = None,
    id_chars: int | None = None,
    show_style: bool = True,
) -> list[str]:
    """Outline lines for the whole tree, in render order."""
    lines: list[str] = []

    def _emit(nodes: list[Node], depth: int) -> None:
        for node in nodes:
            lines.append("  " * depth + format_node(node, selected_id, content_chars, id_chars, show_style))
            if node.children:
                _emit(node.children, depth + 1)

    _emit(tree, 0)
    return lines

