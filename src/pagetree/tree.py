"""
Tree mutation engine for pagetree.

Pure functions over a page tree (the root list of Nodes). Every operation
returns a new tree value and never mutates its input:
- Only the path from the root to the touched node is rebuilt, untouched
  subtrees are shared with the input tree
- When nothing changes, the input list itself is returned

Stale ids are not errors. A container may disappear between the moment a drop
target is resolved and the moment the insert is applied, so missing targets
are absorbed as no-ops and logged at debug level.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from .dom import Node, Patch, new_node_id

logger = logging.getLogger(__name__)

Tree = list[Node]


def walk(tree: Tree) -> Iterator[Node]:
    """Pre-order traversal: a node before its children, children before following siblings."""
    for node in tree:
        yield from node.depth_first()


def find(tree: Tree, node_id: str) -> Node | None:
    """First node with the given id in pre-order, or None."""
    for node in walk(tree):
        if node.id == node_id:
            return node
    return None


def collect_ids(tree: Tree) -> list[str]:
    """All ids in pre-order."""
    return [node.id for node in walk(tree)]


def depth_of(tree: Tree, node_id: str) -> int | None:
    """Nesting depth of a node (0 for root-level nodes), or None if absent."""
    def _search(nodes: list[Node], depth: int) -> int | None:
        for node in nodes:
            if node.id == node_id:
                return depth
            if node.children:
                found = _search(node.children, depth + 1)
                if found is not None:
                    return found
        return None

    return _search(tree, 0)


def _replace_node(nodes: list[Node], node_id: str, fn: Callable[[Node], Node]) -> list[Node]:
    """
    Rebuild the path down to node_id, replacing that node with fn(node).

    Returns `nodes` itself when the id is absent or fn returns the node unchanged.
    """
    for i, node in enumerate(nodes):
        if node.id == node_id:
            new_node = fn(node)
            if new_node is node:
                return nodes
            return [*nodes[:i], new_node, *nodes[i + 1:]]
        if node.children:
            new_children = _replace_node(node.children, node_id, fn)
            if new_children is not node.children:
                return [*nodes[:i], replace(node, children=new_children), *nodes[i + 1:]]
    return nodes


def insert(tree: Tree, node: Node, parent_id: str | None = None) -> Tree:
    """
    Append node to the children of container parent_id, or to the root.

    No-op when parent_id is missing or names a non-container, so a bad target
    can never give children to a heading, image or button.
    """
    if parent_id is None:
        return [*tree, node]

    def _append(parent: Node) -> Node:
        if not parent.is_container:
            logger.debug("Insert target %s is a %s, not a container; ignoring", parent_id, parent.kind.value)
            return parent
        return replace(parent, children=[*parent.children, node])

    result = _replace_node(tree, parent_id, _append)
    if result is tree:
        logger.debug("Insert of %s into %s absorbed as no-op", node.id, parent_id)
    return result


def apply_patch(node: Node, patch: Patch) -> Node:
    """Merge a patch into a copy of node: content replaces, style and extra merge."""
    changes: dict = {}
    if patch.content is not None:
        changes["content"] = patch.content
    if patch.style is not None:
        changes["style"] = {**node.style, **patch.style}
    if patch.extra is not None:
        changes["extra"] = {**(node.extra or {}), **patch.extra}
    if not changes:
        return node
    return replace(node, **changes)


def update(tree: Tree, node_id: str, patch: Patch) -> Tree:
    """Merge patch into node node_id. No-op if the id is absent."""
    result = _replace_node(tree, node_id, lambda node: apply_patch(node, patch))
    if result is tree:
        logger.debug("Update of %s absorbed as no-op", node_id)
    return result


def _remove(nodes: list[Node], node_id: str) -> list[Node]:
    changed = False
    kept: list[Node] = []
    for node in nodes:
        if node.id == node_id:
            changed = True
            continue
        if node.children:
            new_children = _remove(node.children, node_id)
            if new_children is not node.children:
                node = replace(node, children=new_children)
                changed = True
        kept.append(node)
    return kept if changed else nodes


def remove(tree: Tree, node_id: str) -> Tree:
    """
    Remove node node_id wherever it sits, together with its whole subtree.

    Children of a removed container are discarded, never promoted.
    """
    result = _remove(tree, node_id)
    if result is tree:
        logger.debug("Remove of %s absorbed as no-op", node_id)
    return result


def clone_subtree(node: Node) -> Node:
    """Deep copy of a subtree with a fresh id for every node."""
    return replace(
        node,
        id=new_node_id(),
        style=copy.deepcopy(node.style),
        extra=copy.deepcopy(node.extra),
        children=[clone_subtree(child) for child in node.children] if node.children is not None else None,
    )


def _insert_after(nodes: list[Node], sibling_id: str, new_node: Node) -> list[Node]:
    for i, node in enumerate(nodes):
        if node.id == sibling_id:
            return [*nodes[:i + 1], new_node, *nodes[i + 1:]]
        if node.children:
            new_children = _insert_after(node.children, sibling_id, new_node)
            if new_children is not node.children:
                return [*nodes[:i], replace(node, children=new_children), *nodes[i + 1:]]
    return nodes


def duplicate(tree: Tree, node_id: str) -> tuple[Tree, Node | None]:
    """
    Clone node node_id (and its subtree, with fresh ids) as its next sibling.

    Returns the new tree and the clone, or the unchanged tree and None if absent.
    """
    source = find(tree, node_id)
    if source is None:
        logger.debug("Duplicate of %s absorbed as no-op", node_id)
        return tree, None
    clone = clone_subtree(source)
    return _insert_after(tree, node_id, clone), clone


def _reorder(nodes: list[Node], ordered_ids: Iterable[str]) -> list[Node]:
    position = {node_id: i for i, node_id in enumerate(ordered_ids)}
    listed = sorted((n for n in nodes if n.id in position), key=lambda n: position[n.id])
    rest = [n for n in nodes if n.id not in position]
    result = listed + rest
    if all(a is b for a, b in zip(result, nodes, strict=True)):
        return nodes
    return result


def reorder(tree: Tree, ordered_ids: Iterable[str], parent_id: str | None = None) -> Tree:
    """
    Reorder the children of parent_id (or the root) to follow ordered_ids.

    Listed ids come first in the given order, unlisted siblings follow in their
    previous relative order, unknown ids are ignored. The set of nodes never
    changes.
    """
    ordered_ids = list(ordered_ids)
    if parent_id is None:
        return _reorder(tree, ordered_ids)

    def _apply(parent: Node) -> Node:
        if not parent.is_container:
            return parent
        new_children = _reorder(parent.children, ordered_ids)
        if new_children is parent.children:
            return parent
        return replace(parent, children=new_children)

    result = _replace_node(tree, parent_id, _apply)
    if result is tree:
        logger.debug("Reorder under %s absorbed as no-op", parent_id)
    return result
