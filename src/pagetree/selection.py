"""
Selection tracker.

Holds the id of the single selected node. The selected Node itself is always
derived from the current tree, never stored, so it cannot go stale.
"""

from __future__ import annotations

import logging

from .dom import Node
from .tree import Tree, find

logger = logging.getLogger(__name__)


class Selection:
    """Single-selection state for one editing session."""

    def __init__(self, selected_id: str | None = None):
        self.selected_id = selected_id

    def select(self, node_id: str | None) -> None:
        """Replace the selection unconditionally (None clears it)."""
        self.selected_id = node_id

    def clear(self) -> None:
        self.selected_id = None

    def get_selected(self, tree: Tree) -> Node | None:
        if self.selected_id is None:
            return None
        return find(tree, self.selected_id)

    def forget_missing(self, tree: Tree) -> bool:
        """
        Clear the selection if the selected node is no longer in tree.

        Called in the same step as every removal, so removing the selected node
        or any of its ancestors leaves nothing selected. Returns True if cleared.
        """
        if self.selected_id is None or find(tree, self.selected_id) is not None:
            return False
        logger.debug("Selected node %s left the tree, clearing selection", self.selected_id)
        self.selected_id = None
        return True
