"""
Builder session: the state of one editing session.

Owns the current tree, the selection and the drag gesture, and applies every
user event as one full tree replacement. Subscribers (the rendering surface)
are told about the new tree and selection after each change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .config import Config, get_config
from .dom import Node, NodeKind, Patch
from .drop import DragSession
from .elements import button as _button  # noqa: F401 - ensure button template is registered
from .elements import container as _container  # noqa: F401 - ensure container template is registered
from .elements import heading as _heading  # noqa: F401 - ensure heading template is registered
from .elements import image as _image  # noqa: F401 - ensure image template is registered
from .elements import paragraph as _paragraph  # noqa: F401 - ensure paragraph template is registered
from .elements.base import TemplateRegistry, registry
from .sample import sample_page
from .selection import Selection
from .tree import Tree, duplicate, find, insert, remove, reorder, update

logger = logging.getLogger(__name__)

Listener = Callable[[Tree, str | None], None]


class BuilderSession:
    """Tree, selection and drag state for one editor."""

    def __init__(self, config: Config | None = None, templates: TemplateRegistry | None = None):
        self.config = config or get_config()
        self.templates = templates or registry
        self._tree: Tree = sample_page(self.templates) if self.config.session.seed_sample else []
        self.selection = Selection()
        self.drag = DragSession(registry=self.templates)
        self._listeners: list[Listener] = []

    @property
    def tree(self) -> Tree:
        """Current tree. Treat as read-only; replace it through the session methods."""
        return self._tree

    @property
    def selected_id(self) -> str | None:
        return self.selection.selected_id

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._tree, self.selection.selected_id)

    def _commit(self, new_tree: Tree) -> bool:
        """Swap in new_tree. Returns False (and stays silent) if nothing changed."""
        if new_tree is self._tree:
            return False
        self._tree = new_tree
        self.selection.forget_missing(new_tree)
        return True

    # Tree edits

    def add_component(self, kind: str | NodeKind, parent_id: str | None = None) -> Node | None:
        """
        Create a node of the given kind under parent_id (root if None).

        Returns the new node, or None when parent_id vanished or is not a
        container. The new node is selected only when it actually landed.
        """
        node = self.templates.instantiate(kind)
        if not self._commit(insert(self._tree, node, parent_id)):
            return None
        if self.config.session.select_on_insert:
            self.selection.select(node.id)
        logger.debug("Added %s %s under %s", node.kind.value, node.id, parent_id or "root")
        self._notify()
        return node

    def update_component(self, node_id: str, patch: Patch) -> None:
        if self._commit(update(self._tree, node_id, patch)):
            self._notify()

    def remove_component(self, node_id: str) -> None:
        """Remove a node and its subtree, clearing the selection if it was inside."""
        if self._commit(remove(self._tree, node_id)):
            self._notify()

    def duplicate_component(self, node_id: str) -> Node | None:
        """Clone a node (fresh ids throughout) right after itself and select the clone."""
        new_tree, clone = duplicate(self._tree, node_id)
        if clone is None or not self._commit(new_tree):
            return None
        self.selection.select(clone.id)
        self._notify()
        return clone

    def reorder_children(self, ordered_ids: Iterable[str], parent_id: str | None = None) -> None:
        if self._commit(reorder(self._tree, ordered_ids, parent_id)):
            self._notify()

    # Selection

    def select_component(self, node_id: str | None) -> None:
        if node_id == self.selection.selected_id:
            return
        self.selection.select(node_id)
        self._notify()

    def selected_component(self) -> Node | None:
        return self.selection.get_selected(self._tree)

    # Drag gesture

    def begin_drag(self, kind: str | NodeKind) -> None:
        self.drag.begin(kind)

    def drag_over(self, candidate_ids: Iterable[str]) -> str | None:
        """Report containers under the pointer. Returns the resolved target (None = root)."""
        return self.drag.hover(self._tree, candidate_ids)

    def drop(self, candidate_ids: Iterable[str] | None = None) -> Node | None:
        """Commit the drag: create the dragged kind in the innermost container under the pointer."""
        committed = self.drag.commit(self._tree, candidate_ids)
        return self.add_component(committed.kind, committed.parent_id)

    def cancel_drag(self) -> None:
        self.drag.cancel()

    @property
    def dragging(self) -> bool:
        return self.drag.active

    def find(self, node_id: str) -> Node | None:
        return find(self._tree, node_id)
