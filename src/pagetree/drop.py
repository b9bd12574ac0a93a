"""
Drop-target resolution and the drag gesture state machine.

The drag transport reports, at any instant, every container whose region
contains the pointer. Because regions nest, that set is a chain of ancestors.
The resolver picks exactly one target from it:

    innermost-wins: the most deeply nested container under the pointer, or
    the page root (None) when no container is under the pointer

Candidates are checked against the current tree, so ids of removed nodes or
of non-container nodes are never chosen.

Gesture lifecycle:

    IDLE -> DRAGGING(kind) -> COMMITTING(target) -> IDLE
                           -> CANCELLED -> IDLE
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .dom import NodeKind
from .elements.base import TemplateRegistry
from .errors import DragStateError
from .tree import Tree, depth_of, find

logger = logging.getLogger(__name__)


def resolve_target(tree: Tree, candidate_ids: Iterable[str]) -> str | None:
    """
    Pick the innermost container among candidate_ids, or None for the root.

    Depth is measured in the tree rather than trusted from the report order.
    Among candidates at the same depth the first reported wins.
    """
    best_id: str | None = None
    best_depth = -1
    for candidate_id in candidate_ids:
        node = find(tree, candidate_id)
        if node is None or not node.is_container:
            continue
        depth = depth_of(tree, candidate_id)
        if depth is not None and depth > best_depth:
            best_id, best_depth = candidate_id, depth
    return best_id


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    COMMITTING = "committing"
    CANCELLED = "cancelled"


@dataclass
class Drop:
    """A committed drop: what to create and where. parent_id None means root."""
    kind: NodeKind
    parent_id: str | None


@dataclass
class DragSession:
    """State of the drag gesture currently in progress, if any."""
    registry: TemplateRegistry
    state: DragState = DragState.IDLE
    kind: NodeKind | None = None
    target_id: str | None = None
    candidates: list[str] = field(default_factory=list)

    @property
    def active(self) -> bool:
        return self.state is DragState.DRAGGING

    def _transition(self, new_state: DragState) -> None:
        logger.debug("Drag %s -> %s", self.state.value, new_state.value)
        self.state = new_state

    def _require(self, expected: DragState, action: str) -> None:
        if self.state is not expected:
            raise DragStateError(f"Cannot {action} while drag is {self.state.value}")

    def _reset(self) -> None:
        self.kind = None
        self.target_id = None
        self.candidates = []
        self._transition(DragState.IDLE)

    def begin(self, kind: str | NodeKind) -> None:
        """Start dragging a palette item. Unknown kinds fail here, before any drop."""
        self._require(DragState.IDLE, "begin a drag")
        self.kind = self.registry.get(kind).kind
        self._transition(DragState.DRAGGING)

    def hover(self, tree: Tree, candidate_ids: Iterable[str]) -> str | None:
        """Record the containers under the pointer and return the resolved target."""
        self._require(DragState.DRAGGING, "hover")
        self.candidates = list(candidate_ids)
        self.target_id = resolve_target(tree, self.candidates)
        return self.target_id

    def commit(self, tree: Tree, candidate_ids: Iterable[str] | None = None) -> Drop:
        """
        Finish the gesture with a drop.

        candidate_ids, when given, are the containers under the pointer at
        release time. Otherwise the last hover report is re-resolved against
        the current tree.
        """
        self._require(DragState.DRAGGING, "commit a drop")
        if candidate_ids is not None:
            self.candidates = list(candidate_ids)
        target_id = resolve_target(tree, self.candidates)
        assert self.kind is not None  # set by begin()
        drop = Drop(kind=self.kind, parent_id=target_id)
        self._transition(DragState.COMMITTING)
        self._reset()
        return drop

    def cancel(self) -> None:
        """Abort the gesture. The tree is not touched."""
        self._require(DragState.DRAGGING, "cancel a drag")
        self._transition(DragState.CANCELLED)
        self._reset()
