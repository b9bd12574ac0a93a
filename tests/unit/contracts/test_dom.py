"""
Tier 0: Node Model Contract Tests

These tests pin down the Node structure every other module relies on.
"""

import pytest
from pagetree.dom import Node, NodeKind, Patch, new_node_id, parse_kind


class TestNodeCreation:
    def test_node_creation_with_content(self):
        node = Node(id="h1", kind=NodeKind.HEADING, content="hello world")
        assert node.content == "hello world"
        assert node.kind is NodeKind.HEADING

    def test_kind_accepts_string(self):
        node = Node(id="p1", kind="paragraph")
        assert node.kind is NodeKind.PARAGRAPH

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            Node(id="x", kind="marquee")

    def test_default_style_is_empty_and_not_shared(self):
        a = Node(id="a", kind=NodeKind.BUTTON)
        b = Node(id="b", kind=NodeKind.BUTTON)
        a.style["color"] = "red"
        assert b.style == {}

    def test_extra_defaults_to_none(self):
        node = Node(id="i", kind=NodeKind.IMAGE)
        assert node.extra is None


class TestChildrenInvariant:
    def test_container_gets_empty_children(self):
        node = Node(id="c", kind=NodeKind.CONTAINER)
        assert node.children == []
        assert node.is_container

    @pytest.mark.parametrize("kind", [NodeKind.HEADING, NodeKind.PARAGRAPH, NodeKind.IMAGE, NodeKind.BUTTON])
    def test_leaf_kinds_have_no_children(self, kind):
        node = Node(id="x", kind=kind)
        assert node.children is None
        assert not node.is_container

    def test_leaf_kind_cannot_own_children(self):
        with pytest.raises(ValueError, match="Only containers may own children"):
            Node(id="b", kind=NodeKind.BUTTON, children=[])


class TestTraversal:
    def test_depth_first_order(self):
        gc = Node(id="gc", kind=NodeKind.HEADING)
        c1 = Node(id="c1", kind=NodeKind.CONTAINER, children=[gc])
        c2 = Node(id="c2", kind=NodeKind.PARAGRAPH)
        root = Node(id="root", kind=NodeKind.CONTAINER, children=[c1, c2])

        assert [n.id for n in root.depth_first()] == ["root", "c1", "gc", "c2"]

    def test_leaf_traversal(self):
        node = Node(id="alone", kind=NodeKind.IMAGE)
        assert list(node.depth_first()) == [node]


class TestIdsAndKinds:
    def test_new_ids_are_unique(self):
        ids = {new_node_id() for _ in range(500)}
        assert len(ids) == 500

    def test_parse_kind_passthrough(self):
        assert parse_kind(NodeKind.IMAGE) is NodeKind.IMAGE
        assert parse_kind("container") is NodeKind.CONTAINER

    def test_patch_defaults_leave_everything_untouched(self):
        patch = Patch()
        assert patch.content is None
        assert patch.style is None
        assert patch.extra is None
