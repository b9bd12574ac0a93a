"""
Unit tests for the text outline.
"""

from pagetree.dom import Node, NodeKind
from pagetree.outline import format_node, outline_lines, truncate_content


class TestTruncateContent:
    def test_short_content_unchanged(self):
        assert truncate_content("hello", 10) == "hello"

    def test_long_content_tail_truncated(self):
        assert truncate_content("hello world", 8) == "hello..."

    def test_tiny_budget(self):
        assert truncate_content("hello world", 2) == ".."

    def test_zero_means_unlimited(self):
        assert truncate_content("hello world", 0) == "hello world"


class TestFormatNode:
    def test_heading_line(self):
        node = Node(id="abcdef1234", kind=NodeKind.HEADING, content="Welcome", style={"color": "#333"})
        assert format_node(node, content_chars=40, id_chars=6) == 'heading #abcdef "Welcome" {color: #333}'

    def test_selected_marker(self):
        node = Node(id="abc", kind=NodeKind.BUTTON, content="Go")
        assert format_node(node, selected_id="abc", content_chars=40, id_chars=0) == 'button #abc* "Go"'

    def test_image_extra(self):
        node = Node(id="img", kind=NodeKind.IMAGE, extra={"src": "/a.png"})
        assert format_node(node, content_chars=40, id_chars=0) == "image #img [src=/a.png]"

    def test_hide_style(self):
        node = Node(id="c", kind=NodeKind.CONTAINER, style={"padding": "20px"})
        assert format_node(node, content_chars=40, id_chars=0, show_style=False) == "container #c"


class TestOutlineLines:
    def test_indentation_follows_nesting(self):
        tree = [
            Node(id="c1", kind=NodeKind.CONTAINER, children=[
                Node(id="c2", kind=NodeKind.CONTAINER, children=[
                    Node(id="p", kind=NodeKind.PARAGRAPH, content="text"),
                ]),
            ]),
            Node(id="b", kind=NodeKind.BUTTON, content="Go"),
        ]
        lines = outline_lines(tree, content_chars=40, id_chars=0)
        assert lines == [
            "container #c1",
            "  container #c2",
            '    paragraph #p "text"',
            'button #b "Go"',
        ]

    def test_empty_tree(self):
        assert outline_lines([]) == []
