"""
Starter page shown when a session opens with `seed_sample` enabled.

Built through the registry and patches like any user edit, so every node
gets a fresh id.
"""

from __future__ import annotations

from .dom import NodeKind, Patch
from .elements import button as _button  # noqa: F401 - ensure button template is registered
from .elements import container as _container  # noqa: F401 - ensure container template is registered
from .elements import heading as _heading  # noqa: F401 - ensure heading template is registered
from .elements import paragraph as _paragraph  # noqa: F401 - ensure paragraph template is registered
from .elements.base import TemplateRegistry, registry
from .tree import Tree, apply_patch, insert

WELCOME_TITLE = "Welcome to Your Website"
WELCOME_TEXT = "This is a sample paragraph. Start building your website by dragging elements from the sidebar."


def sample_page(templates: TemplateRegistry | None = None) -> Tree:
    """One section holding a heading, a paragraph and a call-to-action button."""
    templates = templates or registry

    section = apply_patch(
        templates.instantiate(NodeKind.CONTAINER),
        Patch(style={"minHeight": "300px", "backgroundColor": "#ffffff", "borderRadius": 0, "marginBottom": 0}),
    )
    heading = apply_patch(
        templates.instantiate(NodeKind.HEADING),
        Patch(content=WELCOME_TITLE, style={"fontSize": "2.25rem"}),
    )
    paragraph = apply_patch(
        templates.instantiate(NodeKind.PARAGRAPH),
        Patch(content=WELCOME_TEXT, style={"marginBottom": "1.5rem"}),
    )
    button = apply_patch(
        templates.instantiate(NodeKind.BUTTON),
        Patch(content="Get Started"),
    )

    tree: Tree = insert([], section)
    for node in (heading, paragraph, button):
        tree = insert(tree, node, section.id)
    return tree
