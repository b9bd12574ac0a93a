"""
Container element.

The only kind that owns children, and therefore the only valid drop target
besides the page root.
"""

from ..dom import NodeKind
from .base import ElementTemplate, registry

CONTAINER = ElementTemplate(
    kind=NodeKind.CONTAINER,
    title="Container",
    content="",
    style={
        "display": "flex",
        "flexDirection": "column",
        "padding": "20px",
        "backgroundColor": "#f5f5f7",
        "borderRadius": "8px",
        "marginBottom": "20px",
    },
)

registry.register(CONTAINER)
