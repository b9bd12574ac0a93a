"""Heading element: a large bold title line."""

from ..dom import NodeKind
from .base import ElementTemplate, registry

HEADING = ElementTemplate(
    kind=NodeKind.HEADING,
    title="Heading",
    content="New Heading",
    style={
        "fontSize": "2rem",
        "fontWeight": "bold",
        "marginBottom": "1rem",
        "color": "#333333",
    },
)

registry.register(HEADING)
