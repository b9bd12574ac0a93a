"""Paragraph element: body text, shown as "Text" in the palette."""

from ..dom import NodeKind
from .base import ElementTemplate, registry

PARAGRAPH = ElementTemplate(
    kind=NodeKind.PARAGRAPH,
    title="Text",
    content="Add your text here",
    style={
        "fontSize": "1rem",
        "marginBottom": "1rem",
        "color": "#555555",
    },
)

registry.register(PARAGRAPH)
