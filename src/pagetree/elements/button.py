"""Button element."""

from ..dom import NodeKind
from .base import ElementTemplate, registry

BUTTON = ElementTemplate(
    kind=NodeKind.BUTTON,
    title="Button",
    content="Click Me",
    style={
        "backgroundColor": "#0099ff",
        "color": "white",
        "padding": "0.5rem 1.5rem",
        "borderRadius": "0.375rem",
        "fontWeight": "500",
        "cursor": "pointer",
        "border": "none",
        "display": "inline-block",
    },
)

registry.register(BUTTON)
