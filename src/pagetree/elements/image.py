"""
Image element.

Images carry no text content. The source URL and alt text live in `extra`
so the properties panel can edit them with the same merge semantics as style.
"""

from ..dom import NodeKind
from .base import ElementTemplate, registry

PLACEHOLDER_SRC = "/placeholder.svg"

IMAGE = ElementTemplate(
    kind=NodeKind.IMAGE,
    title="Image",
    content="",
    style={
        "width": "100%",
        "maxWidth": "500px",
        "marginBottom": "1rem",
    },
    extra={
        "src": PLACEHOLDER_SRC,
        "alt": "Image description",
    },
)

registry.register(IMAGE)
