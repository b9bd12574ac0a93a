"""
Exception types for pagetree.

Only programming errors are raised. Stale ids (a node removed between a UI
event and its handling) are absorbed as no-ops by the tree operations.
"""


class UnknownElementKind(LookupError):
    """Raised when a template is requested for a kind that is not registered."""


class DragStateError(RuntimeError):
    """Raised when the drag transport reports events out of order."""


class ScriptError(ValueError):
    """Raised by the CLI for a malformed editing script line."""

    def __init__(self, message: str, line_no: int | None = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
