"""Custom exceptions for the rendering context."""

from typing import Optional


class RenderError(Exception):
    """
    Exception raised when a document tree cannot be rendered.

    Attributes:
        message: Error description
        node_type: Name of the node kind being rendered, if known
    """

    def __init__(self, message: str, node_type: Optional[str] = None):
        self.message = message
        self.node_type = node_type

        if node_type:
            super().__init__(f"{message}\nNode: {node_type}")
        else:
            super().__init__(message)


class UnsupportedNodeError(RenderError, NotImplementedError):
    """
    Exception raised for node kinds with no rendering rule (FadeIn, or objects
    that are not document nodes at all). Always fatal.
    """

    pass
