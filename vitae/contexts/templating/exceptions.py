"""Custom exceptions for the templating context."""

from typing import Any, Optional


class InvalidNodeError(ValueError):
    """
    Exception raised when a document node is built with an out-of-contract payload.

    Attributes:
        message: Error description
        node_type: Name of the node variant being constructed
        value: The offending value
    """

    def __init__(self, message: str, node_type: Optional[str] = None, value: Any = None):
        self.message = message
        self.node_type = node_type
        self.value = value

        parts = [message]
        if node_type:
            parts.append(f"Node: {node_type}")
        if value is not None:
            parts.append(f"Value: {value!r}")

        super().__init__("\n".join(parts))


class InvalidResumeError(ValueError):
    """
    Exception raised when a resume entry violates a record invariant
    (e.g., an education entry that ends before it starts).

    Attributes:
        message: Error description
        entry: The entry description (school, company, ...) if known
    """

    def __init__(self, message: str, entry: Optional[str] = None):
        self.message = message
        self.entry = entry

        if entry:
            super().__init__(f"{message} (entry: {entry})")
        else:
            super().__init__(message)


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when resume YAML is missing required fields or has the
    wrong shape for a field.
    """

    pass
