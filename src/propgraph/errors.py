from __future__ import annotations


class ErrorCode:
    """Error codes attached to propgraph exceptions."""

    UNKNOWN = "UNKNOWN"
    NOT_FOUND = "NOT_FOUND"
    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"


class PropgraphError(Exception):
    """Base exception class for all propgraph errors."""

    def __init__(self, message: str, code: str = ErrorCode.UNKNOWN):
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return self.args[0]


class NotFoundError(PropgraphError, KeyError):
    """Raised when a node or edge is absent where existence was required."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"{kind} not found: {key!r}", ErrorCode.NOT_FOUND)
        self.kind = kind
        self.key = key


class PropertyNotFoundError(PropgraphError, KeyError):
    """Raised when an entity exists but lacks the requested property."""

    def __init__(self, key: str, prop: str):
        super().__init__(
            f"property {prop!r} not found on {key!r}",
            ErrorCode.PROPERTY_NOT_FOUND,
        )
        self.key = key
        self.prop = prop
