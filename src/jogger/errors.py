from __future__ import annotations

from typing import Any


class UnknownTraversalError(ValueError):
    """No named traversal is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown traversal {name}")


class NoSuchOperationError(AttributeError):
    """The current state exposes no callable operation under the requested name."""

    def __init__(self, name: str, state: Any, *, not_callable: bool = False):
        self.name = name
        self.state = state
        type_name = type(state).__name__
        if not_callable:
            message = f"'{type_name}' object attribute '{name}' is not callable"
        else:
            message = f"'{type_name}' object has no attribute '{name}'"
        super().__init__(message)


class TraversalDispatchError(RuntimeError):
    """
    Raised when a chained call is neither a named traversal nor an operation
    of the current state. Both underlying failures are kept on the instance
    and embedded in the message.
    """

    def __init__(self, name: str, unknown: UnknownTraversalError, missing: NoSuchOperationError):
        self.name = name
        self.unknown = unknown
        self.missing = missing
        super().__init__(f"Unknown traversal {name}. From ({unknown}) via ({missing})")
