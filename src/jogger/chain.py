from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from .errors import NoSuchOperationError, TraversalDispatchError, UnknownTraversalError
from .traversals.registry import TraversalRegistry, named_traversals

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class Resolution:
    """Outcome of one dispatch phase: either a ready-to-call step or the failure."""

    origin: Literal["traversal", "delegate"]
    call: Optional[Callable[..., Any]] = None
    failure: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.call is not None


class Jogger:
    """
    Chainable cursor over a traversal state.

    Any attribute that is not part of this class is treated as a step: named
    traversals from the registry are tried first, then the operation of the
    same name on the current state. Every step returns the chain itself, so
    the raw value is only available through ``result()``::

        j = Jogger(start_node)
        j.go().some().where().count().result()

    Names starting with an underscore are never routed. To dispatch a name the
    chain itself uses (``result``, ``invoke``), call ``invoke(name, ...)``.

    A chain is owned by a single caller and is not safe for concurrent use.
    """

    def __init__(self, initial_state: Any = None, *, registry: Optional[TraversalRegistry] = None):
        self._state = initial_state
        self._registry = registry if registry is not None else named_traversals

    def result(self) -> Any:
        return self._state

    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> "Jogger":
        """
        Run one step and replace the state with its result.

        Errors raised by the traversal function or delegated operation itself
        propagate unchanged and leave the state as it was.
        """
        resolution = self._registry_phase(name)
        if not resolution.found:
            unknown = resolution.failure
            resolution = self._delegation_phase(name)
            if not resolution.found:
                logger.debug("No traversal or operation named %s on %s", name, type(self._state).__name__)
                raise TraversalDispatchError(name, unknown, resolution.failure)  # type: ignore[arg-type]

        logger.debug("Dispatching %s via %s", name, resolution.origin)
        self._state = resolution.call(*args, **kwargs)  # type: ignore[misc]
        return self

    def _registry_phase(self, name: str) -> Resolution:
        if not self._registry.has(name):
            return Resolution("traversal", failure=UnknownTraversalError(name))
        return Resolution("traversal", call=functools.partial(self._registry.invoke, name, self._state))

    def _delegation_phase(self, name: str) -> Resolution:
        operation = getattr(self._state, name, _MISSING)
        if operation is _MISSING:
            return Resolution("delegate", failure=NoSuchOperationError(name, self._state))
        if not callable(operation):
            return Resolution("delegate", failure=NoSuchOperationError(name, self._state, not_callable=True))
        return Resolution("delegate", call=operation)

    def __getattr__(self, name: str) -> Callable[..., "Jogger"]:
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return functools.partial(self.invoke, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state!r})"
