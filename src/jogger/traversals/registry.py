from __future__ import annotations

import inspect
import logging
from types import ModuleType
from typing import Any, Callable, List, Optional

from ..errors import UnknownTraversalError
from ..utils.registry import NamedRegistry, registration_decorator

logger = logging.getLogger(__name__)

TraversalFn = Callable[..., Any]


class TraversalRegistry(NamedRegistry[TraversalFn]):
    """
    Maps traversal names to functions of the form ``fn(state, *args) -> state``.

    The registry is a plain lookup table: it does not check arity and does not
    wrap results. Populate it once at startup, before chains start dispatching.
    """

    kind = "traversal"

    def register(self, name: str, target: TraversalFn, **metadata: Any) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"traversal name must be a valid identifier, got {name!r}")
        if not callable(target):
            raise TypeError(f"traversal '{name}' must be callable, got {type(target).__name__}")
        super().register(name, target, **metadata)

    def invoke(self, name: str, state: Any, /, *args: Any, **kwargs: Any) -> Any:
        if not self.has(name):
            raise UnknownTraversalError(name)
        return self.get(name)(state, *args, **kwargs)

    def traversal(self, name: Optional[str] = None, **metadata: Any) -> Callable[[TraversalFn], TraversalFn]:
        return registration_decorator(self, name, **metadata)

    def register_namespace(self, namespace: Any, *, prefix: str = "") -> List[str]:
        """
        Register every public function of a module or class as a traversal.

        For modules only functions defined in that module count, so helpers
        imported from elsewhere are not picked up. Returns the registered names.
        """
        registered: List[str] = []
        module_name = namespace.__name__ if isinstance(namespace, ModuleType) else None
        for attr, value in vars(namespace).items():
            if attr.startswith("_"):
                continue
            if isinstance(value, (staticmethod, classmethod)):
                value = getattr(namespace, attr)
            if not (inspect.isfunction(value) or inspect.ismethod(value)):
                continue
            if module_name is not None and getattr(value, "__module__", None) != module_name:
                continue
            name = f"{prefix}{attr}"
            self.register(name, value, namespace=getattr(namespace, "__name__", None))
            registered.append(name)
        logger.debug("Registered %d traversals from %r", len(registered), namespace)
        return registered


named_traversals = TraversalRegistry()


def traversal(name: Optional[str] = None, **metadata: Any) -> Callable[[TraversalFn], TraversalFn]:
    """Decorator registering a function into the default registry."""

    return named_traversals.traversal(name, **metadata)


def traverse(
    state: Any,
    name: str,
    /,
    *args: Any,
    registry: Optional[TraversalRegistry] = None,
    **kwargs: Any,
) -> Any:
    """Run one named traversal on ``state`` and return its result."""

    registry = registry if registry is not None else named_traversals
    return registry.invoke(name, state, *args, **kwargs)
