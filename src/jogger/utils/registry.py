from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar


T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class RegistryEntry(Generic[T]):
    name: str
    target: T
    metadata: Dict[str, Any] = field(default_factory=dict)


class NamedRegistry(Generic[T]):
    """Registry that indexes callables/classes by a single name."""

    kind = "entry"

    def __init__(self, *, allow_overwrite: bool = True) -> None:
        self.allow_overwrite = allow_overwrite
        self._items: Dict[str, RegistryEntry[T]] = {}

    def register(self, name: str, target: T, **metadata: Any) -> None:
        if name in self._items:
            if not self.allow_overwrite:
                raise ValueError(f"{self.kind} already registered: {name}")
            logger.info("Overwriting %s %s", self.kind, name)
        else:
            logger.debug("Registered %s %s", self.kind, name)
        self._items[name] = RegistryEntry(name, target, dict(metadata))

    def unregister(self, name: str) -> None:
        self._items.pop(name, None)

    def has(self, name: str) -> bool:
        try:
            return name in self._items
        except TypeError:
            return False

    def get(self, name: str) -> T:
        entry = self._items.get(name)
        if entry is None:
            available = ", ".join(self.names()) or "<none>"
            raise KeyError(f"No registered {self.kind} '{name}', available: {available}")
        return entry.target

    def get_metadata(self, name: str) -> Dict[str, Any]:
        entry = self._items.get(name)
        if entry is None:
            raise KeyError(f"No metadata for {self.kind} '{name}'")
        return entry.metadata

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._items))

    def available(self) -> Dict[str, T]:
        return {name: entry.target for name, entry in self._items.items()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._items)


def registration_decorator(
    registry: NamedRegistry[T], name: Optional[str] = None, **metadata: Any
) -> Callable[[T], T]:
    def decorator(target: T) -> T:
        registry.register(name or getattr(target, "__name__"), target, **metadata)
        return target

    return decorator
