from __future__ import annotations

import importlib
import logging
from typing import Iterable, List

from .registry import TraversalRegistry

logger = logging.getLogger(__name__)


def load_traversal_modules(modules: Iterable[str], registry: TraversalRegistry, *, prefix: str = "") -> List[str]:
    registered: List[str] = []
    for module_path in modules:
        module = importlib.import_module(module_path)
        names = registry.register_namespace(module, prefix=prefix)
        logger.info("Loaded %d traversals from %s", len(names), module_path)
        registered.extend(names)
    return registered
