from .registry import TraversalFn, TraversalRegistry, named_traversals, traversal, traverse
from .loader import load_traversal_modules

__all__ = [
    "TraversalFn",
    "TraversalRegistry",
    "named_traversals",
    "traversal",
    "traverse",
    "load_traversal_modules",
]
