"""
Jogger package entry. Build traversal chains with ``Jogger`` and register
named traversals with ``traversal`` or a ``TraversalRegistry``.
"""

from .chain import Jogger, Resolution
from .errors import NoSuchOperationError, TraversalDispatchError, UnknownTraversalError
from .traversals import TraversalRegistry, load_traversal_modules, named_traversals, traversal, traverse

__all__ = [
    "Jogger",
    "Resolution",
    "TraversalRegistry",
    "named_traversals",
    "traversal",
    "traverse",
    "load_traversal_modules",
    "UnknownTraversalError",
    "NoSuchOperationError",
    "TraversalDispatchError",
]
