"""Container primitives used by the navigation engine."""

from .hash_map import AssociativeMap
from .priority_queue import PriorityQueue

__all__ = [
    "AssociativeMap",
    "PriorityQueue",
]
