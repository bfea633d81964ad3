"""Core abstractions for transiter.

This package contains the traversal core: the SelfExpanding capability,
expansion adapters, frontier policies and the transitive iterator itself.
"""

from .node import SelfExpanding, is_self_expanding
from .adapter import (
    ExpansionAdapter,
    FunctionAdapter,
    SelfExpandingAdapter,
    create_adapter,
)
from .frontier import (
    Frontier,
    BreadthFirstFrontier,
    DepthFirstFrontier,
    UnorderedDepthFirstFrontier,
    PriorityFrontier,
    create_frontier,
)
from .iterator import TransitiveIterator, TransitivePriorityQueue

__all__ = [
    "SelfExpanding",
    "is_self_expanding",
    "ExpansionAdapter",
    "FunctionAdapter",
    "SelfExpandingAdapter",
    "create_adapter",
    "Frontier",
    "BreadthFirstFrontier",
    "DepthFirstFrontier",
    "UnorderedDepthFirstFrontier",
    "PriorityFrontier",
    "create_frontier",
    "TransitiveIterator",
    "TransitivePriorityQueue",
]
