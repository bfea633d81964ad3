"""SelfExpanding capability for transiter.

Most callers describe successors with an explicit expansion function. Node
types that already know their own structure (a tree node holding its
children, a state that can enumerate its moves) can instead opt in to the
SelfExpanding capability and be traversed without repeating that function
at every call site.

The capability is opt-in on purpose: being iterable is not enough. A plain
string or tuple is iterable but is not a tree of itself, and expanding it
automatically would recurse forever.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional


class SelfExpanding(ABC):
    """Abstract base class for nodes that can produce their own successors.

    Subclass it, or register an existing class with
    ``SelfExpanding.register(cls)`` provided that class defines a
    ``successors()`` method.

    Example:
        class Category(SelfExpanding):
            def __init__(self, name, children=()):
                self.name = name
                self.children = list(children)

            def successors(self):
                return self.children

        names = [c.name for c in root.trans_iter()]
    """

    @abstractmethod
    def successors(self) -> Iterable[Any]:
        """Return the immediate successors of this node.

        The result may be any iterable, lazy or not, finite or not. An
        empty iterable marks a leaf. This method must not mutate the node.

        Returns:
            Iterable of successor nodes
        """
        pass

    def trans_iter(self, policy: Any = "bfs"):
        """Traverse everything reachable from this node.

        Args:
            policy: FrontierPolicy or policy name (default breadth-first)

        Returns:
            TransitiveIterator seeded with this node
        """
        from .iterator import TransitiveIterator
        return TransitiveIterator.from_seed(self, None, policy=policy)

    def trans_prio_queue(self, key: Optional[Callable[[Any], Any]] = None):
        """Traverse everything reachable from this node, lowest key first.

        Args:
            key: Ordering key; the node itself is used when omitted

        Returns:
            TransitivePriorityQueue seeded with this node
        """
        from .iterator import TransitivePriorityQueue
        return TransitivePriorityQueue.from_seed(self, None, key=key)


def is_self_expanding(node: Any) -> bool:
    """Check whether a node opted in to the SelfExpanding capability."""
    return isinstance(node, SelfExpanding)
