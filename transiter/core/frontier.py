"""Frontier policies for transiter.

A frontier is the pending-work container of a traversal. Every policy
exposes the same "pop one, push many" interface, so the iterator core never
needs to know which discipline it is driving.

Every frontier drains a successor sequence completely when it is pushed.
The successors of a node are thus fixed at the moment the node is expanded,
and anything the sequence raises surfaces from that same step. Infinite
successor sequences are not supported.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterable, List, Optional, Tuple, Union

from ..config import FrontierPolicy, parse_policy
from ..errors import FrontierExhausted


class Frontier(ABC):
    """Abstract base class for pending-entry containers.

    Entries are never deduplicated: the same node value may be pending
    several times if the expansion function produces it several times.
    """

    @abstractmethod
    def push_many(self, nodes: Iterable[Any]) -> None:
        """Insert the given nodes according to the policy.

        Args:
            nodes: Successor sequence, in the order the expansion function
                produced it. May be any finite iterable, including a
                generator; it is consumed completely before returning.
        """
        pass

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the next node according to the policy.

        Raises:
            FrontierExhausted: If no entries are pending
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Discard all pending entries."""
        pass

    def push(self, node: Any) -> None:
        """Insert a single node."""
        self.push_many((node,))


class BreadthFirstFrontier(Frontier):
    """FIFO frontier producing level-order enumeration.

    Successors are appended to the back of a queue and popped from the
    front, so all nodes at depth k are yielded before any node at depth
    k+1. Successor sequences must be finite.
    """

    def __init__(self):
        self._queue: Deque[Any] = deque()

    def push_many(self, nodes: Iterable[Any]) -> None:
        self._queue.extend(nodes)

    def pop(self) -> Any:
        if not self._queue:
            raise FrontierExhausted("breadth-first frontier is empty")
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)


class DepthFirstFrontier(Frontier):
    """LIFO frontier producing pre-order enumeration.

    Successors are pushed in reverse so the first one ends up on top; a
    node's first successor and its whole subtree therefore come out before
    the second successor. Successor sequences must be finite.
    """

    def __init__(self):
        self._stack: List[Any] = []

    def push_many(self, nodes: Iterable[Any]) -> None:
        self._stack.extend(reversed(list(nodes)))

    def pop(self) -> Any:
        if not self._stack:
            raise FrontierExhausted("depth-first frontier is empty")
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class UnorderedDepthFirstFrontier(Frontier):
    """Plain LIFO stack of nodes.

    Successors are pushed in sequence order and popped from the top, so
    siblings are visited last-to-first. Successor sequences must be finite.
    """

    def __init__(self):
        self._stack: List[Any] = []

    def push_many(self, nodes: Iterable[Any]) -> None:
        self._stack.extend(nodes)

    def pop(self) -> Any:
        if not self._stack:
            raise FrontierExhausted("depth-first frontier is empty")
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFrontier(Frontier):
    """Binary min-heap keyed by the node or by a caller-supplied key.

    Heap entries are ``(key, sequence, node)`` tuples. The sequence number
    grows with every insertion, so entries with equal keys pop in insertion
    order and nodes are never compared with each other. Successor sequences
    must be finite.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        """Initialize an empty heap.

        Args:
            key: Maps a node to its ordering key. Defaults to the node itself.
        """
        self.key = key
        self._heap: List[Tuple[Any, int, Any]] = []
        self._counter = itertools.count()

    def push_many(self, nodes: Iterable[Any]) -> None:
        key = self.key
        for node in nodes:
            entry_key = node if key is None else key(node)
            heapq.heappush(self._heap, (entry_key, next(self._counter), node))

    def pop(self) -> Any:
        if not self._heap:
            raise FrontierExhausted("priority frontier is empty")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Any:
        """Return the lowest-keyed pending node without removing it."""
        if not self._heap:
            raise FrontierExhausted("priority frontier is empty")
        return self._heap[0][2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)


# Factory function for creating frontiers by policy or name
def create_frontier(policy: Union[FrontierPolicy, str],
                    key: Optional[Callable[[Any], Any]] = None,
                    custom_frontier: Optional[Callable[[], Frontier]] = None) -> Frontier:
    """Create a frontier instance for the given policy.

    Args:
        policy: FrontierPolicy member, or a name such as "bfs", "dfs",
            "dfs_unordered", "priority" or "heap"
        key: Ordering key for the priority policy
        custom_frontier: Zero-argument factory for the CUSTOM policy

    Returns:
        Empty Frontier instance

    Raises:
        ValueError: If the policy name is not recognized or the CUSTOM
            policy has no factory
    """
    policy = parse_policy(policy)

    if policy == FrontierPolicy.BREADTH_FIRST:
        return BreadthFirstFrontier()
    if policy == FrontierPolicy.DEPTH_FIRST:
        return DepthFirstFrontier()
    if policy == FrontierPolicy.DEPTH_FIRST_UNORDERED:
        return UnorderedDepthFirstFrontier()
    if policy == FrontierPolicy.PRIORITY:
        return PriorityFrontier(key)

    if custom_frontier is None:
        raise ValueError("Custom frontier factory not provided")
    return custom_frontier()
