"""Test fixtures for transiter consumers.

These fixtures provide a small recursive structure and a seeded generator
for it, so traversal properties can be checked against many tree shapes
without hand-writing each one.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from ..core.node import SelfExpanding


@dataclass(eq=False)
class SampleNode(SelfExpanding):
    """Dumb recursive structure for testing.

    Nodes compare by identity, so the same id may appear at several places
    in one tree without confusing set-based assertions.
    """

    id: int
    children: List['SampleNode'] = field(default_factory=list)

    def successors(self) -> List['SampleNode']:
        return self.children

    def count(self) -> int:
        """Retrieve the number of nodes in this subtree."""
        return sum(child.count() for child in self.children) + 1

    def depth_of(self, node: 'SampleNode') -> Optional[int]:
        """Return the depth of ``node`` below this one, or None if absent."""
        if node is self:
            return 0
        for child in self.children:
            depth = child.depth_of(node)
            if depth is not None:
                return depth + 1
        return None

    def walk(self) -> Iterator['SampleNode']:
        """Recursive pre-order walk, used as the reference ordering."""
        yield self
        for child in self.children:
            yield from child.walk()


def random_tree(rng: random.Random, size: int = 16) -> SampleNode:
    """Generate a random tree.

    The number of children of every node is drawn from ``[0, size]`` and
    each child is generated with half the size, so trees stay finite.

    Args:
        rng: Seeded random generator
        size: Upper bound on the fan-out at the root

    Returns:
        Root SampleNode
    """
    children = []
    if size > 0:
        fan_out = rng.randint(0, size)
        children = [random_tree(rng, size // 2) for _ in range(fan_out)]
    return SampleNode(id=rng.getrandbits(64), children=children)


def reachable(seed, expansion: Callable[[object], Iterable[object]]) -> List[object]:
    """Compute the reachable set of a finite acyclic structure recursively.

    Independent from the iterator under test; used as the closure oracle.
    """
    found = [seed]
    for successor in expansion(seed):
        found.extend(reachable(successor, expansion))
    return found
