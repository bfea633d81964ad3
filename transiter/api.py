"""High-level API for transiter.

This module provides simple, functional interfaces for building transitive
traversals. These functions wrap the object-oriented API in
:mod:`transiter.core` for the common cases.
"""

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .config import FrontierPolicy, TraversalConfig, parse_policy
from .core.adapter import ExpansionAdapter
from .core.iterator import TransitiveIterator, TransitivePriorityQueue

ExpansionArg = Union[ExpansionAdapter, Callable[[Any], Iterable[Any]]]


def trans_iter(
    seed: Any,
    expansion: ExpansionArg,
    policy: Union[FrontierPolicy, str] = FrontierPolicy.BREADTH_FIRST,
    key: Optional[Callable[[Any], Any]] = None,
    max_items: Optional[int] = None,
) -> Iterator[Any]:
    """Enumerate everything reachable from a seed through an expansion function.

    This is the primary high-level function. The seed is yielded first;
    every other node is yielded after the node whose expansion produced it.

    Args:
        seed: Initial node
        expansion: Callable mapping a node to its successors, or an
            ExpansionAdapter
        policy: Frontier policy (bfs, dfs, dfs_unordered, priority)
        key: Ordering key for the priority policy
        max_items: Stop after this many nodes (None = unbounded)

    Returns:
        TransitiveIterator, or an islice over it when max_items is given

    Example:
        >>> list(trans_iter("", lambda s: [s + "a", s + "b"], max_items=5))
        ['', 'a', 'b', 'aa', 'ab']
    """
    return trans_iter_multi((seed,), expansion, policy=policy, key=key,
                            max_items=max_items)


def trans_iter_multi(
    seeds: Iterable[Any],
    expansion: ExpansionArg,
    policy: Union[FrontierPolicy, str] = FrontierPolicy.BREADTH_FIRST,
    key: Optional[Callable[[Any], Any]] = None,
    max_items: Optional[int] = None,
) -> Iterator[Any]:
    """Enumerate everything reachable from several seeds.

    Same as :func:`trans_iter`, with every seed yielded (in the order the
    policy dictates) before its own successors.
    """
    if expansion is None:
        raise TypeError("expansion is required; use auto_trans_iter for "
                        "SelfExpanding nodes")

    config = TraversalConfig(
        policy=parse_policy(policy),
        key=key,
        max_items=max_items,
    )
    return _bounded(TransitiveIterator.from_config(seeds, expansion, config),
                    config)


def auto_trans_iter(
    node: Any,
    policy: Union[FrontierPolicy, str] = FrontierPolicy.BREADTH_FIRST,
    max_items: Optional[int] = None,
) -> Iterator[Any]:
    """Enumerate everything reachable from a self-expanding node.

    The node type supplies its own successors through
    :meth:`SelfExpanding.successors`, so no expansion function is needed.

    Args:
        node: Seed node implementing SelfExpanding
        policy: Frontier policy (priority uses the nodes' natural order)
        max_items: Stop after this many nodes (None = unbounded)

    Returns:
        TransitiveIterator, or an islice over it when max_items is given

    Raises:
        NotSelfExpandingError: If node does not implement SelfExpanding
    """
    config = TraversalConfig(policy=parse_policy(policy), max_items=max_items)
    return _bounded(TransitiveIterator.from_config((node,), None, config), config)


def trans_prio_queue(
    seed: Any,
    expansion: Optional[ExpansionArg] = None,
    key: Optional[Callable[[Any], Any]] = None,
    max_items: Optional[int] = None,
) -> Iterator[Any]:
    """Enumerate reachable nodes, always yielding the lowest-keyed pending one.

    Args:
        seed: Initial node
        expansion: Expansion function or adapter; None means the seed is
            SelfExpanding
        key: Ordering key; nodes are compared directly when omitted
        max_items: Stop after this many nodes (None = unbounded)

    Returns:
        TransitivePriorityQueue, or an islice over it when max_items is given

    Example:
        >>> list(trans_prio_queue(0, lambda n: [n + 2, n + 1], max_items=4))
        [0, 1, 2, 2]
    """
    return trans_prio_queue_multi((seed,), expansion, key=key, max_items=max_items)


def trans_prio_queue_multi(
    seeds: Iterable[Any],
    expansion: Optional[ExpansionArg] = None,
    key: Optional[Callable[[Any], Any]] = None,
    max_items: Optional[int] = None,
) -> Iterator[Any]:
    """Priority traversal from several seeds. See :func:`trans_prio_queue`."""
    config = TraversalConfig.priority(key=key, max_items=max_items)
    queue = TransitivePriorityQueue.from_config(seeds, expansion, config)
    return _bounded(queue, config)


def _bounded(iterator: TransitiveIterator, config: TraversalConfig) -> Iterator[Any]:
    """Apply the configured consumption bound, if any."""
    if config.max_items is None:
        return iterator
    return islice(iterator, config.max_items)
