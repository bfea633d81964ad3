"""Transitive iterator for transiter.

The iterator yields every node transitively reachable from its seeds through
an expansion adapter, seeds included. A node discovered by expanding some
other node is only ever yielded after that node, i.e. children come after
their parent. The frontier policy decides everything else about the order.

The iterator is lazy: each ``next()`` pops one node, expands that node only,
and returns it. Nothing is computed for nodes the caller never asks for.
There is no visited set, so cyclic or infinite structures produce infinite
iterators; bound them with ``itertools.islice`` or similar.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from ..config import FrontierPolicy, TraversalConfig, parse_policy
from ..errors import ConfigurationError, FrontierExhausted, NotSelfExpandingError
from .adapter import ExpansionAdapter, create_adapter
from .frontier import Frontier, PriorityFrontier, create_frontier
from .node import is_self_expanding

logger = logging.getLogger(__name__)

Expansion = Union[ExpansionAdapter, Callable[[Any], Iterable[Any]], None]


class TransitiveIterator(Iterator[Any]):
    """Lazy enumeration of the closure of a seed set.

    Couples one frontier with one expansion adapter and holds nothing else.
    Not restartable, not thread-safe.
    """

    def __init__(self, frontier: Frontier, adapter: ExpansionAdapter):
        """Initialize from an already seeded frontier.

        Most callers want :meth:`from_seed` or :meth:`from_seeds` instead.

        Args:
            frontier: Frontier holding the seed node(s)
            adapter: ExpansionAdapter producing successors
        """
        self.frontier = frontier
        self.adapter = adapter
        logger.debug("Created %s with %s and %r",
                     self.__class__.__name__,
                     frontier.__class__.__name__,
                     adapter)

    @classmethod
    def from_seed(cls,
                  seed: Any,
                  expansion: Expansion,
                  policy: Union[FrontierPolicy, str] = FrontierPolicy.BREADTH_FIRST,
                  key: Optional[Callable[[Any], Any]] = None) -> 'TransitiveIterator':
        """Create an iterator over everything reachable from one seed.

        Args:
            seed: Initial node, yielded first
            expansion: Expansion function, ExpansionAdapter, or None to use
                the seed's own SelfExpanding.successors()
            policy: Frontier policy or policy name
            key: Ordering key (priority policy only)

        Returns:
            TransitiveIterator

        Raises:
            NotSelfExpandingError: If expansion is None and the seed does
                not implement SelfExpanding
        """
        return cls.from_seeds((seed,), expansion, policy=policy, key=key)

    @classmethod
    def from_seeds(cls,
                   seeds: Iterable[Any],
                   expansion: Expansion,
                   policy: Union[FrontierPolicy, str] = FrontierPolicy.BREADTH_FIRST,
                   key: Optional[Callable[[Any], Any]] = None) -> 'TransitiveIterator':
        """Create an iterator over everything reachable from several seeds.

        Seeds are inserted into the frontier as if they were the successors
        of an invisible root, in iteration order.
        """
        return cls._seeded(create_frontier(policy, key=key), seeds, expansion)

    @classmethod
    def from_config(cls,
                    seeds: Iterable[Any],
                    expansion: Expansion,
                    config: TraversalConfig) -> 'TransitiveIterator':
        """Create an iterator from a validated TraversalConfig.

        ``config.max_items`` is not applied here; see
        :func:`transiter.api.trans_iter`.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        _check_config(config.validate())
        frontier = create_frontier(config.policy,
                                   key=config.key,
                                   custom_frontier=config.custom_frontier)
        return cls._seeded(frontier, seeds, expansion)

    @classmethod
    def _seeded(cls, frontier: Frontier, seeds: Iterable[Any],
                expansion: Expansion) -> 'TransitiveIterator':
        """Push the seeds and build the iterator.

        In auto mode every seed must opt in to SelfExpanding; this is
        checked here rather than at the first expansion.
        """
        seeds = list(seeds)
        if expansion is None:
            for seed in seeds:
                if not is_self_expanding(seed):
                    raise NotSelfExpandingError(seed)
        adapter = create_adapter(expansion)
        frontier.push_many(seeds)
        return cls(frontier, adapter)

    def __iter__(self) -> 'TransitiveIterator':
        return self

    def __next__(self) -> Any:
        """Pop one node, expand it, and return it unchanged.

        The successor sequence is drained before returning, so an error
        raised while producing it comes out of this call.
        """
        try:
            node = self.frontier.pop()
        except FrontierExhausted:
            logger.debug("%s exhausted", self.__class__.__name__)
            raise StopIteration from None

        self.frontier.push_many(self.adapter.get_successors(node))
        return node

    advance = __next__

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(frontier={self.frontier.__class__.__name__}, "
                f"adapter={self.adapter!r})")


class TransitivePriorityQueue(TransitiveIterator):
    """Transitive iterator yielding the lowest-keyed pending node first.

    This is a plain priority frontier, not a decrease-key queue: a node
    already yielded is never revisited, even if a cheaper route to the same
    location turns up later. Algorithms that need true shortest paths keep
    their own best-known-cost table and skip stale entries.

    Equal keys pop in insertion order. Only the PRIORITY policy is accepted.
    """

    frontier: PriorityFrontier

    @classmethod
    def from_seed(cls,
                  seed: Any,
                  expansion: Expansion = None,
                  policy: Union[FrontierPolicy, str] = FrontierPolicy.PRIORITY,
                  key: Optional[Callable[[Any], Any]] = None) -> 'TransitivePriorityQueue':
        """Create a priority traversal from one seed.

        Args:
            seed: Initial node
            expansion: Expansion function, ExpansionAdapter, or None for
                auto mode
            policy: Must be the priority policy
            key: Ordering key; nodes are compared directly when omitted

        Returns:
            TransitivePriorityQueue
        """
        return cls.from_seeds((seed,), expansion, policy=policy, key=key)

    @classmethod
    def from_seeds(cls,
                   seeds: Iterable[Any],
                   expansion: Expansion = None,
                   policy: Union[FrontierPolicy, str] = FrontierPolicy.PRIORITY,
                   key: Optional[Callable[[Any], Any]] = None) -> 'TransitivePriorityQueue':
        """Create a priority traversal from several seeds."""
        _check_config(_priority_only(parse_policy(policy)))
        return cls._seeded(PriorityFrontier(key), seeds, expansion)

    @classmethod
    def from_config(cls,
                    seeds: Iterable[Any],
                    expansion: Expansion,
                    config: TraversalConfig) -> 'TransitivePriorityQueue':
        """Create a priority traversal from a PRIORITY TraversalConfig.

        Raises:
            ConfigurationError: If the configuration is invalid or uses
                another policy
        """
        _check_config(config.validate() + _priority_only(config.policy))
        return cls._seeded(PriorityFrontier(config.key), seeds, expansion)

    def peek(self) -> Any:
        """Return the node the next ``next()`` call would yield.

        Raises:
            FrontierExhausted: If nothing is pending
        """
        return self.frontier.peek()

    def __len__(self) -> int:
        """Number of pending entries, duplicates included."""
        return len(self.frontier)


def _priority_only(policy: Any) -> List[str]:
    if policy != FrontierPolicy.PRIORITY:
        return [f"TransitivePriorityQueue requires the PRIORITY policy, got {policy!r}"]
    return []


def _check_config(errors: List[str]) -> None:
    if errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}"
        )
