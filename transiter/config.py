"""Configuration system for transiter.

This module defines how users select a frontier policy and the few options
that go with it (ordering key, custom frontier, consumption bound).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class FrontierPolicy(Enum):
    """Pop discipline of the pending-work container.

    The policy alone decides enumeration order; the iterator core is the
    same for all of them.
    """
    BREADTH_FIRST = "bfs"                   # FIFO, level order
    DEPTH_FIRST = "dfs"                     # LIFO, pre-order
    DEPTH_FIRST_UNORDERED = "dfs_unordered" # LIFO, siblings last-to-first
    PRIORITY = "priority"                   # Min-heap by key
    CUSTOM = "custom"                       # User-supplied frontier


def parse_policy(policy: Union[FrontierPolicy, str]) -> FrontierPolicy:
    """Parse policy from string or enum.

    Args:
        policy: Policy as enum or string

    Returns:
        FrontierPolicy enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(policy, FrontierPolicy):
        return policy

    # Map string names to enum values
    policy_map = {
        'bfs': FrontierPolicy.BREADTH_FIRST,
        'breadth_first': FrontierPolicy.BREADTH_FIRST,
        'fifo': FrontierPolicy.BREADTH_FIRST,
        'dfs': FrontierPolicy.DEPTH_FIRST,
        'depth_first': FrontierPolicy.DEPTH_FIRST,
        'lifo': FrontierPolicy.DEPTH_FIRST,
        'dfs_unordered': FrontierPolicy.DEPTH_FIRST_UNORDERED,
        'depth_first_unordered': FrontierPolicy.DEPTH_FIRST_UNORDERED,
        'priority': FrontierPolicy.PRIORITY,
        'heap': FrontierPolicy.PRIORITY,
        'custom': FrontierPolicy.CUSTOM,
    }

    policy_lower = policy.lower() if isinstance(policy, str) else str(policy)
    if policy_lower not in policy_map:
        raise ValueError(
            f"Unknown frontier policy: {policy}. "
            f"Choose from: {', '.join(policy_map.keys())}"
        )
    return policy_map[policy_lower]


@dataclass
class TraversalConfig:
    """Complete configuration for a transitive traversal.

    This is the object-oriented way to describe a traversal; the functions
    in :mod:`transiter.api` build one of these from keyword arguments.
    """

    # Frontier selection
    policy: FrontierPolicy = FrontierPolicy.BREADTH_FIRST
    key: Optional[Callable[[Any], Any]] = None             # Priority only
    custom_frontier: Optional[Callable[[], Any]] = None    # Frontier factory

    # Consumption bound (None = unbounded)
    max_items: Optional[int] = None

    @classmethod
    def breadth_first(cls, max_items: Optional[int] = None) -> 'TraversalConfig':
        """Create config for level-order enumeration."""
        return cls(policy=FrontierPolicy.BREADTH_FIRST, max_items=max_items)

    @classmethod
    def depth_first(cls, ordered: bool = True,
                    max_items: Optional[int] = None) -> 'TraversalConfig':
        """Create config for depth-first enumeration.

        Args:
            ordered: Visit siblings in successor order (pre-order). When
                False, siblings are visited last-to-first.
            max_items: Optional consumption bound

        Returns:
            TraversalConfig for depth-first traversal
        """
        policy = (FrontierPolicy.DEPTH_FIRST if ordered
                  else FrontierPolicy.DEPTH_FIRST_UNORDERED)
        return cls(policy=policy, max_items=max_items)

    @classmethod
    def priority(cls, key: Optional[Callable[[Any], Any]] = None,
                 max_items: Optional[int] = None) -> 'TraversalConfig':
        """Create config for cost-ordered enumeration.

        Args:
            key: Ordering key; the node itself is used when omitted
            max_items: Optional consumption bound

        Returns:
            TraversalConfig for priority traversal
        """
        return cls(policy=FrontierPolicy.PRIORITY, key=key, max_items=max_items)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.policy, FrontierPolicy):
            errors.append(f"policy must be a FrontierPolicy, got {self.policy!r}")
            return errors

        if self.key is not None:
            if self.policy != FrontierPolicy.PRIORITY:
                errors.append("key is only used by the PRIORITY policy")
            elif not callable(self.key):
                errors.append("key must be callable")

        if self.policy == FrontierPolicy.CUSTOM and self.custom_frontier is None:
            errors.append("custom_frontier required when policy is CUSTOM")

        if self.custom_frontier is not None and self.policy != FrontierPolicy.CUSTOM:
            errors.append("custom_frontier is only used by the CUSTOM policy")

        if self.max_items is not None and self.max_items <= 0:
            errors.append("max_items must be positive")

        return errors
