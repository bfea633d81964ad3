"""ExpansionAdapter abstraction for transiter.

The adapter is what turns an implicit structure into something traversable:
given a node, it produces the node's immediate successors. There are exactly
two ways to get one, and both end up behind the same interface:

- the caller supplies an expansion function (FunctionAdapter)
- the node type supplies its own expansion (SelfExpandingAdapter)
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Union

from ..errors import NotSelfExpandingError
from .node import SelfExpanding


class ExpansionAdapter(ABC):
    """Abstract adapter describing the successors of a node.

    Adapters are called once per yielded node, at the moment that node is
    yielded. Whatever they raise propagates to the consumer unchanged.
    """

    @abstractmethod
    def get_successors(self, node: Any) -> Iterable[Any]:
        """Get the immediate successors of the given node.

        This method should be lazy when possible - return an iterator that
        yields successors on demand rather than materializing them all.

        Args:
            node: The node being expanded

        Returns:
            Iterable of successor nodes (empty for a leaf)
        """
        pass

    def __call__(self, node: Any) -> Iterable[Any]:
        return self.get_successors(node)


class FunctionAdapter(ExpansionAdapter):
    """Adapter wrapping a caller-supplied expansion function."""

    def __init__(self, func: Callable[[Any], Iterable[Any]]):
        """Initialize with an expansion function.

        Args:
            func: Callable mapping a node to an iterable of successors
        """
        if not callable(func):
            raise TypeError(f"expansion function must be callable, got {func!r}")
        self.func = func

    def get_successors(self, node: Any) -> Iterable[Any]:
        return self.func(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.func!r})"


class SelfExpandingAdapter(ExpansionAdapter):
    """Adapter delegating to the node's own ``successors()`` method."""

    def get_successors(self, node: Any) -> Iterable[Any]:
        if not isinstance(node, SelfExpanding):
            raise NotSelfExpandingError(node)
        return node.successors()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def create_adapter(
        expansion: Union[ExpansionAdapter, Callable[[Any], Iterable[Any]], None]
) -> ExpansionAdapter:
    """Resolve an expansion argument into an adapter.

    Args:
        expansion: An ExpansionAdapter (used as-is), a callable (wrapped in
            a FunctionAdapter) or None (auto mode, SelfExpandingAdapter)

    Returns:
        ExpansionAdapter instance

    Raises:
        TypeError: If expansion is none of the above
    """
    if expansion is None:
        return SelfExpandingAdapter()
    if isinstance(expansion, ExpansionAdapter):
        return expansion
    if callable(expansion):
        return FunctionAdapter(expansion)
    raise TypeError(
        f"expansion must be an ExpansionAdapter, a callable or None, "
        f"got {type(expansion).__name__}"
    )
