"""Exception hierarchy for transiter.

The traversal core has no recoverable-error taxonomy of its own. Errors
raised by caller-supplied expansion functions are never caught here; they
propagate unchanged out of ``next()``. The classes below only cover misuse
of the library itself.
"""


class TransIterError(Exception):
    """Base class for all transiter errors."""
    pass


class ConfigurationError(TransIterError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


class NotSelfExpandingError(TransIterError, TypeError):
    """Raised when auto mode is used on a node that does not opt in.

    Only types implementing :class:`~transiter.core.node.SelfExpanding`
    can describe their own successors.
    """

    def __init__(self, node):
        self.node = node
        super().__init__(
            f"{type(node).__name__} does not implement SelfExpanding; "
            f"supply an explicit expansion function instead"
        )


class FrontierExhausted(TransIterError, LookupError):
    """Raised by Frontier.pop() when no pending entries remain."""
    pass
