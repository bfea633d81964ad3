"""transiter - lazy transitive traversal of implicit graphs.

transiter enumerates every node reachable from one or more seeds through an
expansion rule ("given a node, produce its successors") without ever
building the structure in memory.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Explicit expansion function:
    from transiter import trans_iter
    trans_iter(seed, lambda node: node.children, policy="dfs")

Self-expanding node types:
    from transiter import SelfExpanding, auto_trans_iter

Cost-ordered traversal:
    from transiter import trans_prio_queue
━━━━━━━━━━━━━━━━━━━━━━━━━━

There is no visited set: cyclic or infinite structures give infinite
iterators. Bound them with ``max_items`` or ``itertools.islice``.
"""

__version__ = "0.2.0"

# Core components
from .core.node import SelfExpanding, is_self_expanding
from .core.adapter import (
    ExpansionAdapter,
    FunctionAdapter,
    SelfExpandingAdapter,
    create_adapter,
)
from .core.frontier import (
    Frontier,
    BreadthFirstFrontier,
    DepthFirstFrontier,
    UnorderedDepthFirstFrontier,
    PriorityFrontier,
    create_frontier,
)
from .core.iterator import TransitiveIterator, TransitivePriorityQueue

# Configuration and errors
from .config import FrontierPolicy, TraversalConfig, parse_policy
from .errors import (
    TransIterError,
    ConfigurationError,
    NotSelfExpandingError,
    FrontierExhausted,
)

# High-level API
from .api import (
    trans_iter,
    trans_iter_multi,
    auto_trans_iter,
    trans_prio_queue,
    trans_prio_queue_multi,
)

__all__ = [
    '__version__',
    # Core
    'SelfExpanding',
    'is_self_expanding',
    'ExpansionAdapter',
    'FunctionAdapter',
    'SelfExpandingAdapter',
    'create_adapter',
    'Frontier',
    'BreadthFirstFrontier',
    'DepthFirstFrontier',
    'UnorderedDepthFirstFrontier',
    'PriorityFrontier',
    'create_frontier',
    'TransitiveIterator',
    'TransitivePriorityQueue',
    # Config
    'FrontierPolicy',
    'TraversalConfig',
    'parse_policy',
    # Errors
    'TransIterError',
    'ConfigurationError',
    'NotSelfExpandingError',
    'FrontierExhausted',
    # API
    'trans_iter',
    'trans_iter_multi',
    'auto_trans_iter',
    'trans_prio_queue',
    'trans_prio_queue_multi',
]
