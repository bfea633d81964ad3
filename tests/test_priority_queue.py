"""Unit tests for the transitive priority queue."""

import random
import sys
import unittest
from itertools import islice
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from transiter import (
    ConfigurationError,
    FrontierExhausted,
    FrontierPolicy,
    PriorityFrontier,
    TransitivePriorityQueue,
    TraversalConfig,
    trans_prio_queue,
    trans_prio_queue_multi,
)
from transiter.testing import random_tree


def steps(n):
    return [n + 1, n + 2]


class TestPriorityOrder(unittest.TestCase):
    """Yielded keys never decrease."""

    def test_numeric_scenario(self):
        """Seed 0 with n -> [n+1, n+2]: first is 0, keys non-decreasing."""
        result = list(islice(trans_prio_queue(0, steps), 4))
        self.assertEqual(result[0], 0)
        self.assertEqual(result, sorted(result))
        self.assertEqual(result, [0, 1, 2, 2])

    def test_non_decreasing_long_run(self):
        result = list(trans_prio_queue(0, steps, max_items=200))
        self.assertEqual(len(result), 200)
        self.assertEqual(result, sorted(result))

    def test_explicit_key(self):
        """A key function orders nodes that are not comparable themselves."""
        result = list(trans_prio_queue(
            {"cost": 0},
            lambda d: [{"cost": d["cost"] + 3}, {"cost": d["cost"] + 1}],
            key=lambda d: d["cost"],
            max_items=6,
        ))
        costs = [d["cost"] for d in result]
        self.assertEqual(costs, sorted(costs))
        self.assertEqual(costs[:3], [0, 1, 2])

    def test_random_trees_by_depth(self):
        """With key = depth, a tree traversal comes out level by level."""
        for seed in range(20):
            root = random_tree(random.Random(seed))
            depth = {id(root): 0}

            def expand(node):
                for child in node.children:
                    depth[id(child)] = depth[id(node)] + 1
                return node.children

            order = [depth[id(n)] for n in trans_prio_queue(
                root, expand, key=lambda n: depth[id(n)])]
            self.assertEqual(order, sorted(order))
            self.assertEqual(len(order), root.count())

    def test_auto_mode(self):
        """Self-expanding seeds need no expansion function."""
        root = random_tree(random.Random(3))
        ids = [n.id for n in trans_prio_queue(root, key=lambda n: n.id)]
        self.assertEqual(len(ids), root.count())
        self.assertEqual(ids[0], root.id)


class TestTieBreaking(unittest.TestCase):
    """Equal keys pop in insertion order."""

    def test_equal_keys_fifo(self):
        frontier = PriorityFrontier(key=lambda pair: pair[0])
        frontier.push_many([(1, "a"), (0, "b"), (1, "c"), (0, "d")])
        popped = [frontier.pop() for _ in range(4)]
        self.assertEqual(popped, [(0, "b"), (0, "d"), (1, "a"), (1, "c")])

    def test_nodes_never_compared(self):
        """Uncomparable nodes with equal keys do not raise."""
        frontier = PriorityFrontier(key=lambda node: 0)
        first, second = object(), object()
        frontier.push_many([first, second])
        self.assertIs(frontier.pop(), first)
        self.assertIs(frontier.pop(), second)

    def test_duplicates_kept(self):
        """The same value reached twice is yielded twice."""
        result = list(trans_prio_queue_multi(
            [1, 1], lambda n: [], max_items=5))
        self.assertEqual(result, [1, 1])


class TestQueueIntrospection(unittest.TestCase):
    """peek() and len() on the priority queue."""

    def test_peek_and_len(self):
        queue = TransitivePriorityQueue.from_seeds([5, 3, 4], lambda n: [])
        self.assertEqual(len(queue), 3)
        self.assertEqual(queue.peek(), 3)
        self.assertEqual(next(queue), 3)
        self.assertEqual(len(queue), 2)

    def test_peek_does_not_expand(self):
        calls = []

        def expand(n):
            calls.append(n)
            return [n + 1]

        queue = TransitivePriorityQueue.from_seed(0, expand)
        queue.peek()
        self.assertEqual(calls, [])
        next(queue)
        self.assertEqual(calls, [0])

    def test_peek_empty(self):
        queue = TransitivePriorityQueue.from_seeds([], lambda n: [])
        with self.assertRaises(FrontierExhausted):
            queue.peek()
        self.assertEqual(list(queue), [])


class TestPriorityOnly(unittest.TestCase):
    """The priority queue never runs on another frontier."""

    def test_from_config_rejects_other_policies(self):
        for config in (TraversalConfig(), TraversalConfig.depth_first()):
            with self.subTest(policy=config.policy):
                with self.assertRaises(ConfigurationError) as ctx:
                    TransitivePriorityQueue.from_config([1], steps, config)
                self.assertIn("PRIORITY", str(ctx.exception))

    def test_from_config_priority(self):
        config = TraversalConfig.priority(key=lambda n: -n)
        queue = TransitivePriorityQueue.from_config([1, 3, 2], lambda n: [], config)
        self.assertIsInstance(queue.frontier, PriorityFrontier)
        self.assertEqual(len(queue), 3)
        self.assertEqual(queue.peek(), 3)
        self.assertEqual(list(queue), [3, 2, 1])

    def test_from_seeds_rejects_other_policies(self):
        for policy in ("bfs", FrontierPolicy.DEPTH_FIRST):
            with self.subTest(policy=policy):
                with self.assertRaises(ConfigurationError):
                    TransitivePriorityQueue.from_seeds([1], steps, policy=policy)
        with self.assertRaises(ConfigurationError):
            TransitivePriorityQueue.from_seed(1, steps, policy="bfs")

    def test_priority_policy_by_name(self):
        queue = TransitivePriorityQueue.from_seed(2, lambda n: [], policy="heap")
        self.assertEqual(queue.peek(), 2)


class TestShortestPathPattern(unittest.TestCase):
    """Best-known-cost table layered on top of the plain priority frontier."""

    GRAPH = {
        "s": [("a", 1), ("b", 4)],
        "a": [("b", 2), ("c", 6)],
        "b": [("c", 1)],
        "c": [("s", 1)],
    }

    def test_dijkstra_distances(self):
        best = {}

        def relax(entry):
            cost, vertex = entry
            if vertex in best:
                return []
            best[vertex] = cost
            return [(cost + weight, succ) for succ, weight in self.GRAPH[vertex]]

        # The graph is cyclic; the queue drains because settled vertices
        # stop expanding.
        for _ in trans_prio_queue((0, "s"), relax):
            pass

        self.assertEqual(best, {"s": 0, "a": 1, "b": 3, "c": 4})


if __name__ == "__main__":
    unittest.main()
