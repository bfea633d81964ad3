"""Testing utilities for transiter consumers."""

from .fixtures import SampleNode, random_tree, reachable

__all__ = ['SampleNode', 'random_tree', 'reachable']
