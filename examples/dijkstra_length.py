#!/usr/bin/env python3
"""Shortest path: minimum length/cost.

This example implements a Dijkstra-like search with a transitive priority
queue. We may hop from one waypoint to any other waypoint that is "in
range", i.e. closer than some threshold, and want the shortest route from
the start to a destination.

The priority queue only orders candidates; it never revisits or updates
them. The search therefore keeps its own table of settled waypoints and
simply refuses to extend a path whose end has already been reached more
cheaply.
"""

import math
import sys
from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Dict, List, Optional, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from transiter import trans_prio_queue


@dataclass(frozen=True)
class Waypoint:
    """A named point on the map."""

    name: str
    x: int
    y: int

    def distance(self, other: 'Waypoint') -> int:
        return int(math.hypot(other.x - self.x, other.y - self.y))


@dataclass(frozen=True)
class Route:
    """Sequence of waypoints starting at the origin."""

    stops: Tuple[Waypoint, ...]

    @property
    def last(self) -> Waypoint:
        return self.stops[-1]

    def length(self) -> int:
        return sum(a.distance(b) for a, b in zip(self.stops, self.stops[1:]))

    def extended(self, stop: Waypoint) -> 'Route':
        return Route(self.stops + (stop,))

    def __str__(self) -> str:
        return "".join(stop.name for stop in self.stops)


def shortest_route(start: Waypoint,
                   goal: str,
                   waypoints: List[Waypoint],
                   reach: int,
                   verbose: bool = False) -> Optional[Route]:
    """Find the shortest route from ``start`` to the waypoint named ``goal``.

    Args:
        start: Origin waypoint
        goal: Name of the destination waypoint
        waypoints: Every waypoint we may hop to
        reach: Hops must be strictly shorter than this
        verbose: Print every route as it is popped

    Returns:
        The shortest Route, or None if the goal is unreachable
    """
    settled: Dict[str, int] = {}

    def hops(route: Route) -> List[Route]:
        current = route.last
        if current.name in settled:
            return []
        settled[current.name] = route.length()
        return [route.extended(stop) for stop in waypoints
                if stop.name not in settled and current.distance(stop) < reach]

    for route in trans_prio_queue(Route((start,)), hops, key=Route.length):
        if verbose:
            print(f"{route} {route.length()}")
        if route.last.name == goal:
            return route
    return None


WAYPOINTS = [
    Waypoint("A", 45, 59),
    Waypoint("B", 68, 69),
    Waypoint("C", 32, 78),
    Waypoint("D", 15, 65),
    Waypoint("E", 45, 12),
    Waypoint("F", 98, 80),
]


def main():
    route = shortest_route(Waypoint("S", 0, 0), "F", WAYPOINTS, reach=50,
                           verbose=True)
    if route is None:
        print("Could not find path")
        return 1
    print(f"S->F: {route}, length: {route.length()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
