#!/usr/bin/env python3
"""Walk a self-expanding tree in every frontier order.

Category opts in to SelfExpanding, so it can be traversed without passing
an expansion function around.
"""

import sys
from itertools import islice
from pathlib import Path
from typing import Iterable, List

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from transiter import FrontierPolicy, SelfExpanding, auto_trans_iter, trans_iter


class Category(SelfExpanding):
    """Product category with sub-categories."""

    def __init__(self, name: str, children: Iterable['Category'] = ()):
        self.name = name
        self.children: List['Category'] = list(children)

    def successors(self) -> List['Category']:
        return self.children

    def __lt__(self, other: 'Category') -> bool:
        return self.name < other.name


CATALOG = Category("root", [
    Category("garden", [Category("tools"), Category("plants")]),
    Category("kitchen", [Category("cookware", [Category("pans")])]),
    Category("books"),
])


def main():
    for policy in FrontierPolicy:
        if policy == FrontierPolicy.CUSTOM:
            continue
        names = [c.name for c in auto_trans_iter(CATALOG, policy=policy)]
        print(f"{policy.value:>14}: {' '.join(names)}")

    # Infinite structure: every string expands to three longer strings
    words = trans_iter("", lambda s: [s + "a", s + "b", s + "c"])
    print(f"{'first ten':>14}: {list(islice(words, 10))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
