from __future__ import annotations

"""
Directory Collector.

Flattens a built PathTree into the ordered list of directory nodes consumed
by the similarity resolver.
"""

from typing import List

from dirtwins.core.analysis.path_tree import PathTree
from dirtwins.domain.tree_models import Node


def collect_directories(tree: PathTree) -> List[Node]:
    """
    Collect every directory node except the root, in pre-order.

    Children are visited in lexicographic name order so the output is
    reproducible regardless of insertion order or thread interleaving.

    Args:
        tree: A fully ingested PathTree.

    Returns:
        List[Node]: Directory nodes in deterministic order.
    """
    directories: List[Node] = []
    stack: List[Node] = [tree.root]

    while stack:
        current = stack.pop()
        if not current.is_directory:
            continue
        if not current.is_root:
            directories.append(current)
        # Reversed so the smallest name is popped first
        stack.extend(reversed(tree.children_of(current)))

    return directories
