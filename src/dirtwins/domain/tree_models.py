from __future__ import annotations

"""
Path Tree Data Models.

Nodes live in an arena owned by the PathTree and reference each other by
integer identifier: a node stores its parent as ``parent_id`` and its
children as a ``name -> node_id`` mapping.
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

ROOT_ID = 0


@dataclass(eq=False)
class Node:
    """
    One path segment of the reconstructed hierarchy.

    Attributes:
        node_id: Arena index of this node (0 for the root).
        name: Segment name, empty only for the root.
        parent_id: Arena index of the parent, None for the root.
        children: Child segment names mapped to their arena index.
        is_directory: Directory flag; see PathTree for the promotion rules.
        dir_marked: Set once a trailing-slash path targeted this node.
        lock: Guards ``children``, ``is_directory`` and ``dir_marked``.
    """
    node_id: int
    name: str
    parent_id: Optional[int] = None
    children: Dict[str, int] = field(default_factory=dict)
    is_directory: bool = True
    dir_marked: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def child_names(self) -> frozenset:
        return frozenset(self.children)
