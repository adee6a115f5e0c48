from __future__ import annotations

"""
Concurrent Path Tree.

Rebuilds the directory hierarchy implied by a flat list of slash-delimited
paths. Nodes are kept in an arena (a list indexed by ``node_id``); each node
has its own lock guarding its children map and directory flags, so inserts
only contend on the prefixes they share.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from dirtwins.domain.tree_models import ROOT_ID, Node

logger = logging.getLogger(__name__)

SEPARATOR = "/"


class PathTree:
    """
    Hierarchical container that owns every Node.

    Directory flag rules, applied under the node's lock:
    - a node starts as a directory;
    - the terminal segment of a path without a trailing slash is demoted to
      a file, unless it already has children or was directory-marked;
    - attaching a child or inserting with a trailing slash promotes it back
      for good.
    The final flag therefore only depends on the set of inserted paths.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = [Node(node_id=ROOT_ID, name="")]
        self._arena_lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    def insert(self, path: str) -> Node:
        """
        Insert one path, creating any missing segment.

        Empty segments from leading or repeated separators are skipped. A
        trailing separator marks the last real segment as a directory.

        Args:
            path: Slash-delimited path string.

        Returns:
            Node: The node of the last real segment (the root if none).
        """
        parts = [p for p in path.split(SEPARATOR) if p]
        current = self.root
        if not parts:
            return current

        for part in parts:
            current = self._get_or_create_child(current, part)

        with current.lock:
            if path.endswith(SEPARATOR):
                current.dir_marked = True
                current.is_directory = True
            elif not current.children and not current.dir_marked:
                current.is_directory = False

        return current

    def insert_many(self, paths: Iterable[str], max_workers: Optional[int] = None) -> int:
        """
        Insert a batch of paths concurrently and wait for all of them.

        Returning from this method is the barrier after which the tree is
        read-only.

        Args:
            paths: Path strings, in any order.
            max_workers: Thread pool size (executor default when None).

        Returns:
            int: Number of paths consumed.
        """
        count = 0
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="IngestWorker") as executor:
            futures = []
            for path in paths:
                futures.append(executor.submit(self.insert, path))
                count += 1
            for future in futures:
                # Surface worker exceptions instead of dropping them
                future.result()

        logger.debug(f"Ingested {count} paths into {len(self)} nodes.")
        return count

    def _get_or_create_child(self, parent: Node, name: str) -> Node:
        with parent.lock:
            child_id = parent.children.get(name)
            if child_id is None:
                child = self._allocate(name, parent.node_id)
                parent.children[name] = child.node_id
                parent.is_directory = True
                return child
        return self.get(child_id)

    def _allocate(self, name: str, parent_id: int) -> Node:
        with self._arena_lock:
            node = Node(node_id=len(self._nodes), name=name, parent_id=parent_id)
            self._nodes.append(node)
        return node

    # -------------------------------------------------------------------------
    # Read-only queries (valid once ingestion has completed)
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Node:
        return self._nodes[ROOT_ID]

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, node_id: int) -> Node:
        """Look up a node by its arena id."""
        return self._nodes[node_id]

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent_id is None:
            return None
        return self.get(node.parent_id)

    def children_of(self, node: Node) -> List[Node]:
        """Children of ``node`` sorted by name."""
        return [self.get(node.children[name]) for name in sorted(node.children)]

    def find(self, path: str) -> Optional[Node]:
        current = self.root
        for part in path.split(SEPARATOR):
            if not part:
                continue
            child_id = current.children.get(part)
            if child_id is None:
                return None
            current = self.get(child_id)
        return current

    def path_of(self, node: Node) -> str:
        """Rebuild the slash-joined path of ``node`` (empty for the root)."""
        parts: List[str] = []
        current: Optional[Node] = node
        while current is not None and not current.is_root:
            parts.append(current.name)
            current = self.parent_of(current)
        return SEPARATOR.join(reversed(parts))

    def is_ancestor(self, ancestor: Node, node: Node) -> bool:
        """True if ``ancestor`` is reachable from ``node`` through parent links."""
        current = self.parent_of(node)
        while current is not None:
            if current.node_id == ancestor.node_id:
                return True
            current = self.parent_of(current)
        return False
