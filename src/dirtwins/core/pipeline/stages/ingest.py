from __future__ import annotations

"""
Ingestion Stage.

Feeds the path stream into a fresh PathTree through the thread pool and
hands back the tree once every insert has completed.
"""

import logging
import time
from typing import Iterable, Optional, Tuple

from dirtwins.core.analysis.path_tree import PathTree

logger = logging.getLogger(__name__)


def build_path_tree(paths: Iterable[str], max_workers: Optional[int] = None) -> Tuple[PathTree, int]:
    """
    Build a PathTree from ``paths``.

    Errors raised while iterating ``paths`` (e.g. PathSourceError) propagate
    after the pool has drained; no partial tree is returned.

    Args:
        paths: Path strings, possibly a lazy reader.
        max_workers: Number of insert threads.

    Returns:
        Tuple[PathTree, int]: The finalized tree and the number of paths read.
    """
    started = time.perf_counter()
    tree = PathTree()
    count = tree.insert_many(paths, max_workers=max_workers)
    elapsed = time.perf_counter() - started
    logger.info(f"Built tree from {count} paths ({len(tree) - 1} nodes) in {elapsed:.3f}s.")
    return tree, count
