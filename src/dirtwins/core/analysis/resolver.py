from __future__ import annotations

"""
Similarity Resolver.

Scans every unordered pair of collected directories and keeps the pairs
that pass five gates, in order:

1. ancestor exclusion: a directory is never compared with its own
   ancestor or descendant;
2. name gate: name similarity >= name_threshold;
3. content gate: child-name overlap >= content_threshold;
4. substance gate: both directories hold at least min_child_count children;
5. parent conflict: when both directories sit under distinct, unrelated,
   non-root parents whose names are themselves similar, the match is
   already implied one level up and is suppressed.

Findings come out in (i, j) scan order of the input list.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

from dirtwins.core.analysis.path_tree import PathTree
from dirtwins.core.analysis.similarity import content_similarity, name_similarity
from dirtwins.domain.analysis_models import Finding
from dirtwins.domain.tree_models import Node

logger = logging.getLogger(__name__)

# (i, j, finding); the indices restore scan order after parallel scoring
_Ranked = Tuple[int, int, Finding]


class SimilarityResolver:
    """
    Pairwise comparison engine over a read-only PathTree.

    Args:
        tree: The ingested tree the directory nodes belong to.
        name_threshold: Minimum name similarity percentage.
        content_threshold: Minimum child-name overlap percentage.
        min_child_count: Minimum number of immediate children on both sides.
        workers: Number of threads scoring rows of the pair matrix.
    """

    def __init__(
            self,
            tree: PathTree,
            name_threshold: float,
            content_threshold: float,
            min_child_count: int,
            workers: int = 1,
    ) -> None:
        self.tree = tree
        self.name_threshold = float(name_threshold)
        self.content_threshold = float(content_threshold)
        self.min_child_count = int(min_child_count)
        self.workers = max(1, int(workers))

        self._parent_scores: Dict[Tuple[str, str], float] = {}
        self._cache_lock = threading.Lock()
        self.stats: Dict[str, int] = {}

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def resolve(self, directories: Sequence[Node]) -> List[Finding]:
        """
        Evaluate every pair ``(i, j)`` with ``i < j`` and return the findings.

        Args:
            directories: Directory nodes in collector order.

        Returns:
            List[Finding]: Findings in scan order.
        """
        dirs = list(directories)
        child_sets = [node.child_names for node in dirs]
        self.stats = {"directories": len(dirs), "pairs": len(dirs) * (len(dirs) - 1) // 2}

        logger.info(
            f"Comparing {len(dirs)} directories ({self.stats['pairs']} pairs) "
            f"with {self.workers} worker(s)."
        )

        if self.workers == 1 or len(dirs) < 2:
            ranked = []
            for i in range(len(dirs)):
                ranked.extend(self._scan_row(i, dirs, child_sets))
        else:
            ranked = self._scan_parallel(dirs, child_sets)

        ranked.sort(key=lambda item: (item[0], item[1]))
        findings = [finding for _, _, finding in ranked]
        self.stats["findings"] = len(findings)
        logger.info(f"Similarity scan produced {len(findings)} finding(s).")
        return findings

    def compare(self, a: Node, b: Node) -> Optional[Finding]:
        """Run the five gates on a single pair; None if any gate fails."""
        return self._evaluate(a, b, a.child_names, b.child_names)

    # -------------------------------------------------------------------------
    # PAIR SCANNING
    # -------------------------------------------------------------------------

    def _scan_parallel(self, dirs: List[Node], child_sets: List[frozenset]) -> List[_Ranked]:
        ranked: List[_Ranked] = []
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="ResolverWorker") as executor:
            futures = [executor.submit(self._scan_row, i, dirs, child_sets) for i in range(len(dirs))]
            for future in futures:
                ranked.extend(future.result())
        return ranked

    def _scan_row(self, i: int, dirs: List[Node], child_sets: List[frozenset]) -> List[_Ranked]:
        row: List[_Ranked] = []
        for j in range(i + 1, len(dirs)):
            finding = self._evaluate(dirs[i], dirs[j], child_sets[i], child_sets[j])
            if finding is not None:
                row.append((i, j, finding))
        return row

    def _evaluate(self, a: Node, b: Node, children_a: frozenset, children_b: frozenset) -> Optional[Finding]:
        if self.tree.is_ancestor(a, b) or self.tree.is_ancestor(b, a):
            return None

        name_score = name_similarity(a.name, b.name)
        if name_score < self.name_threshold:
            return None

        content_score = content_similarity(children_a, children_b)
        if content_score < self.content_threshold:
            return None

        if min(len(children_a), len(children_b)) < self.min_child_count:
            return None

        if self._parents_conflict(a, b):
            logger.debug(
                f"Suppressed {self.tree.path_of(a)} ~ {self.tree.path_of(b)}: "
                f"parents already match by name."
            )
            return None

        return Finding(
            path_a=self.tree.path_of(a),
            path_b=self.tree.path_of(b),
            content_score=content_score,
            name_score=name_score,
        )

    # -------------------------------------------------------------------------
    # PARENT CONFLICT
    # -------------------------------------------------------------------------

    def _parents_conflict(self, a: Node, b: Node) -> bool:
        parent_a = self.tree.parent_of(a)
        parent_b = self.tree.parent_of(b)
        if not _is_real(parent_a) or not _is_real(parent_b):
            return False
        # Siblings: there is no separate parent-level pair to defer to
        if parent_a.node_id == parent_b.node_id:
            return False
        if self.tree.is_ancestor(parent_a, parent_b) or self.tree.is_ancestor(parent_b, parent_a):
            return False
        return self._parent_name_score(parent_a.name, parent_b.name) >= self.name_threshold

    def _parent_name_score(self, a: str, b: str) -> float:
        key = (a, b) if a <= b else (b, a)
        with self._cache_lock:
            cached = self._parent_scores.get(key)
        if cached is not None:
            return cached
        score = name_similarity(a, b)
        with self._cache_lock:
            self._parent_scores[key] = score
        return score


def _is_real(node: Optional[Node]) -> bool:
    return node is not None and not node.is_root and node.name != ""
