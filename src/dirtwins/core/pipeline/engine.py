from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete run:
1. Validates configuration.
2. Streams paths from the configured source into a PathTree (parallel).
3. Collects directories in deterministic order.
4. Resolves similar directory pairs.
5. Packages findings and statistics into an AnalysisResult.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from dirtwins.core.analysis.collector import collect_directories
from dirtwins.core.analysis.resolver import SimilarityResolver
from dirtwins.core.pipeline.components.reader import PathSourceError, stream_paths
from dirtwins.core.pipeline.stages.ingest import build_path_tree
from dirtwins.core.pipeline.stages.validator import validate_config
from dirtwins.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_analysis(
        config: Optional[Dict[str, Any]],
        *,
        paths: Optional[Iterable[str]] = None,
) -> AnalysisResult:
    """
    Execute ingestion and similarity analysis.

    Args:
        config: The configuration dictionary (raw or partial).
        paths: Optional in-memory path sequence; bypasses the configured
            input source when given.

    Returns:
        AnalysisResult: Status, ordered findings and statistics.
    """
    logger.info("Analysis started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 1) Ingestion phase
    # -------------------------------------------------------------------------
    if paths is None:
        paths = stream_paths(cfg["input_path"], skip_comments=cfg["skip_comments"])
    else:
        cfg["input_path"] = "<memory>"

    try:
        tree, path_count = build_path_tree(paths, max_workers=cfg["ingest_workers"])
    except PathSourceError as e:
        logger.error(f"Aborting: {e}")
        return create_error_result(str(e), cfg)

    # -------------------------------------------------------------------------
    # 2) Analysis phase (read-only)
    # -------------------------------------------------------------------------
    directories = collect_directories(tree)
    resolver = SimilarityResolver(
        tree,
        name_threshold=cfg["name_threshold"],
        content_threshold=cfg["content_threshold"],
        min_child_count=cfg["min_child_count"],
        workers=cfg["analysis_workers"],
    )
    findings = resolver.resolve(directories)

    summary = {
        "paths": path_count,
        "nodes": len(tree) - 1,
        "directories": len(directories),
        "pairs": resolver.stats.get("pairs", 0),
        "findings": len(findings),
    }
    logger.info(f"Analysis finished: {summary}")
    return create_success_result(cfg, findings, summary_extra=summary)
