from __future__ import annotations

"""
Analysis Domain Data Models.

Result structures handed from the analysis engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Finding:
    """
    A pair of directories judged similar.

    Attributes:
        path_a: Slash-joined path of the first directory (scan order).
        path_b: Slash-joined path of the second directory.
        content_score: Child-name overlap percentage.
        name_score: Name similarity percentage of the two directory names.
    """
    path_a: str
    path_b: str
    content_score: float
    name_score: float = 0.0


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a complete ingestion + analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source: Input source the paths were read from.
        name_threshold: Name gate threshold used.
        content_threshold: Content gate threshold used.
        min_child_count: Substance gate threshold used.
        findings: Ordered findings.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    source: str

    name_threshold: float
    content_threshold: float
    min_child_count: int

    findings: List[Finding] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """Create a failed analysis result from the configuration in use."""
    return AnalysisResult(
        ok=False,
        error=error,
        source=cfg.get("input_path", ""),
        name_threshold=cfg.get("name_threshold", 0.0),
        content_threshold=cfg.get("content_threshold", 0.0),
        min_child_count=cfg.get("min_child_count", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        findings: List[Finding],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """Create a successful analysis result carrying the ordered findings."""
    return AnalysisResult(
        ok=True,
        error="",
        source=cfg.get("input_path", ""),
        name_threshold=cfg["name_threshold"],
        content_threshold=cfg["content_threshold"],
        min_child_count=cfg["min_child_count"],
        findings=list(findings),
        summary=summary_extra or {},
    )
