from __future__ import annotations

"""
Findings Renderer.

Turns analysis results into terminal/file text lines.
"""

from typing import List

from dirtwins.domain.analysis_models import AnalysisResult, Finding


def render_finding(finding: Finding) -> str:
    return (
        f"Similar directories: /{finding.path_a} and /{finding.path_b}, "
        f"similarity: {finding.content_score:.2f}%"
    )


def render_findings(result: AnalysisResult) -> List[str]:
    """
    Render one line per finding followed by a summary line.

    Args:
        result: A successful analysis result.

    Returns:
        List[str]: Printable lines.
    """
    lines = [render_finding(f) for f in result.findings]

    summary = result.summary
    lines.append(
        f"{len(result.findings)} similar pair(s) among "
        f"{summary.get('directories', 0)} directories "
        f"({summary.get('paths', 0)} paths read)."
    )
    return lines
