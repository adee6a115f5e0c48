from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, saved or explicit file, CLI overrides), analysis execution and
report rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirtwins.core.analysis.findings_renderer import render_findings
from dirtwins.core.pipeline.engine import run_analysis
from dirtwins.core.pipeline.stages.validator import validate_config
from dirtwins.domain.analysis_models import AnalysisResult
from dirtwins.domain.config import get_default_config, load_config, save_config
from dirtwins.infra.fs import normalize_path, write_lines
from dirtwins.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from dirtwins.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SOURCE_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 2 if the path source is unreadable, 1 on any
        other failure, 130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    log_file = _resolve_log_file(args.log_file)
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    clean_conf["input_path"] = normalize_path(clean_conf["input_path"], "input.txt")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf, args.config_file)

    logger.info(f"Reading paths from: {clean_conf['input_path']}")
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    lines = _render(result, clean_conf["output_format"])
    for line in lines:
        print(line)

    if clean_conf["output_path"]:
        try:
            write_lines(clean_conf["output_path"], lines)
            logger.info(f"Report saved to file: {clean_conf['output_path']}")
        except OSError as e:
            logger.error(f"Failed to save report to '{clean_conf['output_path']}': {e}")
            return EXIT_FAILURE

    return EXIT_OK


def _resolve_log_file(value: Optional[str]) -> Optional[str]:
    """Map a bare --log-file to the default log path in the user data directory."""
    if value is None:
        return None
    return value or get_default_log_path()


# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are taken over.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render(result: AnalysisResult, output_format: str) -> List[str]:
    if output_format == "json":
        return [json.dumps(asdict(result), ensure_ascii=False, indent=2)]
    return render_findings(result)


if __name__ == "__main__":
    sys.exit(main())
