from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtwins CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirtwins",
        description=(
            "Rebuild a directory tree from a list of slash-delimited paths "
            "and report pairs of directories that look alike."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="File with one path per line, or '-' for stdin.",
    )
    p.add_argument(
        "--skip-comments",
        action="store_true",
        help="Ignore input lines starting with '#'.",
    )

    # --- Gates ---
    p.add_argument(
        "--name-threshold",
        dest="name_threshold",
        type=float,
        default=None,
        help="Minimum directory name similarity, in percent.",
    )
    p.add_argument(
        "--content-threshold",
        dest="content_threshold",
        type=float,
        default=None,
        help="Minimum overlap of child names, in percent.",
    )
    p.add_argument(
        "--min-children",
        dest="min_child_count",
        type=int,
        default=None,
        help="Minimum number of children both directories must have.",
    )

    # --- Concurrency ---
    p.add_argument(
        "--workers",
        dest="ingest_workers",
        type=int,
        default=None,
        help="Threads used to build the tree.",
    )
    p.add_argument(
        "--analysis-workers",
        dest="analysis_workers",
        type=int,
        default=None,
        help="Threads used for the pairwise comparison.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result as JSON.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Also write the report to this file.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Read settings from this JSON file instead of the saved session.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore saved settings and start from built-in defaults.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the resolved settings as the last session.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Write a rotating log to this file (default location when no file is given).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options the user did not pass map to None and are ignored by the merge.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "name_threshold": args.name_threshold,
        "content_threshold": args.content_threshold,
        "min_child_count": args.min_child_count,
        "ingest_workers": args.ingest_workers,
        "analysis_workers": args.analysis_workers,
        "output_path": args.output_path,
    }

    if args.skip_comments:
        overrides["skip_comments"] = True
    if args.json_output:
        overrides["output_format"] = "json"

    return overrides
