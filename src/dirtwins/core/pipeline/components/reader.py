from __future__ import annotations

"""
Path Source Reader.

Streams path strings, one per line, from a file or stdin. Undecodable bytes
are replaced rather than aborting the run; I/O failures abort it.
"""

import io
import logging
import sys
from typing import Iterator

from dirtwins.infra.fs import STDIN_MARKER

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class PathSourceError(OSError):
    """The path source could not be opened or read."""

    def __init__(self, source: str, reason: BaseException) -> None:
        super().__init__(f"Cannot read paths from '{source}': {reason}")
        self.source = source
        self.reason = reason


def stream_paths(source: str, *, skip_comments: bool = False) -> Iterator[str]:
    """
    Generate path strings from ``source``.

    Line terminators are stripped and blank lines skipped. Everything else,
    including leading or repeated separators, is passed through as-is.

    Args:
        source: File path, or '-' for standard input.
        skip_comments: Drop lines starting with '#'.

    Yields:
        str: One path per non-blank line.

    Raises:
        PathSourceError: If the source cannot be opened or read.
    """
    try:
        if source == STDIN_MARKER:
            logger.debug("Reading paths from stdin.")
            yield from _iter_stdin(skip_comments)
            return

        with open(source, "r", encoding="utf-8", errors="replace") as f:
            yield from _iter_lines(f, skip_comments)
    except OSError as e:
        if isinstance(e, PathSourceError):
            raise
        raise PathSourceError(source, e) from e


def _iter_lines(handle, skip_comments: bool) -> Iterator[str]:
    for line in handle:
        path = line.rstrip("\r\n")
        if not path.strip():
            continue
        if skip_comments and path.lstrip().startswith(COMMENT_PREFIX):
            continue
        yield path


def _iter_stdin(skip_comments: bool) -> Iterator[str]:
    """Read stdin as UTF-8 with replacement, whatever its configured errors."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        # Already a text stream without bytes underneath (e.g. StringIO)
        yield from _iter_lines(sys.stdin, skip_comments)
        return

    wrapper = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
    try:
        yield from _iter_lines(wrapper, skip_comments)
    finally:
        # Leave the process-wide stdin buffer open
        wrapper.detach()
