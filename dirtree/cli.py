"""Command-line front door for dirtree.

Parses options into an immutable ``TraversalConfig``, validates the filter
pattern, then streams the listing of every requested root to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import Settings, TraversalConfig, load_settings
from .pattern import PatternSyntaxError, compile_pattern
from .traversal import traverse_roots

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "."


def _depth_value(depth_limit: int):
    """Build an argparse type accepting integers in ``1..depth_limit``."""

    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid depth value {value!r}") from exc
        if parsed < 1 or parsed > depth_limit:
            raise argparse.ArgumentTypeError(
                f"invalid depth value {value!r}, must be between 1 and {depth_limit}"
            )
        return parsed

    return parse


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=(
            "Recursively traverse directory tree and list all entries. "
            "If no path is given, the current directory is analyzed."
        ),
    )
    parser.add_argument(
        "-d",
        dest="depth",
        metavar="depth",
        type=_depth_value(settings.depth_limit),
        default=settings.default_depth,
        help=f"set maximum depth of directory traversal (1-{settings.depth_limit})",
    )
    parser.add_argument(
        "-f",
        dest="pattern",
        metavar="pattern",
        default=None,
        help="filter entries using pattern (supports '?', '*', and '()')",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help=f"list of space-separated paths (max {settings.max_roots}). Default is the current directory.",
    )
    return parser


def _configure_logging() -> None:
    """Route warnings and per-entry errors to stderr."""
    root_logger = logging.getLogger("dirtree")
    if root_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("dirtree: %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)


def select_roots(paths: Sequence[str], max_roots: int) -> list[str]:
    """Keep at most ``max_roots`` paths, warning about each ignored one."""
    if not paths:
        return [DEFAULT_ROOT]
    roots = list(paths[:max_roots])
    for ignored in paths[max_roots:]:
        logger.warning("maximum number of directories exceeded, ignoring '%s'.", ignored)
    return roots


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and list every requested root.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    Usage errors exit with status 2 via argparse, an invalid pattern or
    memory exhaustion exits with status 1.
    """
    _configure_logging()
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    pattern = None
    if args.pattern is not None:
        try:
            pattern = compile_pattern(args.pattern)
        except PatternSyntaxError as exc:
            raise SystemExit(f"Invalid pattern syntax: {exc}") from exc

    config = TraversalConfig(max_depth=args.depth, pattern=pattern)
    roots = select_roots(args.paths, settings.max_roots)
    try:
        traverse_roots(roots, config, sys.stdout)
    except MemoryError as exc:
        sys.stdout.flush()
        raise SystemExit("Memory allocation failed") from exc


if __name__ == "__main__":
    main()
