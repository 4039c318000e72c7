"""Run configuration and persisted listing defaults.

Built-in limits can be overridden through a JSON file in the user config
directory. All access is defensive: malformed or missing config falls back
to the built-in values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .pattern import NamePattern

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEPTH_LIMIT = 20
# Upper bound for a configured depth_limit; traversal recurses once per level.
HARD_DEPTH_LIMIT = 256
MAX_ROOTS = 64
INDENT = "  "


@dataclass(frozen=True)
class Settings:
    """Limits consumed at argument-parse time."""

    default_depth: int = DEPTH_LIMIT
    depth_limit: int = DEPTH_LIMIT
    max_roots: int = MAX_ROOTS


@dataclass(frozen=True)
class TraversalConfig:
    """Immutable per-run traversal options handed to the engine."""

    max_depth: int = DEPTH_LIMIT
    pattern: NamePattern | None = None
    indent: str = INDENT


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object) -> int | None:
    """Accept only true positive integers; booleans and floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def load_settings() -> Settings:
    """Build ``Settings`` from the config file layered over built-ins.

    ``depth_limit`` is clamped to ``HARD_DEPTH_LIMIT`` and ``default_depth``
    to ``depth_limit``, so the default can never exceed the ceiling enforced
    on ``-d``.
    """
    data = load_config()
    depth_limit = min(_positive_int(data.get("depth_limit")) or DEPTH_LIMIT, HARD_DEPTH_LIMIT)
    default_depth = _positive_int(data.get("default_depth")) or depth_limit
    max_roots = _positive_int(data.get("max_roots")) or MAX_ROOTS
    return Settings(
        default_depth=min(default_depth, depth_limit),
        depth_limit=depth_limit,
        max_roots=max_roots,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEPTH_LIMIT",
    "HARD_DEPTH_LIMIT",
    "MAX_ROOTS",
    "INDENT",
    "Settings",
    "TraversalConfig",
    "load_config",
    "load_settings",
]
