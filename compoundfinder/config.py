"""Configuration loader for compoundfinder.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "workers": 0,
    "parallel": True,
    "executor": "process",
    "chunk_size": 1024,
    "separator": "+",
    "equals": "=",
    "output_format": "text",
    "comment_char": None,
    "quiet": False,
    "verbose": False,
}

EXECUTORS = ["process", "thread"]
OUTPUT_FORMATS = ["text", "json"]

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent / "config.json",  # compoundfinder -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                logger.debug("Loaded config from %s", config_path)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def resolve_workers(workers: int) -> int:
    """Turn a configured worker count into a concrete one (0 = all cores)."""
    if workers and workers > 0:
        return workers
    return os.cpu_count() or 1


# Convenience accessors
def default_workers() -> int:
    return get_default("workers", FALLBACK_DEFAULTS["workers"])


def default_parallel() -> bool:
    return get_default("parallel", FALLBACK_DEFAULTS["parallel"])


def default_executor() -> str:
    return get_default("executor", FALLBACK_DEFAULTS["executor"])


def default_chunk_size() -> int:
    return get_default("chunk_size", FALLBACK_DEFAULTS["chunk_size"])


def default_separator() -> str:
    return get_default("separator", FALLBACK_DEFAULTS["separator"])


def default_equals() -> str:
    return get_default("equals", FALLBACK_DEFAULTS["equals"])


def default_output_format() -> str:
    return get_default("output_format", FALLBACK_DEFAULTS["output_format"])


def default_comment_char() -> str | None:
    return get_default("comment_char", FALLBACK_DEFAULTS["comment_char"])
