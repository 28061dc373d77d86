"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_handle_created(type_name: str, search_paths, helper_names) -> None:
    """Log creation of a per-type template handle."""
    _log_debug(f"Built template handle for {type_name}")
    _log_debug(f"  Search roots: {', '.join(str(p) for p in search_paths) or '(none)'}")
    if helper_names:
        _log_debug(f"  Helpers: {', '.join(sorted(helper_names))}")


def log_missing_search_roots(type_name: str, search_paths) -> None:
    """Warn when none of a type's search roots exist on disk."""
    _log_warning(
        f"None of the search roots for {type_name} exist: "
        f"{', '.join(str(p) for p in search_paths) or '(none)'}"
    )
