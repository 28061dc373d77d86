"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from componentry.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, component: str = None, console_level: str = "INFO") -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        component: Component being rendered, recorded in the provenance header
        console_level: Minimum level written to the console

    Returns:
        Path to log file
    """
    extra = {"Component": component} if component else None
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance=extra,
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_fallback(template_path: str, next_path: str) -> None:
    """Log a fallback from one ancestor's template directory to the next."""
    _log_debug(f"No template at {template_path}, trying {next_path}")


def log_rendered(template_path: str, output: str) -> None:
    """Log a successful render."""
    _log_debug(f"Rendered {template_path} ({len(output)} chars)")
