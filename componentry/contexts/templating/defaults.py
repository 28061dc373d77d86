"""
Default values for component template resolution.

Provides shared defaults used by:
- config_resolver.py (base layer that YAML config files are merged over)
- naming.py / inference.py (naming conventions)
"""

from typing import Any, Dict

# Stripped from class names before they become template directories
COMPONENT_SUFFIX = "Component"

# Stripped from method names generated by output caching wrappers
CACHING_SUFFIX = "_without_caching"

# Tried in order after the bare canonical path; the empty string matches a
# template file whose name already carries its extension
DEFAULT_TEMPLATE_EXTENSIONS = [".jinja", ".html.jinja", ".html", ".txt", ""]

# Jinja2 environment options
DEFAULT_ENVIRONMENT = {
    "autoescape": False,
    "trim_blocks": False,
    "lstrip_blocks": False,
    "keep_trailing_newline": True,
    # Catches silent failures
    "strict_undefined": True,
}


def get_default_settings() -> Dict[str, Any]:
    """
    Get complete default settings structure with all expected fields.

    Returns:
        Dict with view_paths, template_extensions and environment options
    """
    return {
        "view_paths": [],
        "template_extensions": list(DEFAULT_TEMPLATE_EXTENSIONS),
        "environment": DEFAULT_ENVIRONMENT.copy(),
    }
