"""
Templating Context

Responsibilities:
- Derives canonical template paths from component class names
- Loads and caches one Jinja2 environment per component type
- Evaluates templates and classifies engine failures
- Resolves configuration (search roots, extensions, environment options)

Owns: Template lookup, engine handles, template error taxonomy
Never: Decides which ancestor's template a component renders
"""

from componentry.contexts.templating.config_resolver import load_settings
from componentry.contexts.templating.exceptions import (
    ComponentryError,
    InferenceError,
    TemplateEvaluationError,
    TemplateNotFoundError,
)
from componentry.contexts.templating.naming import canonical_path
from componentry.contexts.templating.registries import (
    TemplateHandle,
    TemplateRegistry,
    default_registry,
)

__all__ = [
    # Naming
    "canonical_path",
    # Engine handles and caching
    "TemplateHandle",
    "TemplateRegistry",
    "default_registry",
    # Configuration
    "load_settings",
    # Errors
    "ComponentryError",
    "InferenceError",
    "TemplateNotFoundError",
    "TemplateEvaluationError",
]
