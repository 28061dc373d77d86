"""
componentry - Template-rendering components with hierarchical template lookup

A component is a request handler class whose action methods return text
rendered from template files. Templates are found by class name and fall
back through the component's ancestors.

Architecture:
- Templating Context: Canonical paths, per-type Jinja2 handles, configuration
- Rendering Context: Template name inference, view assigns, ancestor fallback
"""

from componentry.base import Component
from componentry.contexts.rendering.inference import action
from componentry.contexts.templating.exceptions import (
    ComponentryError,
    InferenceError,
    TemplateEvaluationError,
    TemplateNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Component",
    "action",
    "ComponentryError",
    "InferenceError",
    "TemplateNotFoundError",
    "TemplateEvaluationError",
]
