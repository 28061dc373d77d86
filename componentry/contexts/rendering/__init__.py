"""
Rendering Context

Responsibilities:
- Infers the template name of a bare render() call
- Projects component state onto template variables
- Walks the component hierarchy to find the template to render

Owns: Template name inference, view assigns, ancestor fallback
Never: Builds or caches template engines (see the templating context)
"""

from componentry.contexts.rendering.assigns import assigns_for_view, unassignable_attributes
from componentry.contexts.rendering.inference import (
    action,
    current_action,
    infer_name,
    strip_caching_suffix,
)
from componentry.contexts.rendering.resolver import (
    RenderRequest,
    ancestor_chain,
    render_template,
    resolve_template_path,
)

__all__ = [
    # Name inference
    "action",
    "current_action",
    "infer_name",
    "strip_caching_suffix",
    # State projection
    "assigns_for_view",
    "unassignable_attributes",
    # Resolution
    "RenderRequest",
    "ancestor_chain",
    "render_template",
    "resolve_template_path",
]
