"""
Template Resolution

Finds and evaluates the template a component render refers to.

A bare name (``"details"``) is looked up in the component's own template
directory first, then in each ancestor component's directory, most specific
first. The walk stops at the hierarchy root, the topmost ancestor derived
directly from the root component type. A slash-qualified name
(``"shared/details"``) is taken relative to the component's own directory
and never falls back.

Only a missing template triggers fallback. A template that exists but fails
to evaluate always propagates, whichever ancestor it belongs to.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from componentry.contexts.rendering.assigns import assigns_for_view
from componentry.contexts.rendering.logger import log_fallback, log_rendered
from componentry.contexts.templating.exceptions import TemplateNotFoundError
from componentry.contexts.templating.naming import canonical_path
from componentry.contexts.templating.registries import TemplateRegistry, default_registry


def ancestor_chain(component_type: type, root_type: type) -> List[type]:
    """
    Get the component classes searched for templates, most specific first.

    Args:
        component_type: Class of the rendering component
        root_type: Abstract base of the component hierarchy

    Returns:
        Component subclasses along the MRO, excluding root_type itself.
        Rendering root_type directly searches only root_type.
    """
    chain = [
        cls
        for cls in component_type.__mro__
        if cls is not root_type and isinstance(cls, type) and issubclass(cls, root_type)
    ]
    return chain or [root_type]


@dataclass(frozen=True)
class RenderRequest:
    """
    One render call.

    Attributes:
        component: Rendering component instance
        name: Template name, bare or slash-qualified
        ancestors: Component classes to search, most specific first
    """

    component: Any
    name: str
    ancestors: Tuple[type, ...]

    @classmethod
    def build(cls, component: Any, name: str, root_type: type) -> "RenderRequest":
        """Create a request searching the component's full ancestor chain."""
        return cls(component, name, tuple(ancestor_chain(type(component), root_type)))

    @property
    def is_qualified(self) -> bool:
        return "/" in self.name

    def candidate_paths(self) -> List[str]:
        """
        Get the canonical paths to try, in order.

        Returns:
            A single path for slash-qualified names; one path per ancestor otherwise
        """
        if self.is_qualified:
            return [f"{canonical_path(type(self.component))}/{self.name}"]
        return [f"{canonical_path(ancestor)}/{self.name}" for ancestor in self.ancestors]


def render_template(request: RenderRequest, registry: TemplateRegistry = None) -> str:
    """
    Render the first template found for a request.

    Args:
        request: Render request
        registry: Registry supplying the per-type template handle
                  (defaults to the process-wide registry)

    Returns:
        Rendered text

    Raises:
        TemplateNotFoundError: If the qualified path, or every ancestor path, is missing
        TemplateEvaluationError: If a found template fails to evaluate
    """
    registry = registry or default_registry
    handle = registry.handle_for(type(request.component))
    assigns = assigns_for_view(request.component)

    paths = request.candidate_paths()
    for template_path, next_path in zip(paths, paths[1:]):
        # Only the lookup may fall back; evaluation failures always propagate
        try:
            template = handle.load(template_path)
        except TemplateNotFoundError:
            log_fallback(template_path, next_path)
            continue
        output = handle.evaluate(template, template_path, assigns, request.component)
        log_rendered(template_path, output)
        return output

    # Hierarchy root (or the only qualified path): every failure propagates
    output = handle.render(paths[-1], assigns, request.component)
    log_rendered(paths[-1], output)
    return output


def resolve_template_path(request: RenderRequest, registry: TemplateRegistry = None) -> str:
    """
    Find which canonical path a request would render, without rendering it.

    Args:
        request: Render request
        registry: Registry supplying the per-type template handle

    Returns:
        First existing canonical path

    Raises:
        TemplateNotFoundError: If no candidate path exists
    """
    registry = registry or default_registry
    handle = registry.handle_for(type(request.component))

    paths = request.candidate_paths()
    for template_path in paths:
        if handle.exists(template_path):
            return template_path

    raise TemplateNotFoundError(
        f"Template not found: '{request.name}' (tried {', '.join(paths)})",
        template_path=paths[-1],
        search_paths=handle.search_paths,
        tried=[name for path in paths for name in handle.candidates(path)],
    )
