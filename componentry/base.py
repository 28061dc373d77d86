"""
Component base class.

A component is a small request handler whose action methods return text
rendered from template files. Templates live under the component's search
roots in a directory named after the class:

    class UsersComponent(Component):
        def details(self, user_id):
            self.user = find_user(user_id)
            return self.render()

renders ``users/details`` (e.g., ``app/components/users/details.jinja``)
with ``user`` available to the template. When ``users/details`` does not
exist, the parent component's directory is tried next, up to the hierarchy
root.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from componentry.contexts.rendering.assigns import assigns_for_view
from componentry.contexts.rendering.inference import caller_frame, current_action, infer_name
from componentry.contexts.rendering.resolver import (
    RenderRequest,
    render_template,
    resolve_template_path,
)
from componentry.contexts.templating.config_resolver import default_view_paths
from componentry.contexts.templating.naming import canonical_path
from componentry.contexts.templating.registries import TemplateRegistry, default_registry

_VIEW_PATHS_ATTR = "_view_paths"


class ComponentMeta(type):
    """
    Metaclass providing per-class ``view_paths`` and ``component_name``.

    A class body may declare ``view_paths = [...]`` to fix its own search
    roots; otherwise they are copied from the parent class the first time
    they are read.
    """

    def __new__(mcs, name, bases, namespace, **kwargs):
        declared = namespace.pop("view_paths", None)
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        if declared is not None:
            setattr(cls, _VIEW_PATHS_ATTR, [Path(p) for p in declared])
        return cls

    @property
    def view_paths(cls) -> List[Path]:
        """
        The directories to search for this component's templates.

        Typically this is only ``app/components``, but a plugin that ships
        components may append its own directory before the first render.
        Every read returns the same list object.
        """
        paths = cls.__dict__.get(_VIEW_PATHS_ATTR)
        if paths is None:
            parent = next((base for base in cls.__bases__ if isinstance(base, ComponentMeta)), None)
            paths = list(parent.view_paths) if parent is not None else default_view_paths()
            setattr(cls, _VIEW_PATHS_ATTR, paths)
        return paths

    @property
    def component_name(cls) -> str:
        return canonical_path(cls)


class Component(metaclass=ComponentMeta):
    """
    Base class of all components.

    Class attributes subclasses may override:
        helpers: Modules, objects, functions or mappings whose public callables
                 become template globals (accumulated over the MRO)
        exposes: Explicit tuple of attribute names exposed to templates;
                 None exposes every attribute not listed in ``unassignable``
        unassignable: Attribute names never exposed to templates
                      (accumulated over the MRO)
        template_registry: Registry caching this class's template handle
    """

    helpers = ()
    exposes: Optional[tuple] = None
    unassignable = ("form_authenticity_token",)
    template_registry: TemplateRegistry = default_registry

    # Set by the request-forgery collaborator; never reaches templates
    form_authenticity_token: Optional[str] = None

    @property
    def logger(self):
        return logger.bind(component=type(self).component_name)

    @property
    def assigns_for_view(self) -> Dict[str, Any]:
        """Variables the next render() will expose to the template."""
        return assigns_for_view(self)

    def render(self, name: str = None) -> str:
        """
        Render a template and return the result.

        Every instance attribute set by the action is available in the
        template, along with ``component`` (this instance) and the helpers
        of the class.

        Inferred template name:
            Without a name, render() uses the running @action's name, or else
            the name of the method that called it. A bare name is searched in
            this component's directory, then in each parent component's.

        Args:
            name: Template name ('details') or path relative to this
                  component's directory ('shared/details')

        Returns:
            Rendered text

        Raises:
            InferenceError: If no name is given and none can be inferred
            TemplateNotFoundError: If no template exists in the search scope
            TemplateEvaluationError: If the template fails to evaluate
        """
        if name is None:
            name = self._infer_template_name()
        request = RenderRequest.build(self, name, Component)
        return render_template(request, type(self).template_registry)

    def template_path_for(self, name: str) -> str:
        """
        Get the canonical path render(name) would evaluate, without rendering.

        Raises:
            TemplateNotFoundError: If no template exists in the search scope
        """
        request = RenderRequest.build(self, name, Component)
        return resolve_template_path(request, type(self).template_registry)

    def _infer_template_name(self) -> str:
        name = current_action(self)
        if name is not None:
            return name

        # Two frames up: past this method and render()
        frame = caller_frame(2)
        try:
            return infer_name(frame)
        finally:
            del frame
