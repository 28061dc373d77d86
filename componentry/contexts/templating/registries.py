"""
Templating Registries

Centralized registry for loading and caching one Jinja2 environment per
component type.
"""

import inspect
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    Undefined,
)

from componentry.contexts.templating.config_resolver import load_settings
from componentry.contexts.templating.exceptions import (
    TemplateEvaluationError,
    TemplateNotFoundError,
)
from componentry.contexts.templating.logger import (
    _log_debug,
    log_handle_created,
    log_missing_search_roots,
)
from componentry.contexts.templating.naming import canonical_path

# Name under which the rendering component is exposed to templates
COMPONENT_VARIABLE = "component"


class TemplateHandle:
    """
    Compiled-template access for one component type.

    A handle owns a Jinja2 environment bound to a fixed snapshot of search
    roots and helper globals. It holds no per-render state: the component and
    its assigns are passed to render() on every call, so one handle can serve
    concurrent renders.
    """

    def __init__(
        self,
        search_paths: Sequence[Path],
        helpers: Mapping[str, Callable] = None,
        template_extensions: Sequence[str] = ("",),
        environment_options: Mapping[str, Any] = None,
    ):
        """
        Initialize the handle.

        Args:
            search_paths: Ordered template directories (first match wins)
            helpers: Callables exposed to every template as globals
            template_extensions: Suffixes appended to a canonical path, in order
            environment_options: Jinja2 options (see defaults.DEFAULT_ENVIRONMENT)
        """
        options = dict(environment_options or {})
        strict = options.pop("strict_undefined", True)

        self.search_paths = tuple(Path(p) for p in search_paths)
        self.template_extensions = tuple(template_extensions) or ("",)
        self.env = Environment(
            loader=FileSystemLoader([str(p) for p in self.search_paths]),
            undefined=StrictUndefined if strict else Undefined,
            **options,
        )
        self.env.globals.update(helpers or {})

    def candidates(self, template_path: str) -> List[str]:
        """
        Get the template file names tried for a canonical path.

        Args:
            template_path: Canonical path (e.g., 'users/details')

        Returns:
            File names relative to the search roots, in lookup order
        """
        return [f"{template_path}{extension}" for extension in self.template_extensions]

    def exists(self, template_path: str) -> bool:
        """Check whether any candidate file exists under the search roots."""
        for name in self.candidates(template_path):
            try:
                self.env.loader.get_source(self.env, name)
            except TemplateNotFound:
                continue
            return True
        return False

    def load(self, template_path: str) -> Template:
        """
        Load (and compile) the template for a canonical path.

        Args:
            template_path: Canonical path (e.g., 'users/details')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFoundError: If no candidate file exists
            TemplateEvaluationError: If the template has Jinja2 syntax errors or cannot be decoded
        """
        candidates = self.candidates(template_path)
        try:
            return self.env.select_template(candidates)
        except TemplateSyntaxError as e:
            raise TemplateEvaluationError(
                f"Syntax error in template '{template_path}'",
                template_path=template_path,
                original_error=e,
            ) from e
        except UnicodeDecodeError as e:
            raise TemplateEvaluationError(
                f"Cannot decode template '{template_path}'",
                template_path=template_path,
                original_error=e,
            ) from e
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                f"Template not found: '{template_path}'",
                template_path=template_path,
                search_paths=self.search_paths,
                tried=candidates,
            ) from e

    def render(self, template_path: str, assigns: Mapping[str, Any], component: Any = None) -> str:
        """
        Load and evaluate the template for a canonical path.

        Args:
            template_path: Canonical path (e.g., 'users/details')
            assigns: Variables exposed to the template
            component: Rendering component, exposed as ``component``

        Returns:
            Rendered text

        Raises:
            TemplateNotFoundError: If no candidate file exists
            TemplateEvaluationError: If loading or evaluating the found template fails
        """
        return self.evaluate(self.load(template_path), template_path, assigns, component)

    def evaluate(
        self,
        template: Template,
        template_path: str,
        assigns: Mapping[str, Any],
        component: Any = None,
    ) -> str:
        """
        Evaluate an already loaded template.

        Every failure raised while the template runs is reported as a
        TemplateEvaluationError, including a TemplateNotFoundError from a
        nested component render or a missing {% include %}: the requested
        template itself was found.

        Raises:
            TemplateEvaluationError: If evaluation fails for any reason
        """
        context = dict(assigns)
        context[COMPONENT_VARIABLE] = component

        try:
            return template.render(context)
        except Exception as e:
            raise TemplateEvaluationError(
                f"Failed to render template '{template_path}'",
                template_path=template_path,
                original_error=e,
            ) from e


def _public_callables(source: Any) -> Dict[str, Callable]:
    """Extract the helper callables a single helpers entry contributes."""
    if isinstance(source, Mapping):
        return dict(source)
    if inspect.isroutine(source):
        return {source.__name__: source}
    return {
        name: member
        for name, member in inspect.getmembers(source, inspect.isroutine)
        if not name.startswith("_")
    }


def collect_helpers(component_type: type) -> Dict[str, Callable]:
    """
    Collect the helper globals declared along a component type's MRO.

    Each class may declare ``helpers = (...)`` holding modules, objects,
    functions or mappings. More specific classes override helpers of the
    same name declared by their ancestors.

    Args:
        component_type: Component class

    Returns:
        Mapping of helper name to callable
    """
    helpers: Dict[str, Callable] = {}
    for cls in reversed(component_type.__mro__):
        for source in cls.__dict__.get("helpers", ()):
            helpers.update(_public_callables(source))
    return helpers


class TemplateRegistry:
    """
    Registry for building and caching template handles per component type.

    Handles are keyed by the exact component class: every instance of a class
    shares its handle, and subclasses build their own.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the template registry.

        Args:
            settings: Settings dict from load_settings(). Loaded from the
                      environment on first use when omitted.
        """
        self._settings = settings
        self._cache: Dict[type, TemplateHandle] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> Dict[str, Any]:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    def handle_for(self, component_type: type) -> TemplateHandle:
        """
        Get the template handle of a component type, building it if necessary.

        Args:
            component_type: Component class (must expose ``view_paths``)

        Returns:
            Shared TemplateHandle for the class
        """
        handle = self._cache.get(component_type)
        if handle is not None:
            return handle

        with self._lock:
            handle = self._cache.get(component_type)
            if handle is None:
                handle = self._build_handle(component_type)
                self._cache[component_type] = handle
        return handle

    def _build_handle(self, component_type: type) -> TemplateHandle:
        search_paths = list(component_type.view_paths)
        helpers = collect_helpers(component_type)
        settings = self.settings

        handle = TemplateHandle(
            search_paths,
            helpers=helpers,
            template_extensions=settings["template_extensions"],
            environment_options=settings["environment"],
        )

        type_name = canonical_path(component_type)
        log_handle_created(type_name, handle.search_paths, helpers.keys())
        if not any(path.is_dir() for path in handle.search_paths):
            log_missing_search_roots(type_name, handle.search_paths)

        return handle

    def clear_cache(self):
        """Clear the handle cache."""
        with self._lock:
            self._cache.clear()
        _log_debug("Template handle cache cleared")

    def is_cached(self, component_type: type) -> bool:
        """
        Check if a component type's handle is in the cache.

        Args:
            component_type: Component class

        Returns:
            True if cached, False otherwise
        """
        return component_type in self._cache


# Process-wide registry used by Component.render()
default_registry = TemplateRegistry()
