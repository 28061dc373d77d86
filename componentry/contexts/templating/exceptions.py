"""Custom exceptions for component template resolution and rendering."""

from pathlib import Path
from typing import List, Optional, Sequence


class ComponentryError(Exception):
    """Base class for every error raised while rendering a component."""


class InferenceError(ComponentryError):
    """
    Exception raised when render() is called without a template name and the
    calling method cannot be determined.

    This is a programming error: call render() from inside a named component
    method, decorate the method with @action, or pass the name explicitly.
    """


class TemplateNotFoundError(ComponentryError):
    """
    Exception raised when no template exists at a resolved canonical path.

    Attributes:
        message: Error description
        template_path: Canonical path that was looked up (e.g., 'users/details')
        search_paths: Search roots that were consulted
        tried: Candidate file names tried under each search root
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[str] = None,
        search_paths: Sequence[Path] = (),
        tried: Sequence[str] = (),
    ):
        self.message = message
        self.template_path = template_path
        self.search_paths: List[Path] = [Path(p) for p in search_paths]
        self.tried: List[str] = list(tried)

        parts = [message]

        if self.search_paths:
            parts.append("Searched: " + ", ".join(str(p) for p in self.search_paths))

        if self.tried:
            parts.append("Tried: " + ", ".join(self.tried))

        super().__init__("\n".join(parts))


class TemplateEvaluationError(ComponentryError):
    """
    Exception raised when a template exists but the engine fails on it.

    Covers syntax errors at load time and failures while rendering (undefined
    variables, missing included templates, filter errors).

    Attributes:
        message: Error description
        template_path: Canonical path of the template being evaluated
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"\nTemplate: {template_path}")

        if original_error:
            lineno = getattr(original_error, "lineno", None)
            location = f" (line {lineno})" if lineno else ""
            parts.append(f"Original error{location}: {original_error}")

        super().__init__("\n".join(parts))
