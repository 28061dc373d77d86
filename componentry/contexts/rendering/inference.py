"""
Template Name Inference

Works out which template a bare ``render()`` call means. Two sources are
consulted, in order:

1. The innermost ``@action``-decorated method running on the same component
   (tracked per thread/task with a ContextVar).
2. The name of the method that called ``render()``, read from the call stack.

Names produced by output caching wrappers (``details_without_caching``) are
mapped back to the wrapped action (``details``).
"""

import functools
import inspect
from contextvars import ContextVar
from types import FrameType
from typing import Any, Callable, Optional, Tuple

from componentry.contexts.templating.defaults import CACHING_SUFFIX
from componentry.contexts.templating.exceptions import InferenceError
from componentry.utils.text_processing import strip_suffix

# (component instance, action name) of the innermost running action
_current_action: ContextVar[Optional[Tuple[Any, str]]] = ContextVar(
    "componentry_current_action", default=None
)


def strip_caching_suffix(name: str) -> str:
    """
    Recover an action name from a caching wrapper's method name.

    Example:
        >>> strip_caching_suffix("details_without_caching")
        'details'
        >>> strip_caching_suffix("details")
        'details'
    """
    return strip_suffix(name, CACHING_SUFFIX)


def action(method: Callable) -> Callable:
    """
    Mark a component method as an action whose name is its template name.

    While the method runs, a bare ``self.render()`` on the same component
    renders the template named after the method, even when render() is
    reached through undecorated helper methods.

    Example:
        class UsersComponent(Component):
            @action
            def details(self, user_id):
                self.user = find_user(user_id)
                return self.render()
    """
    name = strip_caching_suffix(method.__name__)

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        token = _current_action.set((self, name))
        try:
            return method(self, *args, **kwargs)
        finally:
            _current_action.reset(token)

    wrapper.action_name = name
    return wrapper


def current_action(component: Any) -> Optional[str]:
    """
    Get the name of the action currently running on a component.

    Args:
        component: Component instance

    Returns:
        Action name, or None when no @action of this component is running
    """
    running = _current_action.get()
    if running is None or running[0] is not component:
        return None
    return running[1]


def caller_frame(depth: int = 1) -> Optional[FrameType]:
    """
    Get the frame ``depth`` levels above the function calling this one.

    Returns:
        The frame, or None when the interpreter does not expose frames or the
        stack is not that deep
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        return frame
    finally:
        del frame


def infer_name(frame: Optional[FrameType]) -> str:
    """
    Infer a template name from the frame of the method that called render().

    Args:
        frame: Caller frame, as returned by caller_frame()

    Returns:
        The caller's function name, minus any caching wrapper suffix

    Raises:
        InferenceError: If there is no frame or the caller is not a named function
    """
    if frame is None:
        raise InferenceError(
            "Cannot infer template name: no caller frame available. "
            "Pass the template name to render() explicitly."
        )

    name = frame.f_code.co_name
    if name.startswith("<"):
        raise InferenceError(
            f"Cannot infer template name from caller {name!r}. "
            "Call render() from a named component method or pass the template name."
        )

    return strip_caching_suffix(name)
