"""
Component Naming

Derives the canonical template directory of a component class from its
declared name: the ``Component`` suffix is dropped and the remainder is
converted to snake_case (``UserProfileComponent`` -> ``user_profile``).
"""

from componentry.contexts.templating.defaults import COMPONENT_SUFFIX
from componentry.utils.text_processing import strip_suffix, underscore

# Stored on each class's own __dict__ so subclasses never inherit it
_CANONICAL_PATH_ATTR = "_component_name"


def canonical_path(component_type: type) -> str:
    """
    Get the canonical template path of a component type.

    Computed once per class and memoized on the class itself; renaming the
    class afterwards does not change the result.

    Args:
        component_type: Component class

    Returns:
        Slash-free, lower_snake_case path segment (e.g., 'users')
    """
    cached = component_type.__dict__.get(_CANONICAL_PATH_ATTR)
    if cached is not None:
        return cached

    name = underscore(strip_suffix(component_type.__name__, COMPONENT_SUFFIX))
    setattr(component_type, _CANONICAL_PATH_ATTR, name)
    return name
