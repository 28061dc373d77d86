"""
View Assigns

Projects a component instance's state onto the variables its template sees.

By default every instance attribute is exposed, except the bookkeeping names
listed in ``unassignable`` on the component class or any of its ancestors.
A class that declares ``exposes = ("user", "posts")`` opts into an explicit
allow-list instead.
"""

from typing import Any, Dict, Set


def unassignable_attributes(component: Any) -> Set[str]:
    """
    Collect the attribute names that must never reach a template.

    Args:
        component: Component instance

    Returns:
        Union of ``unassignable`` declared along the class MRO
    """
    names: Set[str] = set()
    for cls in type(component).__mro__:
        names.update(cls.__dict__.get("unassignable", ()))
    return names


def assigns_for_view(component: Any) -> Dict[str, Any]:
    """
    Snapshot the component state exposed to its template.

    Computed fresh on every call so attributes set between two renders of
    the same instance are visible to the second.

    Args:
        component: Component instance

    Returns:
        Mapping of attribute name to value
    """
    state = getattr(component, "__dict__", {})
    reserved = unassignable_attributes(component)
    exposes = getattr(type(component), "exposes", None)

    if exposes is not None:
        return {name: state[name] for name in exposes if name in state and name not in reserved}

    return {name: value for name, value in state.items() if name not in reserved}
