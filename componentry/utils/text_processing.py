"""
Text processing utilities for naming conventions.
"""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(word: str) -> str:
    """
    Convert a CamelCase word to lower_snake_case.

    Runs of capitals are treated as a single acronym word and dashes become
    underscores.

    Args:
        word: Word to convert

    Returns:
        Lowercased, underscore-separated word

    Example:
        >>> underscore("UserProfile")
        'user_profile'
        >>> underscore("HTMLWidget")
        'html_widget'
    """
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def strip_suffix(text: str, suffix: str) -> str:
    """
    Remove a case-sensitive suffix from text.

    The text is returned unchanged when it does not end with the suffix, or
    when removing it would leave nothing behind.

    Example:
        >>> strip_suffix("UsersComponent", "Component")
        'Users'
        >>> strip_suffix("Component", "Component")
        'Component'
    """
    if suffix and text.endswith(suffix) and len(text) > len(suffix):
        return text[: -len(suffix)]
    return text
