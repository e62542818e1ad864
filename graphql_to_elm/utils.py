"""
Utility functions for the GraphQL to Elm generator.
"""

import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def to_pascal_case(text: str) -> str:
    """Convert snake_case, SCREAMING_CASE, camelCase or space-separated text to PascalCase.

    Used for type names, enum member constructors and module names.

    Examples:
        "dog_cat" -> "DogCat"
        "RED" -> "Red"
        "DARK_RED" -> "DarkRed"
        "FooBar" -> "FooBar"
        "foo__bar" -> "FooBar"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text))


def to_camel_case(text: str) -> str:
    """Convert text to lowerCamelCase.

    Used for value-level identifiers: record fields and function names.

    Examples:
        "dog_cat" -> "dogCat"
        "Color" -> "color"
        "firstName" -> "firstName"
        "HTTPServer" -> "httpServer"

    Args:
        text: The text to convert

    Returns:
        lowerCamelCase string
    """
    words = _split_into_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])
