"""
Exceptions raised by the generator pipeline.
"""

from __future__ import annotations

from typing import Any


class GeneratorError(Exception):
    """Base exception for all conversion errors.

    Raised errors abort the conversion of the current schema file only.
    """

    pass


class MalformedTypeNodeError(GeneratorError):
    """Raised when a field type node is not a named, non-null or list node.

    Also raised for lists nested inside lists, which the generator does not
    model.
    """

    def __init__(self, node: Any, reason: str = "unexpected field"):
        self.node = node
        self.reason = reason
        kind = getattr(node, "kind", type(node).__name__)
        super().__init__(f"{reason}: {kind} ({node!r})")


class SchemaSyntaxError(GeneratorError):
    """Raised when the GraphQL source cannot be parsed."""

    pass


class OutputWriteError(GeneratorError):
    """Raised when generated content is rejected before being written."""

    pass


class SchemaReadError(GeneratorError):
    """Raised when a schema file cannot be read or is not valid UTF-8."""

    pass
