"""
Field type resolution.

Reduces a GraphQL type node (named, non-null wrapper, list wrapper) to a
FieldType triple.
"""

from __future__ import annotations

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from ..errors import MalformedTypeNodeError
from .ir_nodes import FieldType


def resolve_field_type(type_node: TypeNode) -> FieldType:
    """
    Resolve a field's type node into a FieldType.

    Required-ness is read from the named type's own non-null marker:
    `[String!]` is a list of required strings, `[String]!` is a list of
    optional ones. Both are emitted as `List String`.

    Args:
        type_node: The type node of a field or input value definition

    Returns:
        The resolved FieldType

    Raises:
        MalformedTypeNodeError: If the node is not a named, non-null or
            list node, or if lists are nested
    """
    return _resolve(type_node, is_list=False, is_non_null=False)


def _resolve(type_node: TypeNode, is_list: bool, is_non_null: bool) -> FieldType:
    if isinstance(type_node, NamedTypeNode):
        return FieldType(
            type_name=type_node.name.value,
            is_required=is_non_null,
            is_list=is_list,
        )

    if isinstance(type_node, NonNullTypeNode):
        return _resolve(type_node.type, is_list=is_list, is_non_null=True)

    if isinstance(type_node, ListTypeNode):
        if is_list:
            raise MalformedTypeNodeError(type_node, "nested list types are not supported")
        return _resolve(type_node.type, is_list=True, is_non_null=False)

    raise MalformedTypeNodeError(type_node)
