"""
Schema extractor.

Partitions the top-level definitions of a GraphQL document into enum,
object and input definitions. Unions, scalars, interfaces, directives,
schema definitions and extensions are not supported and are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from graphql import (
    DefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    InputObjectTypeDefinitionNode,
    ObjectTypeDefinitionNode,
)

from ...utils import to_pascal_case
from .ir_nodes import EnumDef, FieldDef, InputDef, ObjectDef, SchemaIR
from .type_resolver import resolve_field_type

logger = logging.getLogger(__name__)


def extract_enums(definitions: Sequence[DefinitionNode]) -> tuple[EnumDef, ...]:
    """Extract enum definitions, keeping value declaration order.

    Enums the Elm compiler will reject (no values, or values sharing a
    constructor name) are kept but reported with a warning.
    """
    enums = tuple(
        EnumDef(
            name=definition.name.value,
            values=tuple(value.name.value for value in definition.values or () if isinstance(value, EnumValueDefinitionNode)),
        )
        for definition in definitions
        if isinstance(definition, EnumTypeDefinitionNode)
    )
    for enum_def in enums:
        _check_enum(enum_def)
    return enums


def _check_enum(enum_def: EnumDef) -> None:
    if not enum_def.values:
        logger.warning("Enum %s has no values; the generated Elm will not compile", enum_def.name)
        return

    seen: dict[str, str] = {}
    for value in enum_def.values:
        constructor = to_pascal_case(value)
        if constructor in seen:
            logger.warning(
                "Enum %s values %s and %s both map to constructor %s",
                enum_def.name,
                seen[constructor],
                value,
                constructor,
            )
        else:
            seen[constructor] = value


def extract_objects(definitions: Sequence[DefinitionNode]) -> tuple[ObjectDef, ...]:
    """Extract object type definitions with resolved field types."""
    return tuple(
        ObjectDef(name=definition.name.value, fields=_extract_fields(definition.fields))
        for definition in definitions
        if isinstance(definition, ObjectTypeDefinitionNode)
    )


def extract_inputs(definitions: Sequence[DefinitionNode]) -> tuple[InputDef, ...]:
    """Extract input object definitions with resolved field types."""
    return tuple(
        InputDef(name=definition.name.value, fields=_extract_fields(definition.fields))
        for definition in definitions
        if isinstance(definition, InputObjectTypeDefinitionNode)
    )


def extract_schema(document: DocumentNode) -> SchemaIR:
    """
    Build the IR for a parsed document.

    Args:
        document: The parsed GraphQL document

    Returns:
        SchemaIR with enums, objects and inputs in document order

    Raises:
        MalformedTypeNodeError: If a field has an unsupported type node
    """
    definitions = document.definitions
    ir = SchemaIR(
        enums=extract_enums(definitions),
        objects=extract_objects(definitions),
        inputs=extract_inputs(definitions),
    )

    skipped = len(definitions) - len(ir.enums) - len(ir.objects) - len(ir.inputs)
    if skipped:
        logger.debug("Skipped %d unsupported definition(s)", skipped)

    return ir


def _extract_fields(fields: Iterable | None) -> tuple[FieldDef, ...]:
    return tuple(FieldDef(name=f.name.value, field_type=resolve_field_type(f.type)) for f in fields or ())
