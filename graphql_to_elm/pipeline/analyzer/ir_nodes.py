"""
IR (Intermediate Representation) node definitions.

These nodes hold the normalized view of a GraphQL document, ready for
code generation. Names keep their schema casing; conversion to Elm
identifiers happens at emission time.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldType:
    """A resolved field type.

    `is_required` is ignored when `is_list` is set: list fields are always
    emitted as plain `List T`.
    """

    type_name: str
    is_required: bool = False
    is_list: bool = False


@dataclass(frozen=True)
class FieldDef:
    """A field of an object or input definition."""

    name: str  # Schema-case field name
    field_type: FieldType

    @property
    def type_name(self) -> str:
        return self.field_type.type_name

    @property
    def is_required(self) -> bool:
        return self.field_type.is_required

    @property
    def is_list(self) -> bool:
        return self.field_type.is_list


@dataclass(frozen=True)
class EnumDef:
    """An enum definition with its values in declaration order."""

    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class ObjectDef:
    """An object type definition."""

    name: str
    fields: tuple[FieldDef, ...] = ()


@dataclass(frozen=True)
class InputDef:
    """An input object definition. Same shape as ObjectDef."""

    name: str
    fields: tuple[FieldDef, ...] = ()


@dataclass(frozen=True)
class SchemaIR:
    """The complete Intermediate Representation of one schema document."""

    enums: tuple[EnumDef, ...] = field(default_factory=tuple)
    objects: tuple[ObjectDef, ...] = field(default_factory=tuple)
    inputs: tuple[InputDef, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        """Check if the document declared nothing the generator handles."""
        return not (self.enums or self.objects or self.inputs)
