"""
Analyzer module.

Contains type resolution and IR building.
"""

from __future__ import annotations

from .extractor import extract_enums, extract_inputs, extract_objects, extract_schema
from .ir_nodes import EnumDef, FieldDef, FieldType, InputDef, ObjectDef, SchemaIR
from .type_resolver import resolve_field_type

__all__ = [
    "EnumDef",
    "FieldDef",
    "FieldType",
    "InputDef",
    "ObjectDef",
    "SchemaIR",
    "extract_enums",
    "extract_inputs",
    "extract_objects",
    "extract_schema",
    "resolve_field_type",
]
