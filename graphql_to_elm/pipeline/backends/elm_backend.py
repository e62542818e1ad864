"""
Elm code generation backend.

Renders Elm type declarations, enum string conversions and Json.Decode
decoders from the IR, and assembles them into one module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from ...utils import to_camel_case, to_pascal_case
from ..analyzer.ir_nodes import EnumDef, FieldDef, InputDef, ObjectDef, SchemaIR

# Section banners, in output order
ENUMS_DEFS_HEADER = "ENUMS DEFINITIONS"
OBJECTS_DEFS_HEADER = "TYPES DEFINITIONS"
INPUTS_DEFS_HEADER = "INPUTS DEFINITIONS"
ENUMS_CONV_HEADER = "ENUMS STRING CONVERSIONS"
ENUMS_DEC_HEADER = "ENUMS DECODERS"
OBJECTS_DEC_HEADER = "TYPES DECODERS"
UTILS_HEADER = "UTILS"

# Top-level declarations are separated by two blank lines
FRAGMENT_SEPARATOR = "\n\n\n"


class ElmBackend:
    """Elm code generation backend."""

    TEMPLATE_LANG = "elm"
    FILE_EXTENSION = "elm"

    # GraphQL scalar -> Elm type; other names pass through unchanged
    TYPE_MAP = {
        "Boolean": "Bool",
    }

    # GraphQL scalar -> Json.Decode primitive
    DECODER_MAP = {
        "Boolean": "Decode.bool",
        "String": "Decode.string",
        "Int": "Decode.int",
        "Float": "Decode.float",
    }

    # Decoders of declared types are named <prefix><TypeName>
    DECODER_PREFIX = "decode"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["pascal_case"] = to_pascal_case
        self.jinja_env.filters["camel_case"] = to_camel_case
        self.jinja_env.filters["elm_type"] = self.translate_type
        self.jinja_env.filters["elm_decoder"] = self.translate_decoder

    def _render(self, template: str, **context: Any) -> str:
        """Render a fragment template without trailing whitespace."""
        return self.jinja_env.get_template(f"{template}.{self.FILE_EXTENSION}.jinja2").render(**context).rstrip()

    def translate_type(self, field: FieldDef) -> str:
        """
        Translate a field to its Elm record field type.

        Lists are never wrapped in Maybe, and their elements are never
        optional: `List T`.

        Args:
            field: The field definition

        Returns:
            Elm type string, e.g. "Maybe String" or "List Color"
        """
        base = self.TYPE_MAP.get(field.type_name, field.type_name)
        if field.is_list:
            return f"List {base}"
        if not field.is_required:
            return f"Maybe {base}"
        return base

    def translate_decoder(self, field: FieldDef) -> str:
        """
        Translate a field to its Elm decoder expression.

        Composition order is nullable, then list, then the base decoder.
        Composite decoders are parenthesized so they can be passed to
        `required`.

        Args:
            field: The field definition

        Returns:
            Elm decoder expression, e.g. "(Decode.list Decode.string)"
        """
        decoder = self.DECODER_MAP.get(field.type_name, f"{self.DECODER_PREFIX}{field.type_name}")
        if field.is_list:
            return f"(Decode.list {decoder})"
        if not field.is_required:
            return f"(Decode.nullable {decoder})"
        return decoder

    def write_enum_type(self, enum_def: EnumDef) -> str:
        """Render the sum type declaration of an enum."""
        return self._render("enum_type", name=enum_def.name, values=enum_def.values)

    def write_enum_str(self, enum_def: EnumDef) -> str:
        """Render the `<enum>ToString` and `<enum>FromString` pair."""
        return self._render("enum_str", name=enum_def.name, values=enum_def.values)

    def write_enum_dec(self, enum_def: EnumDef) -> str:
        """Render the decoder of an enum, built on `<enum>FromString`."""
        return self._render("enum_dec", name=enum_def.name)

    def write_object_type(self, object_def: ObjectDef) -> str:
        """Render the record type alias of an object."""
        return self._render("record_type", name=object_def.name, fields=object_def.fields)

    def write_input_type(self, input_def: InputDef) -> str:
        """Render the record type alias of an input object. No decoder is emitted for inputs."""
        return self._render("record_type", name=input_def.name, fields=input_def.fields)

    def write_object_dec(self, object_def: ObjectDef) -> str:
        """Render the pipeline decoder of an object."""
        return self._render("object_dec", name=object_def.name, fields=object_def.fields)

    def write_utils(self) -> str:
        """Render the `decodeString` helper."""
        return self._render("utils")

    def write_module(
        self,
        module_name: str,
        ir: SchemaIR,
        with_utils: bool = False,
        with_inputs: bool = False,
    ) -> str:
        """
        Assemble the complete Elm module.

        Sections come in a fixed order. A section banner is only written
        when the section has content.

        Args:
            module_name: Name used verbatim in the module header
            ir: The schema IR
            with_utils: Whether to append the UTILS section
            with_inputs: Whether to emit input object type aliases

        Returns:
            The module source, ending with a single newline
        """
        sections = [
            (ENUMS_DEFS_HEADER, [self.write_enum_type(e) for e in ir.enums]),
            (OBJECTS_DEFS_HEADER, [self.write_object_type(o) for o in ir.objects]),
            (INPUTS_DEFS_HEADER, [self.write_input_type(i) for i in ir.inputs] if with_inputs else []),
            (ENUMS_CONV_HEADER, [self.write_enum_str(e) for e in ir.enums]),
            (ENUMS_DEC_HEADER, [self.write_enum_dec(e) for e in ir.enums]),
            (OBJECTS_DEC_HEADER, [self.write_object_dec(o) for o in ir.objects]),
            (UTILS_HEADER, [self.write_utils()] if with_utils else []),
        ]

        rendered = self.jinja_env.get_template(f"module.{self.FILE_EXTENSION}.jinja2").render(
            module_name=module_name,
            sections=[(title, FRAGMENT_SEPARATOR.join(fragments)) for title, fragments in sections if fragments],
        )
        return rendered.rstrip("\n") + "\n"
