"""
Pipeline generator.

Runs the phases for one schema document:

1. Parse: GraphQL source text into a DocumentNode (graphql-core)
2. Extract: DocumentNode into SchemaIR
3. Emit: SchemaIR into an Elm module
"""

from __future__ import annotations

import logging

from graphql import DocumentNode, GraphQLSyntaxError, parse

from .analyzer import SchemaIR, extract_schema
from .backends import ElmBackend
from .config import CodeGeneratorConfig
from .errors import SchemaSyntaxError

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates one Elm module from one GraphQL schema.

    Instances hold no state shared with other instances; each input file
    gets its own generator.
    """

    def __init__(
        self,
        module_name: str,
        schema: str | DocumentNode,
        config: CodeGeneratorConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            module_name: Elm module name, used verbatim
            schema: GraphQL SDL source or an already parsed document
            config: Code generation configuration
        """
        self.module_name = module_name
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.backend = ElmBackend()

    def parse(self) -> DocumentNode:
        """Phase 1: parse the schema source, if needed."""
        if isinstance(self.schema, DocumentNode):
            return self.schema
        try:
            return parse(self.schema)
        except GraphQLSyntaxError as e:
            raise SchemaSyntaxError(str(e)) from e

    def analyze(self) -> SchemaIR:
        """Phases 1-2: parse and build the IR."""
        document = self.parse()
        logger.debug("Parsed %d definition(s) for module %s", len(document.definitions), self.module_name)
        ir = extract_schema(document)
        logger.debug(
            "Extracted %d enum(s), %d object(s), %d input(s)",
            len(ir.enums),
            len(ir.objects),
            len(ir.inputs),
        )
        return ir

    def generate(self) -> str:
        """
        Generate the Elm module.

        Returns:
            Generated Elm source

        Raises:
            SchemaSyntaxError: If the source cannot be parsed
            MalformedTypeNodeError: If a field type node is unsupported
        """
        ir = self.analyze()
        return self.backend.write_module(
            self.module_name,
            ir,
            with_utils=self.config.with_utils,
            with_inputs=self.config.with_inputs,
        )


def generate_elm(schema: str | DocumentNode, module_name: str, with_utils: bool = False) -> str:
    """
    Convenience function to generate an Elm module.

    Args:
        schema: GraphQL SDL source or a parsed document
        module_name: Elm module name
        with_utils: Whether to include the decodeString helper

    Returns:
        Generated Elm source
    """
    config = CodeGeneratorConfig(with_utils=with_utils)
    return PipelineGenerator(module_name, schema, config).generate()
