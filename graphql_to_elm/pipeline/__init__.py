"""
Pipeline - GraphQL schema to Elm generator.

1. Phase 1 (Parser): Parse GraphQL SDL with graphql-core
2. Phase 2 (Analyzer): Resolve field types and build the IR
3. Phase 3 (Backend): Render Elm fragments and assemble the module
4. Phase 4 (Writer): Optional atomic write to disk
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig
from .errors import GeneratorError, MalformedTypeNodeError, OutputWriteError, SchemaReadError, SchemaSyntaxError
from .generator import PipelineGenerator, generate_elm
from .paths import find_schema_files, module_name_for, resolve_output_path
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "generate_elm",
    "CodeGeneratorConfig",
    "OutputConfig",
    "GeneratorError",
    "MalformedTypeNodeError",
    "SchemaSyntaxError",
    "SchemaReadError",
    "OutputWriteError",
    "AtomicWriter",
    "find_schema_files",
    "module_name_for",
    "resolve_output_path",
]
