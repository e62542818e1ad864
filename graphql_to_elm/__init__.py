"""GraphQL to Elm Generator

A Python package for generating Elm types and Json.Decode decoders
from GraphQL schema definitions.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GeneratorError,
    MalformedTypeNodeError,
    OutputConfig,
    PipelineGenerator,
    generate_elm,
)

__all__ = [
    "PipelineGenerator",
    "generate_elm",
    "CodeGeneratorConfig",
    "OutputConfig",
    "GeneratorError",
    "MalformedTypeNodeError",
    "AtomicWriter",
]
