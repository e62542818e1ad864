"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        validate_before_write: Whether to check the module header before writing
        atomic_write: Whether to use atomic file writes
    """

    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Append the decodeString helper used by enum decoders
    with_utils: bool = False

    # Emit record aliases for input object definitions
    with_inputs: bool = False

    # Extensions picked up when the input is a folder
    schema_extensions: list[str] = field(default_factory=lambda: [".graphql", ".gql"])

    # Extension of auto-named output files
    output_extension: str = ".elm"

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "schema_extensions":
                # A single extension may be given as a plain string
                config.schema_extensions = [v] if isinstance(v, str) else list(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "with_utils": self.with_utils,
            "with_inputs": self.with_inputs,
            "schema_extensions": list(self.schema_extensions),
            "output_extension": self.output_extension,
            "output": {
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
