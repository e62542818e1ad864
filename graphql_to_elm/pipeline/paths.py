"""
Input discovery and output path resolution.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..utils import to_pascal_case

DEFAULT_SCHEMA_EXTENSIONS = (".graphql", ".gql")


def module_name_for(path: str | Path) -> str:
    """Derive the Elm module name from a schema file name.

    Example:
        "schemas/shop_items.graphql" -> "ShopItems"
    """
    return to_pascal_case(Path(path).stem)


def find_schema_files(folder: str | Path, extensions: Iterable[str] = DEFAULT_SCHEMA_EXTENSIONS) -> list[Path]:
    """List the schema files of a folder, not recursive, sorted by name."""
    suffixes = set(extensions)
    return sorted(p for p in Path(folder).iterdir() if p.is_file() and p.suffix in suffixes)


def resolve_output_path(output: str | Path, module_name: str, extension: str = ".elm") -> Path:
    """
    Resolve where a module is written.

    Args:
        output: A directory or a file path
        module_name: Module name used to auto-name the file
        extension: Extension of auto-named files

    Returns:
        `<output>/<module_name><extension>` when output is an existing
        directory, otherwise output itself
    """
    output = Path(output)
    if output.is_dir():
        return output / f"{module_name}{extension}"
    return output
