import json
import logging
import sys
from pathlib import Path

import click

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GeneratorError,
    PipelineGenerator,
    SchemaReadError,
    find_schema_files,
    module_name_for,
    resolve_output_path,
)

logger = logging.getLogger(__name__)


def run(path: Path, output: Path | None, config: CodeGeneratorConfig) -> None:
    """Convert one schema file, printing the result or writing it to output."""
    module_name = module_name_for(path)
    logger.debug("Converting %s as module %s", path, module_name)

    try:
        schema = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(f"Cannot read schema: {e}") from e

    out = PipelineGenerator(module_name, schema, config).generate()

    if output is None:
        click.echo(out, nl=False)
        return

    dest = resolve_output_path(output, module_name, config.output_extension)
    AtomicWriter().write(
        dest,
        out,
        validate=config.output.validate_before_write,
        atomic=config.output.atomic_write,
    )
    click.echo(f"Output: {dest}")


@click.command()
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(resolve_path=True, path_type=Path),
    help="File or folder. If folder, the output file is named after the module. Defaults to stdout.",
)
@click.option("--with-utils", is_flag=True, default=False, help="Include the utils functions in the results.")
@click.option("--with-inputs", is_flag=True, default=False, help="Include record aliases for input types.")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True, path_type=Path))
def graphql_to_elm(output, with_utils, with_inputs, config, verbose, path):
    """Generate Elm types and decoders from a GraphQL schema.

    PATH is a schema file or a folder. If a folder, all its .graphql and
    .gql files are converted (not recursive).
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if with_utils:
        config.with_utils = True
    if with_inputs:
        config.with_inputs = True

    inputs = find_schema_files(path, config.schema_extensions) if path.is_dir() else [path]

    failed = 0
    for input_path in inputs:
        try:
            run(input_path, output, config)
        except GeneratorError as e:
            failed += 1
            logger.debug("Conversion of %s failed", input_path, exc_info=True)
            click.echo(f"Error: {input_path.name}: {e}", err=True)

    if failed:
        sys.exit(1)
