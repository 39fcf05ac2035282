import json
import logging
import os
from pathlib import Path

import click

from ..errors import SharpCodeError
from ..utils import to_pascal_case
from .config import JsonToNetConfig
from .source_code import from_json

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SHARP_CODE_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """
    Configure logging for the sharp_code package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults
            to the SHARP_CODE_LOG_LEVEL environment variable, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("sharp_code")
    package_logger.setLevel(log_level)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    package_logger.propagate = False


def collect_input_files(paths: tuple[str, ...]) -> list[Path]:
    """Expand the input paths into the JSON files to process. Unknown paths are reported and skipped."""
    files: list[Path] = []
    for path in map(Path, paths):
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = sorted(child for child in path.iterdir() if child.is_file())
        else:
            click.secho(f"Input argument '{path}' is not a file nor a valid directory and will not be used.", fg="yellow")
            continue
        files.extend(candidate for candidate in candidates if candidate.suffix.lower() == ".json")
    return files


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path())
@click.option("--output", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--namespace", "-n", default=None, type=str)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help=f"Logging level (defaults to ${LOG_LEVEL_ENV} or WARNING)",
)
def json_to_net(inputs, output, namespace, config, log_level):
    """Generate C# data classes from JSON files or directories of JSON files."""
    setup_logging(log_level)

    if config is not None:
        with open(config) as f:
            config = JsonToNetConfig.from_dict(json.load(f))
    else:
        config = JsonToNetConfig()

    # CLI options override the config file
    if namespace is not None:
        config.namespace = namespace
    if output is not None:
        config.output_directory = output

    input_files = collect_input_files(inputs)
    if not input_files:
        raise click.UsageError("Please provide input file(s): json_to_net <file-path | dir-path>...")

    output_directory = Path(config.output_directory)
    click.echo(f"Output directory: {output_directory.resolve()}")

    for input_file in input_files:
        click.echo(f"Processing '{input_file.name}'...")
        try:
            generated = from_json(input_file.stem, input_file.read_text(encoding="utf-8"), config)
        except (SharpCodeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            raise click.ClickException(f"Failed to generate code for '{input_file}': {e}") from e

        output_file = output_directory / f"{to_pascal_case(input_file.stem)}{config.file_extension}"
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(generated, encoding="utf-8")
        logger.info("Wrote %s", output_file)
        click.secho(f"Generated '{output_file.resolve()}'", fg="green")
