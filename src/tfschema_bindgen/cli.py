"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from tfschema_bindgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    OutputFormat,
    configure_logging,
    write_placeholder_configuration,
)
from tfschema_bindgen.registry_export import BindgenError, GenerationRequest, generate_bindings


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tfschema-bindgen")
def cli() -> None:
    """Terraform provider schema to serde type bindings generator."""


@cli.command(name="generate")
@click.argument("input_path", required=False, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON generator configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write generated definitions to this file instead of standard output",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([choice.value for choice in OutputFormat], case_sensitive=False),
    help="Output rendering; overrides generator.output_format",
)
@click.option(
    "--module-name",
    "module_name",
    required=False,
    help="Module name recorded in the generated source",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def generate(
    input_path: str | None,
    config_path: str | None,
    output_path: str | None,
    output_format: str | None,
    module_name: str | None,
    verbose: bool,
) -> None:
    """Generate type definitions from a JSON provider schema export (INPUT_PATH)."""
    if input_path is None:
        raise click.UsageError("Missing argument 'INPUT_PATH'.")
    configure_logging(verbose)
    try:
        outcome = generate_bindings(
            GenerationRequest(
                input_path=input_path,
                config_path=config_path,
                output_path=output_path,
                output_format=output_format,
                module_name=module_name,
            )
        )
    except BindgenError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is None:
        click.echo(outcome.source, nl=False)
    else:
        click.echo(str(outcome.output_path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a generator configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="tfbindgen", standalone_mode=False)
    except CliError as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
