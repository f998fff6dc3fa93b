"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from gql_smoke_tester.configuration import (
    ConfigurationError,
    GenerationSettings,
    build_generation_settings,
    load_settings_file,
    write_placeholder_settings,
)
from gql_smoke_tester.introspection_request import (
    DEFAULT_ENDPOINT_URL,
    build_request_encodings,
    render_request_encodings,
)
from gql_smoke_tester.results_writing import write_operation_listing
from gql_smoke_tester.run_execution import (
    GenerationError,
    GenerationRequest,
    generate_smoke_operations,
)

BANNER = """
█████▀███████████████████████████████████████████
█─▄▄▄▄█─▄▄▄─█▄─▄███▄─▄▄─██▀▄─██▄─▄▄▀█─▄▄▄▄█▄─▄▄─█
█─██▄─█─██▀─██─██▀██─▄▄▄██─▀─███─▄─▄█▄▄▄▄─██─▄█▀█
▀▄▄▄▄▄▀───▄▄▀▄▄▄▄▄▀▄▄▄▀▀▀▄▄▀▄▄▀▄▄▀▄▄▀▄▄▄▄▄▀▄▄▄▄▄▀
"""

MISSING_INPUT_MESSAGE = "Please supply an introspection file with the -i/--input option."


class CliError(Exception):
    """Custom CLI error."""


@click.command(
    name="gql-smoke-tester",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="\b" + BANNER + "\n\nGenerate one smoke-test operation per root field of an "
    "introspected GraphQL schema.",
)
@click.version_option(package_name="gql-smoke-tester")
@click.option(
    "-i",
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="JSON file with the GraphQL introspection schema",
)
@click.option(
    "-m",
    "--mutations",
    "include_mutations",
    is_flag=True,
    default=False,
    help="Include mutations in generation",
)
@click.option(
    "--intro",
    "print_introspection_request",
    is_flag=True,
    default=False,
    help="Print GraphQL introspection query in multiple formats and exit",
)
@click.option(
    "--url",
    "endpoint_url",
    required=False,
    help=f"GraphQL endpoint URL for the --intro curl example  [default: {DEFAULT_ENDPOINT_URL}]",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML settings file providing defaults for these options",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the operations to this file instead of standard output",
)
@click.option(
    "--write-config",
    "write_config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write a placeholder settings file to this path and exit",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    input_path: str | None,
    include_mutations: bool,
    print_introspection_request: bool,
    endpoint_url: str | None,
    config_path: str | None,
    output_path: str | None,
    write_config_path: str | None,
    verbose: bool,
) -> None:
    _configure_logging(verbose)

    if write_config_path:
        try:
            written = write_placeholder_settings(write_config_path)
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(written))
        return

    try:
        settings = build_generation_settings(
            input_path=input_path,
            include_mutations=True if include_mutations else None,
            print_introspection_request=print_introspection_request,
            endpoint_url=endpoint_url,
            output_path=output_path,
            settings_file=load_settings_file(config_path) if config_path else None,
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    if settings.print_introspection_request:
        encodings = build_request_encodings(settings.endpoint_url)
        click.echo(render_request_encodings(encodings), nl=False)
        return

    _generate(settings)


def _generate(settings: GenerationSettings) -> None:
    if settings.input_path is None:
        raise click.UsageError(MISSING_INPUT_MESSAGE)
    try:
        outcome = generate_smoke_operations(
            GenerationRequest(
                input_path=settings.input_path,
                include_mutations=settings.include_mutations,
            )
        )
    except GenerationError as exc:
        raise CliError(str(exc)) from exc

    try:
        written = write_operation_listing(outcome.operation_texts, settings.output_path)
    except OSError as exc:
        raise CliError(f"Error writing operations: {exc}") from exc
    for notice in outcome.notices:
        click.echo(notice, err=True)
    if written is not None:
        click.echo(str(written), err=True)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.UsageError as exc:
        click.echo(BANNER, err=True)
        exc.show()
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
