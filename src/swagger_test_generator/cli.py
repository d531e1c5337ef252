"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any

import click

from swagger_test_generator.api_documents import ApiDocumentError, load_api_document
from swagger_test_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GeneratorSettings,
    compile_path_pattern,
    load_configuration,
    parse_string_list,
    write_placeholder_configuration,
)
from swagger_test_generator.test_generation import (
    GenerationRequest,
    TestGenerationError,
    generate_test_files,
    list_tags,
    resolve_templates,
)

_PACKAGE_LOGGER_NAME = "swagger_test_generator"


class CliError(Exception):
    """Custom CLI error."""


def _config_option(command):
    return click.option(
        "--config",
        "config_path",
        required=False,
        type=click.Path(path_type=str),
        help="Path to a YAML generator configuration file",
    )(command)


def _api_docs_option(command):
    return click.option(
        "--api-docs",
        "api_docs",
        required=False,
        type=click.Path(path_type=str),
        help="Path to the Swagger/OpenAPI document (YAML or JSON)",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swagger-test-generator")
@click.option("--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Generate Mocha test specs from Swagger/OpenAPI documents."""
    if verbose:
        _enable_console_logging()


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
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-tags")
@_config_option
@_api_docs_option
def list_tags_command(config_path: str | None, api_docs: str | None) -> None:
    """List tag names and descriptions of the API document."""
    settings = _resolve_settings(config_path, {"api_docs": api_docs})
    document = _load_document(settings)
    for name, description in list_tags(document):
        click.echo(f"{name}\t{description}" if description else name)


@cli.command(name="generate")
@_config_option
@_api_docs_option
@click.option("--tag-names", help="Comma separated tag names to generate test files for")
@click.option("--methods", help="Comma separated HTTP methods to include in test files")
@click.option(
    "--match-path",
    help="Only paths which match this case-insensitive regular expression are included",
)
@click.option(
    "--required-properties-only/--all-properties",
    default=None,
    help="Only include required properties in generated examples and assertions",
)
@click.option(
    "--file-template",
    type=click.Path(path_type=str),
    help="Path to a template file for the test file",
)
@click.option(
    "--test-template",
    type=click.Path(path_type=str),
    help="Path to a template file for one test case",
)
@click.option("--file-name", help="File name template to save test files as")
@click.option(
    "--directory",
    type=click.Path(path_type=str),
    help="Directory to save test files in",
)
@click.option(
    "--overwrite/--no-overwrite",
    default=None,
    help="Overwrite existing test files",
)
def generate(config_path: str | None, **options: Any) -> None:
    """Generate one Mocha spec file per tag."""
    settings = _resolve_settings(config_path, options)
    document = _load_document(settings)
    try:
        templates = resolve_templates(
            file_template=settings.file_template,
            test_template=settings.test_template,
            file_name_template=settings.file_name,
        )
        written = generate_test_files(
            document,
            GenerationRequest(
                directory=settings.directory,
                tag_names=settings.tag_names,
                methods=settings.methods,
                path_pattern=settings.match_path,
                required_only=settings.required_properties_only,
                overwrite=settings.overwrite,
                templates=templates,
            ),
        )
    except TestGenerationError as exc:
        raise CliError(str(exc)) from exc
    for path in written:
        click.echo(str(path))


def _resolve_settings(config_path: str | None, options: dict[str, Any]) -> GeneratorSettings:
    try:
        settings = (
            load_configuration(config_path).generator if config_path else GeneratorSettings()
        )
        overrides = _parse_overrides(options)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    return dataclasses.replace(settings, **overrides)


def _parse_overrides(options: dict[str, Any]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name, value in options.items():
        if value is None:
            continue
        if name in ("api_docs", "file_template", "test_template", "directory"):
            overrides[name] = Path(value)
        elif name in ("tag_names", "methods"):
            entries = parse_string_list(value, f"--{name.replace('_', '-')}")
            if entries is not None:
                overrides[name] = (
                    tuple(entry.upper() for entry in entries) if name == "methods" else entries
                )
        elif name == "match_path":
            overrides[name] = compile_path_pattern(value, "--match-path")
        else:
            overrides[name] = value
    return overrides


def _load_document(settings: GeneratorSettings):
    if settings.api_docs is None:
        raise CliError("An API document is required: pass --api-docs or set generator.api_docs.")
    try:
        return load_api_document(settings.api_docs)
    except ApiDocumentError as exc:
        raise CliError(str(exc)) from exc


def _enable_console_logging() -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
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
