"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_pruner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from openapi_pruner.root_selection import InvalidArgumentsError
from openapi_pruner.run_execution import PruneRequest, RunExecutionError, execute_prune_run


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-pruner")
def cli() -> None:
    """Extract a self-contained subset of an OpenAPI document."""


@cli.command(name="prune")
@click.argument("schema", required=False)
@click.argument("target", required=False)
@click.argument("shared_name", required=False)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML configuration file; environment variables take precedence",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def prune(
    schema: str | None,
    target: str | None,
    shared_name: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Keep TARGET's table and function paths plus the components they reference.

    SHARED_NAME, when given, replaces TARGET as the requested table and
    function name.
    """
    _configure_logging(verbose)
    try:
        outcome = execute_prune_run(
            PruneRequest(
                schema=schema,
                target=target,
                shared_name=shared_name,
                config_path=config_path,
            )
        )
    except (InvalidArgumentsError, RunExecutionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"Wrote {outcome.output_path}")
    click.echo(f"Schema: {outcome.schema}")
    click.echo(f"Target: {outcome.target}")
    click.echo(f"Kept paths: {outcome.kept_paths}")
    click.echo(f"Kept definitions: {outcome.kept_definitions}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("openapi_pruner").setLevel(level)


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
