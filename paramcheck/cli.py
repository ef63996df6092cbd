"""paramcheck is a CLI for inspecting the validation rules declared in a
Python code base.

This module implements commands available from the paramcheck CLI.
"""

from __future__ import annotations

import logging
import sys
import traceback
from typing import IO, Any

import click
import yaml

from paramcheck import __version__ as version
from paramcheck.config import settings_summary
from paramcheck.logging import configure_logging
from paramcheck.utils import load_module
from paramcheck.validation.schema import ValidationSchema
from paramcheck.validation.store import SchemaRegistry, registry

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class ParamCheckCliError(click.exceptions.ClickException):
    """Exceptions generated from the paramcheck CLI.

    Users should pass an appropriate message at the constructor.
    """

    VERBOSE_ERROR = False

    def show(self, file: IO | None = None) -> None:
        if self.VERBOSE_ERROR:
            click.secho(traceback.format_exc(), nl=False, fg="yellow")
        else:
            etype, value, _ = sys.exc_info()
            formatted_exception = "".join(traceback.format_exception_only(etype, value))
            click.secho(
                f"{formatted_exception}Run with --verbose to see the full exception",
                fg="yellow",
            )
        click.secho(f"Error: {self.message}", fg="red", file=file)


@click.group(context_settings=CONTEXT_SETTINGS, name="paramcheck")
@click.version_option(version, "--version", "-V", help="Show version and exit")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="See extensive logging and error stack traces.",
)
def cli(verbose: bool) -> None:
    """paramcheck inspects the parameter rules declared with its decorators."""
    ParamCheckCliError.VERBOSE_ERROR = verbose
    configure_logging()
    if verbose:
        # Validation failures and registrations are logged at DEBUG.
        logging.getLogger("paramcheck").setLevel(logging.DEBUG)


@cli.command()
def info() -> None:
    """Show the paramcheck version and the active settings."""
    click.secho(f"paramcheck v{version}", fg="green")
    click.echo(yaml.dump({"settings": settings_summary()}, sort_keys=False))


@cli.command()
@click.argument("module", nargs=1)
@click.option(
    "--owner",
    "-o",
    default=None,
    help="Only show the methods of this class.",
)
def schemas(module: str, owner: str | None) -> None:
    """Describe the validation schemas declared in MODULE."""
    try:
        load_module(module)
    except ImportError as exc:
        raise ParamCheckCliError(f"Unable to import module '{module}': {exc}") from exc

    result = describe_schemas(registry, module, owner)
    if not result:
        click.echo(f"No validation schemas registered in '{module}'.")
        return
    click.echo(yaml.dump(result))


def describe_schemas(
    schema_registry: SchemaRegistry, module: str, owner: str | None = None
) -> dict[str, Any]:
    """Collect the schemas declared in ``module`` as plain data."""
    result = {}
    for (key_owner, method_name), schema in schema_registry.items():
        if isinstance(key_owner, type):
            owner_module, owner_name = key_owner.__module__, key_owner.__qualname__
            label = f"{owner_name}.{method_name}"
        else:
            owner_module = key_owner.__module__ if callable(key_owner) else key_owner
            owner_name = None
            label = method_name
        if owner_module != module:
            continue
        if owner is not None and owner_name != owner:
            continue
        result[label] = _describe(schema)
    return result


def _describe(schema: ValidationSchema) -> dict[str, Any]:
    return {
        "required": list(schema.required_parameters or ()),
        "validators": [
            {"position": validator.position, "message": validator.message}
            for validator in schema.custom_validators or ()
        ],
    }


def main() -> None:  # pragma: no cover
    """Main entry point. Run the paramcheck CLI."""
    cli()
