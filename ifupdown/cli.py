#!/usr/bin/env python3
"""ifupdown CLI - convert between /etc/network/interfaces text and JSON."""

import click

from ifupdown.utils.env import JSON_INDENT_VAR, LOG_LEVEL_VAR, EnvVarTypeError, get_env
from ifupdown.utils.logger import Logger


def _configure_logging(verbose: bool = False) -> None:
    """Send logs to stderr, stdout carries the converted output."""
    level = "DEBUG" if verbose else get_env(LOG_LEVEL_VAR, default="WARNING")
    try:
        Logger.configure(level=level, output="stderr", timestamps=False)
    except ValueError as e:
        raise click.ClickException(f"invalid ${LOG_LEVEL_VAR}: {level}") from e


def _json_indent(indent: int | None) -> int | None:
    if indent is None:
        try:
            indent = get_env(JSON_INDENT_VAR, default=4, as_type=int)
        except EnvVarTypeError as e:
            raise click.ClickException(str(e)) from e
    # 0 means compact
    return indent or None


verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Log debug output to stderr"
)
indent_option = click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help=f"JSON indentation, 0 for compact output (default: ${JSON_INDENT_VAR} or 4)",
)
source_argument = click.argument("source", type=click.File("rb"), default="-")


@click.group()
def ifupdown():
    """Convert between /etc/network/interfaces and JSON."""


@ifupdown.command()
@source_argument
@indent_option
@verbose_option
def parse(source, indent, verbose):
    r"""Parse a single interface stanza into JSON.

    Reads SOURCE, or stdin when SOURCE is '-' or omitted. Validation errors
    are reported on stderr without failing the command.

    \b
    Examples:
      ifupdown parse eth0.cfg
      printf 'iface eth0 inet dhcp\n' | ifupdown parse
    """
    from ifupdown.commands.parse_cmd import run_parse

    _configure_logging(verbose)
    run_parse(source, indent=_json_indent(indent))


@ifupdown.command("parse-multi")
@source_argument
@indent_option
@verbose_option
def parse_multi(source, indent, verbose):
    r"""Parse a whole interfaces document into a JSON object.

    Interfaces that fail to parse or validate are dropped with a diagnostic
    on stderr.

    \b
    Examples:
      ifupdown parse-multi /etc/network/interfaces
      cat interfaces | ifupdown parse-multi --indent 0
    """
    from ifupdown.commands.parse_multi_cmd import run_parse_multi

    _configure_logging(verbose)
    run_parse_multi(source, indent=_json_indent(indent))


@ifupdown.command("json-to-ifup")
@source_argument
@verbose_option
def json_to_ifup(source, verbose):
    r"""Render a JSON object of interfaces as an interfaces document.

    \b
    Examples:
      ifupdown json-to-ifup interfaces.json > /etc/network/interfaces
    """
    from ifupdown.commands.json_cmd import run_json_to_ifup

    _configure_logging(verbose)
    run_json_to_ifup(source)


@ifupdown.command()
@verbose_option
def version(verbose):
    """Display ifupdown version information."""
    from ifupdown.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    ifupdown()
