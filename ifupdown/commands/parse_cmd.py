"""Parse command - converts a single interface stanza to JSON."""

from typing import BinaryIO

import click

from ifupdown.errors import IfupdownError
from ifupdown.models.interface_models import NetworkInterface
from ifupdown.utils.logger import Logger


def run_parse(source: BinaryIO, indent: int | None = 4) -> None:
    """Parse one stanza and print it as JSON.

    Validation errors are logged but do not change the exit status; only
    text that cannot be parsed at all does.

    Args:
        source: Binary stream holding the stanza text.
        indent: JSON indentation, None for compact output.
    """
    log = Logger.get("cli.parse")
    data = source.read()
    log.debug(f"read {len(data)} bytes from {getattr(source, 'name', 'input')}")

    iface = NetworkInterface()
    try:
        iface.write(data)
    except IfupdownError as e:
        raise click.ClickException(str(e)) from e

    err = iface.validate()
    if err is not None:
        log.error(str(err))

    click.echo(iface.to_json(indent=indent))
