"""JSON-to-ifup command - renders JSON interface records as text."""

from typing import BinaryIO

import click
from pydantic import ValidationError

from ifupdown.interfaces import Interfaces
from ifupdown.utils.logger import Logger


def run_json_to_ifup(source: BinaryIO) -> None:
    """Read a JSON object of interfaces and print the interfaces document.

    Interfaces that fail validation are skipped with a logged error.

    Args:
        source: Binary stream holding the JSON object.

    Raises:
        click.ClickException: If the input is not a valid JSON object of
            interface records.
    """
    log = Logger.get("cli.json_to_ifup")
    try:
        interfaces = Interfaces.from_json(source.read())
    except (ValueError, TypeError, ValidationError) as e:
        raise click.ClickException(f"invalid interface JSON: {e}") from e

    for name, err in interfaces.drop_invalid().items():
        log.error(f"{name}: skip due to error: {err}")

    click.echo(str(interfaces), nl=False)
