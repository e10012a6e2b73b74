"""Parse-multi command - converts a whole interfaces document to JSON."""

from typing import BinaryIO

import click

from ifupdown.errors import ParseError
from ifupdown.parser.multi import MultiParser
from ifupdown.utils.logger import Logger


def run_parse_multi(source: BinaryIO, indent: int | None = 4) -> None:
    """Parse a document and print the valid interfaces as a JSON object.

    Stanzas that fail to parse or validate are left out and reported on
    the log.

    Args:
        source: Binary stream holding the document.
        indent: JSON indentation, None for compact output.
    """
    log = Logger.get("cli.parse_multi")

    parser = MultiParser()
    parser.write(source.read())
    try:
        interfaces = parser.parse()
    except ParseError as e:
        for err in e.errors:
            log.error(str(err))
        interfaces = e.interfaces

    for name, err in interfaces.drop_invalid().items():
        log.error(f"{name}: skip due to error: {err}")

    log.info(f"parsed {len(interfaces)} interfaces: {', '.join(interfaces)}")
    click.echo(interfaces.to_json(indent=indent))
