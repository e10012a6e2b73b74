"""Text parsers for /etc/network/interfaces."""

from ifupdown.parser.block import parse_block
from ifupdown.parser.multi import MultiParser

__all__ = [
    "MultiParser",
    "parse_block",
]
