"""Split a whole interfaces document into stanzas and parse each one."""

from __future__ import annotations

import threading
from io import StringIO

from ifupdown.errors import DuplicateInterfaceError, IfupdownError, ParseError
from ifupdown.interfaces import Interfaces
from ifupdown.models.constants import BLOCK_START_KEYWORDS, BLOCK_START_PREFIXES
from ifupdown.models.interface_models import NetworkInterface
from ifupdown.parser.block import iter_directives
from ifupdown.utils.logger import Logger

UNKNOWN_INTERFACE = "unknown"

_LOG_NAME = "parser.multi"


def is_block_start(fields: list[str]) -> bool:
    """Check whether a directive line opens an interface block.

    ``auto``, ``allow-*`` and ``iface`` lines that name an interface do.
    """
    if len(fields) < 2:
        return False
    keyword = fields[0]
    return keyword in BLOCK_START_KEYWORDS or keyword.startswith(BLOCK_START_PREFIXES)


class MultiParser:
    """Parser for documents holding any number of interface stanzas.

    Text is collected with ``write()``, which may be called from several
    threads, then parsed in one go with ``parse()``:

        >>> parser = MultiParser()
        >>> parser.write(b"auto lo\\niface lo inet loopback\\n")
        31
        >>> sorted(parser.parse())
        ['lo']

    A block runs from the line that opens it to the line opening the next
    interface. ``auto eth0`` followed by ``iface eth0 ...`` stays one block,
    while a second ``iface`` stanza for the same name (an inet6 stanza next
    to an inet one) starts a new block.
    """

    def __init__(self) -> None:
        self.interfaces = Interfaces()
        self.errors: list[IfupdownError] = []
        self._buf = bytearray()
        self._lock = threading.Lock()

    def write(self, data: str | bytes) -> int:
        """Append document text.

        Returns:
            Number of bytes appended, ``len(data)`` for bytes input.
        """
        encoded = data.encode() if isinstance(data, str) else data
        with self._lock:
            self._buf.extend(encoded)
        return len(encoded)

    def parse(self) -> Interfaces:
        """Parse everything written so far.

        Must not be called from several threads at once.

        Returns:
            Mapping of interface name to interface. Interfaces are parsed but
            not validated.

        Raises:
            ParseError: If any block failed to parse. The error carries the
                interfaces that did parse and every block error.
        """
        with self._lock:
            text = self._buf.decode(errors="replace")

        self.interfaces = Interfaces()
        self.errors = []

        current_name = ""
        pending = StringIO()
        pending_has_iface = False

        for fields, line in iter_directives(text):
            if is_block_start(fields):
                name = fields[1]
                new_stanza = fields[0] == "iface" and pending_has_iface
                if current_name and (name != current_name or new_stanza):
                    self._flush(pending.getvalue(), current_name)
                    pending = StringIO()
                    pending_has_iface = False
                current_name = name
            if fields[0] == "iface":
                pending_has_iface = True
            pending.write(line)
            pending.write("\n")

        if pending.getvalue():
            self._flush(pending.getvalue(), current_name or UNKNOWN_INTERFACE)

        Logger.debug(
            _LOG_NAME,
            f"parsed {len(self.interfaces)} interfaces, {len(self.errors)} errors",
        )
        if self.errors:
            raise ParseError(self.errors, self.interfaces)
        return self.interfaces

    def _flush(self, block: str, name: str) -> None:
        """Parse one block and file it under its interface name.

        The name from the block's iface directive wins over ``name``, the
        provisional name of the line that opened the block.
        """
        iface = NetworkInterface(name=name)
        try:
            iface.write(block)
        except IfupdownError as e:
            Logger.warning(_LOG_NAME, f"{name}: {e}")
            self.errors.append(e)
            return

        if iface.name in self.interfaces:
            err = DuplicateInterfaceError(iface.name)
            Logger.warning(_LOG_NAME, f"{err}, keeping the later stanza")
            self.errors.append(err)
        self.interfaces[iface.name] = iface
