"""Collection of interfaces keyed by name."""

from __future__ import annotations

import json
from typing import Any

from ifupdown.errors import InterfaceHasErrorsError
from ifupdown.models.interface_models import NetworkInterface
from ifupdown.serializer import render_interfaces


class Interfaces(dict[str, NetworkInterface]):
    """Mapping of interface name to ``NetworkInterface``.

    Every value's ``name`` equals its key. ``str()`` renders the whole
    /etc/network/interfaces document; JSON encodes as an object keyed by
    interface name.
    """

    @classmethod
    def from_text(cls, data: str | bytes) -> Interfaces:
        """Parse a whole document.

        Raises:
            ParseError: If any stanza failed to parse.
        """
        from ifupdown.parser.multi import MultiParser

        parser = MultiParser()
        parser.write(data)
        return parser.parse()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Interfaces:
        """Decode a mapping of name to record.

        Null entries are skipped. Each record takes its name from its key
        and is marked allocated.

        Raises:
            TypeError: If ``data`` or an entry is not a JSON object.
            pydantic.ValidationError: If a record has an invalid field.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        interfaces = cls()
        for name, record in data.items():
            if record is None:
                continue
            if not isinstance(record, dict):
                raise TypeError(f"{name}: expected a JSON object")
            interfaces[name] = NetworkInterface.from_dict(record, name=name)
        return interfaces

    @classmethod
    def from_json(cls, text: str | bytes) -> Interfaces:
        return cls.from_dict(json.loads(text))

    def validate(self) -> dict[str, InterfaceHasErrorsError]:
        """Validate every interface.

        Returns:
            Mapping of name to error for the interfaces that failed.
        """
        failed = {}
        for name, iface in self.items():
            err = iface.validate()
            if err is not None:
                failed[name] = err
        return failed

    def drop_invalid(self) -> dict[str, InterfaceHasErrorsError]:
        """Remove interfaces that fail validation.

        Returns:
            Mapping of removed name to its validation error.
        """
        failed = self.validate()
        for name in failed:
            del self[name]
        return failed

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: iface.to_dict() for name, iface in self.items()}

    def to_json(self, indent: int | None = 4) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return render_interfaces(self)
