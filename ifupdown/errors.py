"""Exceptions raised and collected while parsing, validating and rendering.

Builder methods never raise: they record one of the validation errors below
on the interface and the error surfaces from ``NetworkInterface.validate()``
wrapped in an ``InterfaceHasErrorsError``. Structural problems found by the
text parsers are raised immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ifupdown.interfaces import Interfaces


class IfupdownError(Exception):
    """Base exception for all ifupdown errors."""

    message = "ifupdown error"

    def __init__(self, detail: Any = None) -> None:
        self.detail = detail
        if detail is None or detail == "":
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {detail}")


# Structural


class InvalidIfaceDataError(IfupdownError):
    """Raised when a directive in interface text cannot be understood."""

    message = "invalid interface data provided"


class MultipleInterfacesError(IfupdownError):
    """Raised when single-interface text holds more than one iface stanza."""

    message = "multiple interfaces in data provided"


class UnallocatedInterfaceError(IfupdownError):
    """The interface was never populated by a builder, parser or decoder."""

    message = "unallocated interface"


class BufferTooSmallError(IfupdownError):
    """Raised by ``NetworkInterface.read`` when the target buffer is short."""

    message = "short buffer"


# Validation


class InvalidAddressError(IfupdownError):
    message = "invalid address"


class InvalidMaskError(IfupdownError):
    message = "invalid mask"


class InvalidBroadcastError(IfupdownError):
    message = "invalid broadcast"


class InvalidGatewayError(IfupdownError):
    message = "invalid gateway"


class InvalidAddressVersionError(IfupdownError):
    message = "invalid address version"


class InvalidDNSServerError(IfupdownError):
    message = "invalid dns server"


class InvalidMACAddressError(IfupdownError):
    message = "invalid mac address"


class ConfigNotSetError(IfupdownError):
    message = "address config not set"


class AddressSetWhenDHCPError(IfupdownError):
    message = "address set when DHCP enabled"


class AddressNotSetStaticError(IfupdownError):
    message = "address not set with static config"


class MaskNotSetStaticError(IfupdownError):
    message = "mask not set with static config"


# Name kept as published.
class AdressNotLoopbackError(IfupdownError):
    message = "address must be loopback when config is loopback"


class InterfaceHasErrorsError(IfupdownError):
    """Umbrella error returned by validation.

    Holds every specific error found on one interface. Use ``has()`` to test
    for a particular kind::

        err = iface.validate()
        if err is not None and err.has(MaskNotSetStaticError):
            ...
    """

    message = "interface has errors"

    def __init__(self, errors: list[IfupdownError]) -> None:
        self.errors = list(errors)
        super().__init__(", ".join(str(e) for e in self.errors))

    def has(self, error_type: type[Exception]) -> bool:
        """Check whether any wrapped error is an instance of ``error_type``."""
        return any(isinstance(e, error_type) for e in self.errors)


class DuplicateInterfaceError(IfupdownError):
    """Two blocks of one document resolved to the same interface name."""

    message = "duplicate interface"


class ParseError(IfupdownError):
    """Raised by ``MultiParser.parse`` when one or more blocks failed.

    Attributes:
        errors: Per-block errors, in document order.
        interfaces: The interfaces that did parse.
    """

    message = "failed to parse interfaces"

    def __init__(
        self, errors: list[Exception], interfaces: Interfaces | None = None
    ) -> None:
        self.errors = list(errors)
        self.interfaces = interfaces
        super().__init__(", ".join(str(e) for e in self.errors))

    def has(self, error_type: type[Exception]) -> bool:
        """Check whether any block error is an instance of ``error_type``."""
        return any(isinstance(e, error_type) for e in self.errors)
